"""金額計算で共通に使う変換と丸め"""
from contextlib import contextmanager
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Iterator, Union

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


def to_decimal(value: Number) -> Decimal:
    """数値をDecimalに変換する

    floatは文字列表現を経由して変換するため、0.1 のような値も見た目どおりになる。
    NaN はそのまま Decimal('NaN') になり、数値として読めない文字列も NaN になる。
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except InvalidOperation:
        return Decimal("NaN")


@contextmanager
def nan_on_invalid_operation() -> Iterator[None]:
    """無効な演算（inf × 0、inf − inf など）を例外ではなく NaN にする"""
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        yield


def round_money(value: Decimal) -> Decimal:
    """小数点以下2桁に四捨五入する（NaN・無限大はそのまま返す）"""
    if not value.is_finite():
        return value
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
