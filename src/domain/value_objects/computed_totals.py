"""計算済み合計を表す値オブジェクト"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple


@dataclass(frozen=True)
class LineTotals:
    """明細1行分の計算結果"""

    amount: Decimal
    discount_amount: Decimal
    net: Decimal


@dataclass(frozen=True)
class ComputedTotals:
    """プレビュー表示用の合計"""

    subtotal: Decimal
    discount_amount: Decimal
    tax_amount: Decimal
    withholding_amount: Decimal
    total: Decimal


@dataclass(frozen=True)
class SubmissionTotals:
    """保存時に請求書・明細へ書き込む合計"""

    subtotal: Decimal
    discount_amount: Decimal
    total_before_tax: Decimal
    vat_amount: Decimal
    withholding_tax_amount: Decimal
    total: Decimal
    lines: Tuple[LineTotals, ...]
