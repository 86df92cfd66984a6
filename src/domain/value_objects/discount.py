"""割引を表す値オブジェクト"""
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Optional

from src.domain.value_objects.money import Number, to_decimal


class DiscountKind(str, Enum):
    """割引の種類"""
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class Discount:
    """割引（率または固定額）

    割引なしは ``None`` で表す。値の範囲チェックはフォーム側で行い、
    ここでは検証しない。
    """

    kind: DiscountKind
    value: Decimal

    def __post_init__(self):
        object.__setattr__(self, "kind", DiscountKind(self.kind))
        object.__setattr__(self, "value", to_decimal(self.value))

    @classmethod
    def percentage(cls, value: Number) -> "Discount":
        return cls(DiscountKind.PERCENTAGE, to_decimal(value))

    @classmethod
    def fixed(cls, value: Number) -> "Discount":
        return cls(DiscountKind.FIXED, to_decimal(value))

    @classmethod
    def from_fields(cls, kind: Optional[str], value: Optional[Number]) -> Optional["Discount"]:
        """データストアの discount_type / discount_value 列から組み立てる"""
        if not kind:
            return None
        return cls(DiscountKind(kind), to_decimal(value if value is not None else 0))

    def amount_for(self, base: Decimal) -> Decimal:
        """基準額に対する割引額を返す

        固定額は基準額を超えても切り詰めない。
        """
        if self.kind is DiscountKind.PERCENTAGE:
            return base * self.value / Decimal(100)
        return self.value


def discount_amount(discount: Optional[Discount], base: Decimal) -> Decimal:
    """割引が無い場合は0を返す"""
    if discount is None:
        return Decimal(0)
    return discount.amount_for(base)
