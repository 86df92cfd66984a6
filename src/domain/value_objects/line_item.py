"""下書きの明細行を表す値オブジェクト"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from src.domain.value_objects.discount import Discount
from src.domain.value_objects.money import to_decimal


@dataclass(frozen=True)
class LineItem:
    """請求書下書きの1明細（数量 × 単価）"""

    description: str
    quantity: Decimal
    rate: Decimal
    discount: Optional[Discount] = None
    vat_applicable: bool = True
    withholding_tax_applicable: bool = False

    def __post_init__(self):
        object.__setattr__(self, "quantity", to_decimal(self.quantity))
        object.__setattr__(self, "rate", to_decimal(self.rate))

    @property
    def amount(self) -> Decimal:
        return self.quantity * self.rate

    def with_quantity(self, quantity) -> "LineItem":
        return replace(self, quantity=to_decimal(quantity))

    def with_rate(self, rate) -> "LineItem":
        return replace(self, rate=to_decimal(rate))

    def with_discount(self, discount: Optional[Discount]) -> "LineItem":
        return replace(self, discount=discount)
