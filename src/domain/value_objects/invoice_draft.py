"""請求書下書きを表す値オブジェクト"""
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal
from typing import Optional, Tuple

from src.domain.value_objects.discount import Discount
from src.domain.value_objects.line_item import LineItem
from src.domain.value_objects.money import to_decimal


class InvoiceStatus:
    """請求書ステータスの定数"""
    DRAFT = "draft"
    SENT = "sent"
    PAID = "paid"
    OVERDUE = "overdue"
    CANCELLED = "cancelled"

    ALL = (DRAFT, SENT, PAID, OVERDUE, CANCELLED)


SUPPORTED_CURRENCIES = ("KES", "USD", "EUR", "GBP")


@dataclass(frozen=True)
class InvoiceDraft:
    """送信前の請求書

    フォームの編集は既存の下書きを書き換えず、``with_*`` で新しい下書きを返す。
    同じ内容の下書きは等価かつハッシュ可能なので、合計計算のメモ化キーに使える。
    """

    line_items: Tuple[LineItem, ...]
    issue_date: date
    due_date: date
    tax_rate: Decimal = Decimal(16)
    vat_applicable: bool = True
    withholding_tax_applicable: bool = False
    discount: Optional[Discount] = None
    currency: str = "KES"
    invoice_number: str = ""
    client_id: str = ""
    company_id: str = ""
    payment_terms_id: Optional[str] = None
    notes: str = ""
    status: str = InvoiceStatus.DRAFT

    def __post_init__(self):
        object.__setattr__(self, "line_items", tuple(self.line_items))
        object.__setattr__(self, "tax_rate", to_decimal(self.tax_rate))

    def with_line_item(self, item: LineItem) -> "InvoiceDraft":
        """明細を末尾に追加した下書きを返す"""
        return replace(self, line_items=self.line_items + (item,))

    def with_line_item_replaced(self, index: int, item: LineItem) -> "InvoiceDraft":
        items = list(self.line_items)
        items[index] = item
        return replace(self, line_items=tuple(items))

    def without_line_item(self, index: int) -> "InvoiceDraft":
        items = list(self.line_items)
        del items[index]
        return replace(self, line_items=tuple(items))

    def with_discount(self, discount: Optional[Discount]) -> "InvoiceDraft":
        return replace(self, discount=discount)

    def with_tax_rate(self, tax_rate) -> "InvoiceDraft":
        return replace(self, tax_rate=to_decimal(tax_rate))

    def with_flags(
        self,
        vat_applicable: Optional[bool] = None,
        withholding_tax_applicable: Optional[bool] = None,
    ) -> "InvoiceDraft":
        changes = {}
        if vat_applicable is not None:
            changes["vat_applicable"] = vat_applicable
        if withholding_tax_applicable is not None:
            changes["withholding_tax_applicable"] = withholding_tax_applicable
        return replace(self, **changes)
