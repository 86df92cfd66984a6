"""請求書エンティティ"""
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from src.domain.entities.client import Client
from src.domain.entities.company import Company


@dataclass(frozen=True)
class InvoiceLineItem:
    """保存済みの明細行（送信時点のスナップショット）"""

    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal
    discount_type: Optional[str] = None
    discount_value: Decimal = Decimal(0)
    discount_amount: Decimal = Decimal(0)
    vat_applicable: bool = True
    withholding_tax_applicable: bool = False
    id: Optional[str] = None
    invoice_id: Optional[str] = None


@dataclass(frozen=True)
class Invoice:
    """保存済みの請求書を表すエンティティ"""

    invoice_number: str
    client_id: str
    company_id: str
    issue_date: date
    due_date: date
    currency: str
    status: str
    subtotal: Decimal
    discount_amount: Decimal
    total_before_tax: Decimal
    vat_amount: Decimal
    withholding_tax_amount: Decimal
    total: Decimal
    discount_type: Optional[str] = None
    discount_value: Decimal = Decimal(0)
    notes: str = ""
    payment_terms_id: Optional[str] = None
    payment_date: Optional[date] = None
    line_items: List[InvoiceLineItem] = field(default_factory=list)
    client: Optional[Client] = None
    company: Optional[Company] = None
    id: Optional[str] = None
    created_at: Optional[datetime] = None

    def __post_init__(self):
        """バリデーション"""
        if not self.invoice_number:
            raise ValueError("請求書番号が空です")

        if self.issue_date > self.due_date:
            raise ValueError(
                f"発行日が支払期限より後です: {self.issue_date} > {self.due_date}"
            )
