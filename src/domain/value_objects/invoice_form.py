"""請求書フォーム入力のスキーマ"""
from datetime import date
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from src.domain.value_objects.discount import Discount
from src.domain.value_objects.invoice_draft import SUPPORTED_CURRENCIES, InvoiceDraft, InvoiceStatus
from src.domain.value_objects.line_item import LineItem

DiscountType = Literal["percentage", "fixed"]


class LineItemForm(BaseModel):
    """明細行の入力"""

    description: str = Field(..., min_length=1, description="品目")
    quantity: Decimal = Field(..., ge=1, description="数量")
    rate: Decimal = Field(..., ge=0, description="単価")
    discount_type: Optional[DiscountType] = Field(default=None, description="明細割引の種類")
    discount_value: Decimal = Field(default=Decimal(0), ge=0, description="明細割引の値")
    vat_applicable: bool = Field(default=True, description="VAT対象")
    withholding_tax_applicable: bool = Field(default=False, description="源泉徴収対象")

    def to_line_item(self) -> LineItem:
        return LineItem(
            description=self.description,
            quantity=self.quantity,
            rate=self.rate,
            discount=Discount.from_fields(self.discount_type, self.discount_value),
            vat_applicable=self.vat_applicable,
            withholding_tax_applicable=self.withholding_tax_applicable,
        )


class InvoiceForm(BaseModel):
    """請求書作成フォームの入力

    計算ロジックは入力を検証しないため、範囲チェックや日付の前後関係はここで行う。
    """

    invoice_number: str = Field(..., min_length=1, description="請求書番号")
    client_id: str = Field(..., min_length=1, description="請求先ID")
    company_id: str = Field(..., min_length=1, description="請求元会社ID")
    payment_terms_id: Optional[str] = Field(default=None, description="支払条件ID")
    issue_date: date = Field(..., description="発行日")
    due_date: date = Field(..., description="支払期限")
    currency: str = Field(default="KES", description="通貨コード")
    notes: str = Field(default="", description="備考")
    status: str = Field(default=InvoiceStatus.DRAFT, description="ステータス")
    discount_type: Optional[DiscountType] = Field(default=None, description="請求書割引の種類")
    discount_value: Decimal = Field(default=Decimal(0), ge=0, description="請求書割引の値")
    tax_rate: Decimal = Field(default=Decimal(16), ge=0, le=100, description="VAT率（%）")
    vat_applicable: bool = Field(default=True, description="VATを加算するか")
    withholding_tax_applicable: bool = Field(default=False, description="源泉徴収を差し引くか")
    line_items: List[LineItemForm] = Field(..., min_length=1, description="明細")

    @field_validator("currency")
    @classmethod
    def validate_currency(cls, v: str) -> str:
        """通貨コードのバリデーション"""
        if v not in SUPPORTED_CURRENCIES:
            raise ValueError(f"通貨は {list(SUPPORTED_CURRENCIES)} のいずれかである必要があります")
        return v

    @field_validator("status")
    @classmethod
    def validate_status(cls, v: str) -> str:
        """ステータスのバリデーション"""
        if v not in InvoiceStatus.ALL:
            raise ValueError(f"ステータスは {list(InvoiceStatus.ALL)} のいずれかである必要があります")
        return v

    @model_validator(mode="after")
    def validate_dates(self) -> "InvoiceForm":
        """支払期限が発行日より前でないことを確認する"""
        if self.due_date < self.issue_date:
            raise ValueError(f"支払期限が発行日より前です: {self.due_date} < {self.issue_date}")
        return self

    def to_draft(self) -> InvoiceDraft:
        """検証済みの入力を下書きに変換する"""
        return InvoiceDraft(
            line_items=tuple(item.to_line_item() for item in self.line_items),
            issue_date=self.issue_date,
            due_date=self.due_date,
            tax_rate=self.tax_rate,
            vat_applicable=self.vat_applicable,
            withholding_tax_applicable=self.withholding_tax_applicable,
            discount=Discount.from_fields(self.discount_type, self.discount_value),
            currency=self.currency,
            invoice_number=self.invoice_number,
            client_id=self.client_id,
            company_id=self.company_id,
            payment_terms_id=self.payment_terms_id,
            notes=self.notes,
            status=self.status,
        )
