"""アプリケーション設定を表す値オブジェクト"""
from decimal import Decimal
from typing import List

from pydantic import BaseModel, Field, field_validator

from src.domain.value_objects.invoice_draft import SUPPORTED_CURRENCIES


class TemplateName:
    """請求書テンプレート名の定数"""
    MODERN = "modern"
    MINIMAL = "minimal"

    ALL = (MODERN, MINIMAL)


DEFAULT_PRINT_COPIES = ["CUSTOMER COPY", "COMPANY COPY", "TAX COPY"]


class ApplicationConfig(BaseModel):
    """アプリケーション設定の値オブジェクト"""

    # ログ設定
    log_level: str = Field(default="INFO", description="ログレベル")

    # 請求書の既定値
    default_currency: str = Field(default="KES", description="既定の通貨コード")
    default_tax_rate: Decimal = Field(default=Decimal(16), description="既定のVAT率（%）")
    invoice_prefix: str = Field(default="INV", description="請求書番号の接頭辞")
    default_payment_terms_days: int = Field(default=30, description="既定の支払期限までの日数")

    # 出力設定
    template: str = Field(default=TemplateName.MODERN, description="請求書テンプレート")
    print_copies: List[str] = Field(default_factory=lambda: list(DEFAULT_PRINT_COPIES), description="印刷する控えのラベル")
    pdf_output_dir: str = Field(default="output", description="PDF出力先ディレクトリ")

    @field_validator("default_currency")
    @classmethod
    def validate_default_currency(cls, v: str) -> str:
        """通貨コードのバリデーション"""
        if v not in SUPPORTED_CURRENCIES:
            raise ValueError(f"通貨は {list(SUPPORTED_CURRENCIES)} のいずれかである必要があります")
        return v

    @field_validator("default_tax_rate")
    @classmethod
    def validate_default_tax_rate(cls, v: Decimal) -> Decimal:
        """VAT率のバリデーション"""
        if v < 0 or v > 100:
            raise ValueError(f"VAT率は0〜100である必要があります: {v}")
        return v

    @field_validator("template")
    @classmethod
    def validate_template(cls, v: str) -> str:
        """テンプレート名のバリデーション"""
        if v not in TemplateName.ALL:
            raise ValueError(f"テンプレートは {list(TemplateName.ALL)} のいずれかである必要があります")
        return v

    class Config:
        frozen = True
