"""設定の読み込みを行うサービス"""
import logging
import os
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from src.domain.value_objects.application_config import (
    DEFAULT_PRINT_COPIES,
    ApplicationConfig,
    TemplateName,
)
from src.domain.value_objects.credentials import DataStoreCredentials
from src.domain.value_objects.invoice_draft import SUPPORTED_CURRENCIES


class ConfigLoader:
    """環境変数から設定を読み込むサービス"""

    def __init__(self, project_root: Path) -> None:
        """初期化

        Args:
            project_root: プロジェクトルートディレクトリ
        """
        self.project_root = project_root
        self.logger = logging.getLogger(__name__)

    def load_config(self) -> ApplicationConfig:
        """アプリケーション設定を読み込む

        不正な値は警告を出して既定値に置き換える。

        Returns:
            ApplicationConfig: アプリケーション設定
        """
        load_dotenv()

        values = {"log_level": os.getenv("LOG_LEVEL", "INFO")}

        currency = self._parse_currency(os.getenv("DEFAULT_CURRENCY"))
        if currency:
            values["default_currency"] = currency

        tax_rate = self._parse_tax_rate(os.getenv("DEFAULT_TAX_RATE"))
        if tax_rate is not None:
            values["default_tax_rate"] = tax_rate

        prefix = os.getenv("INVOICE_PREFIX")
        if prefix:
            values["invoice_prefix"] = prefix

        payment_terms_days = self._parse_payment_terms_days(os.getenv("DEFAULT_PAYMENT_TERMS_DAYS"))
        if payment_terms_days is not None:
            values["default_payment_terms_days"] = payment_terms_days

        template = self._parse_template(os.getenv("INVOICE_TEMPLATE"))
        if template:
            values["template"] = template

        values["print_copies"] = self._parse_print_copies(os.getenv("PRINT_COPIES"))

        output_dir = os.getenv("PDF_OUTPUT_DIR")
        values["pdf_output_dir"] = output_dir or str(self.project_root / "output")

        return ApplicationConfig(**values)

    def load_credentials(self) -> DataStoreCredentials:
        """データストアの接続情報を環境変数から読み込む

        Raises:
            ValueError: 必須の接続情報が設定されていない場合
        """
        load_dotenv()

        url = os.getenv("SUPABASE_URL")
        api_key = os.getenv("SUPABASE_ANON_KEY")

        if not url or not api_key:
            raise ValueError("SUPABASE_URL と SUPABASE_ANON_KEY を環境変数に設定してください")

        return DataStoreCredentials(url=url, api_key=api_key)

    def _parse_currency(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if value not in SUPPORTED_CURRENCIES:
            self.logger.warning(f"DEFAULT_CURRENCY の値が無効です: {value}。既定の通貨を使用します。")
            return None
        return value

    def _parse_tax_rate(self, value: Optional[str]) -> Optional[Decimal]:
        if not value:
            return None
        try:
            parsed = Decimal(value)
        except InvalidOperation:
            self.logger.warning(f"DEFAULT_TAX_RATE の値が無効です: {value}。既定のVAT率を使用します。")
            return None
        if not parsed.is_finite() or parsed < 0 or parsed > 100:
            self.logger.warning(f"DEFAULT_TAX_RATE の値が範囲外です: {value}。既定のVAT率を使用します。")
            return None
        return parsed

    def _parse_payment_terms_days(self, value: Optional[str]) -> Optional[int]:
        if not value:
            return None
        try:
            parsed = int(value)
        except ValueError:
            self.logger.warning(
                f"DEFAULT_PAYMENT_TERMS_DAYS の値が無効です: {value}。既定の日数を使用します。"
            )
            return None
        if parsed < 0:
            self.logger.warning(
                f"DEFAULT_PAYMENT_TERMS_DAYS の値が無効です: {value}。既定の日数を使用します。"
            )
            return None
        return parsed

    def _parse_template(self, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if value not in TemplateName.ALL:
            self.logger.warning(f"INVOICE_TEMPLATE の値が無効です: {value}。{TemplateName.MODERN} を使用します。")
            return None
        return value

    def _parse_print_copies(self, value: Optional[str]) -> List[str]:
        """カンマ区切りの控えラベルをパースする"""
        if not value:
            return list(DEFAULT_PRINT_COPIES)
        copies = [label.strip() for label in value.split(",") if label.strip()]
        return copies or list(DEFAULT_PRINT_COPIES)
