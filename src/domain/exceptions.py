"""アプリケーション共通の例外"""
from typing import Optional


class InvoicingError(Exception):
    """請求書管理の基底例外"""


class DataStoreError(InvoicingError):
    """データストアとの通信・応答の異常"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PdfRenderError(InvoicingError):
    """PDF変換の失敗"""
