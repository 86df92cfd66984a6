"""請求書リポジトリのインターフェース"""
from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities.invoice import Invoice, InvoiceLineItem


class IInvoiceRepository(ABC):
    """請求書リポジトリのインターフェース"""

    @abstractmethod
    async def create(self, invoice: Invoice, line_items: List[InvoiceLineItem]) -> Invoice:
        """請求書と明細を登録する

        Args:
            invoice: 請求書エンティティ（idは未採番）
            line_items: 明細（invoice_idは未設定）

        Returns:
            Invoice: 採番済みの請求書

        Raises:
            DataStoreError: 登録に失敗した場合
        """
        pass

    @abstractmethod
    async def list(self) -> List[Invoice]:
        """請求書を作成日の新しい順に取得する"""
        pass

    @abstractmethod
    async def get(self, invoice_id: str) -> Invoice:
        """IDで請求書を取得する

        Raises:
            DataStoreError: 見つからない場合
        """
        pass

    @abstractmethod
    async def update(
        self,
        invoice_id: str,
        changes: dict,
        line_items: Optional[List[InvoiceLineItem]] = None,
    ) -> None:
        """請求書を更新する

        Args:
            invoice_id: 請求書ID
            changes: 更新する列と値
            line_items: 指定した場合は既存の明細を置き換える
        """
        pass

    @abstractmethod
    async def delete(self, invoice_id: str) -> None:
        """請求書を削除する"""
        pass
