"""請求書を削除するユースケース"""
import logging

from src.domain.repositories.invoice_repository import IInvoiceRepository

logger = logging.getLogger(__name__)


class DeleteInvoiceUseCase:
    """請求書を削除するユースケース"""

    def __init__(self, invoice_repository: IInvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(self, invoice_id: str) -> None:
        logger.info(f"請求書を削除します: {invoice_id}")
        try:
            await self.invoice_repository.delete(invoice_id)
        except Exception as e:
            logger.error(f"請求書の削除中にエラーが発生しました: {e}")
            raise
