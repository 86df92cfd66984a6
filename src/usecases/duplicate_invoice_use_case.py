"""請求書を複製するユースケース"""
import logging
from dataclasses import replace

from src.domain.entities.invoice import Invoice
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.domain.services.invoice_number import next_invoice_number
from src.domain.value_objects.invoice_draft import InvoiceStatus

logger = logging.getLogger(__name__)


class DuplicateInvoiceUseCase:
    """既存の請求書を新しい番号・下書きステータスで複製するユースケース"""

    def __init__(self, invoice_repository: IInvoiceRepository, invoice_prefix: str = "INV"):
        self.invoice_repository = invoice_repository
        self.invoice_prefix = invoice_prefix

    async def execute(self, invoice_id: str) -> Invoice:
        """請求書を複製する

        Args:
            invoice_id: 複製元の請求書ID

        Returns:
            Invoice: 登録された複製

        Raises:
            DataStoreError: 複製元が見つからない、または登録に失敗した場合
        """
        logger.info(f"請求書を複製します: {invoice_id}")

        try:
            source = await self.invoice_repository.get(invoice_id)
            existing = await self.invoice_repository.list()

            number = next_invoice_number(
                self.invoice_prefix,
                source.issue_date.year,
                (invoice.invoice_number for invoice in existing),
            )
            copy = replace(
                source,
                id=None,
                invoice_number=number,
                status=InvoiceStatus.DRAFT,
                payment_date=None,
                line_items=[],
                client=None,
                company=None,
                created_at=None,
            )
            line_items = [replace(item, id=None, invoice_id=None) for item in source.line_items]

            duplicated = await self.invoice_repository.create(copy, line_items)
        except Exception as e:
            logger.error(f"請求書の複製中にエラーが発生しました: {e}")
            raise

        logger.info(f"請求書を複製しました: {source.invoice_number} -> {duplicated.invoice_number}")
        return duplicated
