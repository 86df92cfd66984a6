"""請求書一覧を取得するユースケース"""
import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import List

from src.domain.entities.invoice import Invoice
from src.domain.repositories.invoice_repository import IInvoiceRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InvoiceSummary:
    """一覧表示用の請求書"""

    id: str
    invoice_number: str
    client_name: str
    amount: Decimal
    currency: str
    due_date: date
    status: str

    @classmethod
    def from_invoice(cls, invoice: Invoice) -> "InvoiceSummary":
        return cls(
            id=invoice.id or "",
            invoice_number=invoice.invoice_number,
            client_name=invoice.client.name if invoice.client else "",
            amount=invoice.total,
            currency=invoice.currency,
            due_date=invoice.due_date,
            status=invoice.status,
        )


class ListInvoicesUseCase:
    """請求書を新しい順に一覧するユースケース"""

    def __init__(self, invoice_repository: IInvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(self) -> List[InvoiceSummary]:
        try:
            invoices = await self.invoice_repository.list()
        except Exception as e:
            logger.error(f"請求書一覧の取得中にエラーが発生しました: {e}")
            raise

        if not invoices:
            logger.info("請求書が見つかりませんでした")
            return []

        logger.info(f"{len(invoices)} 件の請求書を取得しました")
        return [InvoiceSummary.from_invoice(invoice) for invoice in invoices]
