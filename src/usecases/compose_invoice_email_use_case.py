"""請求書送付メールを組み立てるユースケース"""
import logging

from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.infrastructure.mail.mailto_composer import EmailDraft, compose_invoice_email

logger = logging.getLogger(__name__)


class ComposeInvoiceEmailUseCase:
    """請求先宛てのmailtoリンクを作るユースケース"""

    def __init__(self, invoice_repository: IInvoiceRepository):
        self.invoice_repository = invoice_repository

    async def execute(self, invoice_id: str) -> EmailDraft:
        invoice = await self.invoice_repository.get(invoice_id)

        if not invoice.client or not invoice.client.email:
            logger.warning(f"請求先のメールアドレスが未設定です: {invoice.invoice_number}")

        return compose_invoice_email(
            invoice_number=invoice.invoice_number,
            client_name=invoice.client.name if invoice.client else "",
            client_email=invoice.client.email if invoice.client else "",
            company_name=invoice.company.name if invoice.company else "",
        )
