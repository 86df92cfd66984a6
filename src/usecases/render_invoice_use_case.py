"""請求書をHTMLに描画するユースケース"""
import logging
from typing import Optional, Sequence

from src.domain.entities.client import Client
from src.domain.entities.company import Company
from src.domain.entities.invoice import Invoice
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.domain.services.invoice_calculator import calculate_draft_totals, calculate_line_totals
from src.domain.value_objects.invoice_draft import InvoiceDraft
from src.infrastructure.templates.template_renderer import (
    InvoiceTemplateRenderer,
    InvoiceView,
    InvoiceViewItem,
)

logger = logging.getLogger(__name__)


def invoice_view(invoice: Invoice) -> InvoiceView:
    """保存済みの請求書から表示内容を作る"""
    client = invoice.client
    company = invoice.company
    return InvoiceView(
        invoice_number=invoice.invoice_number,
        issue_date=invoice.issue_date.isoformat(),
        due_date=invoice.due_date.isoformat(),
        client_name=client.name if client else "",
        client_email=client.email if client else "",
        client_address=client.phone if client else "",
        company_name=company.name if company else "",
        company_details=company.details if company else "",
        company_logo=company.logo if company else None,
        currency=invoice.currency,
        subtotal=invoice.subtotal,
        discount=invoice.discount_amount,
        tax=invoice.vat_amount,
        withholding=invoice.withholding_tax_amount,
        total=invoice.total,
        notes=invoice.notes,
        items=[
            InvoiceViewItem(
                description=item.description,
                quantity=item.quantity,
                rate=item.rate,
                amount=item.amount,
            )
            for item in invoice.line_items
        ],
    )


def draft_view(
    draft: InvoiceDraft,
    client: Optional[Client] = None,
    company: Optional[Company] = None,
) -> InvoiceView:
    """下書きからプレビュー用の表示内容を作る（合計はプレビュー用の計算）"""
    totals = calculate_draft_totals(draft)
    return InvoiceView(
        invoice_number=draft.invoice_number,
        issue_date=draft.issue_date.isoformat(),
        due_date=draft.due_date.isoformat(),
        client_name=client.name if client else "",
        client_email=client.email if client else "",
        client_address=client.phone if client else "",
        company_name=company.name if company else "",
        company_details=company.details if company else "",
        company_logo=company.logo if company else None,
        currency=draft.currency,
        subtotal=totals.subtotal,
        discount=totals.discount_amount,
        tax=totals.tax_amount,
        withholding=totals.withholding_amount,
        total=totals.total,
        notes=draft.notes,
        items=[
            InvoiceViewItem(
                description=item.description,
                quantity=item.quantity,
                rate=item.rate,
                amount=calculate_line_totals(item).amount,
            )
            for item in draft.line_items
        ],
    )


class RenderInvoiceUseCase:
    """保存済みの請求書を選択したテンプレートで描画するユースケース"""

    def __init__(
        self,
        invoice_repository: IInvoiceRepository,
        renderer: InvoiceTemplateRenderer,
        default_template: Optional[str] = None,
        print_copies: Sequence[str] = (),
    ):
        self.invoice_repository = invoice_repository
        self.renderer = renderer
        self.default_template = default_template
        self.print_copies = list(print_copies)

    async def execute(
        self,
        invoice_id: str,
        template: Optional[str] = None,
        for_print: bool = False,
    ) -> str:
        """請求書をHTMLに描画する

        Args:
            invoice_id: 請求書ID
            template: テンプレート名（省略時は設定値）
            for_print: 控えごとに繰り返す印刷用HTMLにするか

        Returns:
            str: HTML
        """
        try:
            invoice = await self.invoice_repository.get(invoice_id)
        except Exception as e:
            logger.error(f"請求書の取得中にエラーが発生しました: {e}")
            raise

        return self.render(invoice_view(invoice), template, for_print)

    def render(self, view: InvoiceView, template: Optional[str] = None, for_print: bool = False) -> str:
        """表示内容をHTMLにする（下書きのプレビューにも使う）"""
        name = template or self.default_template
        if for_print:
            return self.renderer.render_print(view, name, copies=self.print_copies)
        return self.renderer.render(view, name)
