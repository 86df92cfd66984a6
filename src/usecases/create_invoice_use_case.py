"""請求書を作成するユースケース"""
import logging
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from src.domain.entities.invoice import Invoice, InvoiceLineItem
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.domain.services.invoice_calculator import calculate_draft_totals, calculate_submission_totals
from src.domain.services.invoice_number import next_invoice_number
from src.domain.value_objects.application_config import ApplicationConfig
from src.domain.value_objects.computed_totals import SubmissionTotals
from src.domain.value_objects.invoice_draft import InvoiceDraft
from src.domain.value_objects.invoice_form import InvoiceForm

logger = logging.getLogger(__name__)


def build_invoice(draft: InvoiceDraft, totals: SubmissionTotals) -> Invoice:
    """下書きと保存用合計から請求書エンティティを組み立てる"""
    return Invoice(
        invoice_number=draft.invoice_number,
        client_id=draft.client_id,
        company_id=draft.company_id,
        payment_terms_id=draft.payment_terms_id,
        issue_date=draft.issue_date,
        due_date=draft.due_date,
        currency=draft.currency,
        notes=draft.notes,
        status=draft.status,
        subtotal=totals.subtotal,
        discount_type=draft.discount.kind.value if draft.discount else None,
        discount_value=draft.discount.value if draft.discount else Decimal(0),
        discount_amount=totals.discount_amount,
        total_before_tax=totals.total_before_tax,
        vat_amount=totals.vat_amount,
        withholding_tax_amount=totals.withholding_tax_amount,
        total=totals.total,
    )


def build_line_items(draft: InvoiceDraft, totals: SubmissionTotals) -> List[InvoiceLineItem]:
    """下書きの明細を保存用の明細に変換する"""
    return [
        InvoiceLineItem(
            description=item.description,
            quantity=item.quantity,
            rate=item.rate,
            amount=line.amount,
            discount_type=item.discount.kind.value if item.discount else None,
            discount_value=item.discount.value if item.discount else Decimal(0),
            discount_amount=line.discount_amount,
            vat_applicable=item.vat_applicable,
            withholding_tax_applicable=item.withholding_tax_applicable,
        )
        for item, line in zip(draft.line_items, totals.lines)
    ]


class CreateInvoiceUseCase:
    """フォーム入力から請求書と明細を登録するユースケース"""

    def __init__(
        self,
        invoice_repository: IInvoiceRepository,
        config: ApplicationConfig,
    ):
        self.invoice_repository = invoice_repository
        self.config = config

    async def execute(self, data: Union[InvoiceForm, Dict[str, Any]]) -> Invoice:
        """請求書を作成する

        Args:
            data: フォーム入力（未検証のdictも可）。通貨・VAT率・支払期限・
                請求書番号が無い場合は設定値から補う。

        Returns:
            Invoice: 登録された請求書

        Raises:
            ValidationError: 入力が不正な場合
            DataStoreError: 登録に失敗した場合
        """
        try:
            form = data if isinstance(data, InvoiceForm) else await self._parse_form(data)
        except ValidationError as e:
            logger.error(f"請求書の入力が不正です: {e}")
            raise

        draft = form.to_draft()
        totals = calculate_submission_totals(draft)
        self._warn_if_totals_diverge(draft, totals)

        logger.info(
            f"請求書を作成します: {draft.invoice_number} "
            f"(合計: {draft.currency} {totals.total:,})"
        )
        try:
            invoice = await self.invoice_repository.create(
                build_invoice(draft, totals),
                build_line_items(draft, totals),
            )
        except Exception as e:
            logger.error(f"請求書の作成中にエラーが発生しました: {e}")
            raise

        logger.info(f"請求書の作成が完了しました: {invoice.invoice_number} (ID: {invoice.id})")
        return invoice

    async def _parse_form(self, data: Dict[str, Any]) -> InvoiceForm:
        values = dict(data)
        values.setdefault("currency", self.config.default_currency)
        values.setdefault("tax_rate", self.config.default_tax_rate)

        issue_date = values.get("issue_date") or date.today().isoformat()
        values["issue_date"] = issue_date
        if not values.get("due_date"):
            issue = issue_date if isinstance(issue_date, date) else date.fromisoformat(str(issue_date))
            values["due_date"] = issue + timedelta(days=self.config.default_payment_terms_days)

        if not values.get("invoice_number"):
            values["invoice_number"] = await self._next_invoice_number(values["issue_date"])

        return InvoiceForm.model_validate(values)

    async def _next_invoice_number(self, issue_date: Union[str, date]) -> str:
        year = issue_date.year if isinstance(issue_date, date) else date.fromisoformat(str(issue_date)).year
        existing = await self.invoice_repository.list()
        return next_invoice_number(
            self.config.invoice_prefix,
            year,
            (invoice.invoice_number for invoice in existing),
        )

    def _warn_if_totals_diverge(self, draft: InvoiceDraft, totals: SubmissionTotals) -> None:
        """プレビューと保存で合計が食い違う場合に警告する（どちらが正しいかは判断しない）"""
        preview = calculate_draft_totals(draft)
        if preview.total != totals.total:
            logger.warning(
                "プレビューと保存時の合計が一致しません",
                extra={"context": {
                    "invoice_number": draft.invoice_number,
                    "preview_total": str(preview.total),
                    "submission_total": str(totals.total),
                }},
            )
