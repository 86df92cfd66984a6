"""ダッシュボード用の集計を行うユースケース"""
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List

from src.domain.entities.invoice import Invoice
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.domain.value_objects.invoice_draft import InvoiceStatus
from src.usecases.list_invoices_use_case import InvoiceSummary

logger = logging.getLogger(__name__)

# グラフの系列: 支払済み / 未払い / 期限超過
PAID = "paid"
PENDING = "pending"
OVERDUE = "overdue"


@dataclass(frozen=True)
class DashboardSummary:
    """ダッシュボードの集計結果"""

    total_billed: Decimal
    total_paid: Decimal
    total_outstanding: Decimal
    count_by_status: Dict[str, int]
    monthly: Dict[str, Dict[str, Decimal]]
    recent: List[InvoiceSummary] = field(default_factory=list)


def _series(status: str) -> str:
    if status == InvoiceStatus.PAID:
        return PAID
    if status == InvoiceStatus.OVERDUE:
        return OVERDUE
    return PENDING


def summarize(invoices: List[Invoice], recent_limit: int = 5) -> DashboardSummary:
    """請求書を集計する（取消済みは金額に含めない）

    ``invoices`` は作成日の新しい順であることを前提に、先頭を最近の請求書とする。
    """
    count_by_status: Dict[str, int] = {status: 0 for status in InvoiceStatus.ALL}
    monthly: Dict[str, Dict[str, Decimal]] = defaultdict(
        lambda: {PAID: Decimal(0), PENDING: Decimal(0), OVERDUE: Decimal(0)}
    )
    total_billed = Decimal(0)
    total_paid = Decimal(0)

    for invoice in invoices:
        count_by_status[invoice.status] = count_by_status.get(invoice.status, 0) + 1
        if invoice.status == InvoiceStatus.CANCELLED:
            continue

        total_billed += invoice.total
        if invoice.status == InvoiceStatus.PAID:
            total_paid += invoice.total

        month = invoice.issue_date.strftime("%Y-%m")
        monthly[month][_series(invoice.status)] += invoice.total

    return DashboardSummary(
        total_billed=total_billed,
        total_paid=total_paid,
        total_outstanding=total_billed - total_paid,
        count_by_status=count_by_status,
        monthly=dict(sorted(monthly.items())),
        recent=[InvoiceSummary.from_invoice(invoice) for invoice in invoices[:recent_limit]],
    )


class DashboardSummaryUseCase:
    """ダッシュボードの集計を返すユースケース"""

    def __init__(self, invoice_repository: IInvoiceRepository, recent_limit: int = 5):
        self.invoice_repository = invoice_repository
        self.recent_limit = recent_limit

    async def execute(self) -> DashboardSummary:
        invoices = await self.invoice_repository.list()
        summary = summarize(invoices, self.recent_limit)
        logger.info(
            "ダッシュボードを集計しました",
            extra={"context": {"invoices": len(invoices), "total_billed": str(summary.total_billed)}},
        )
        return summary
