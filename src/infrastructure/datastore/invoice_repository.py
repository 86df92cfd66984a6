"""請求書リポジトリのREST実装"""
import logging
from dataclasses import replace
from typing import List, Optional

from src.domain.entities.invoice import Invoice, InvoiceLineItem
from src.domain.exceptions import DataStoreError
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.infrastructure.datastore.mappers import (
    invoice_from_row,
    invoice_to_row,
    line_item_from_row,
    line_item_to_row,
)
from src.infrastructure.datastore.rest_client import DataStoreRestClient, eq

logger = logging.getLogger(__name__)

INVOICE_COLUMNS = "*,client:clients(*,company:companies(*)),company:companies(*),line_items(*)"


class RestInvoiceRepository(IInvoiceRepository):
    """invoices / line_items テーブルを操作するリポジトリ"""

    def __init__(self, client: DataStoreRestClient):
        self.client = client

    async def create(self, invoice: Invoice, line_items: List[InvoiceLineItem]) -> Invoice:
        rows = self.client.insert("invoices", [invoice_to_row(invoice)])
        if not rows:
            raise DataStoreError(f"請求書の登録結果が空です: {invoice.invoice_number}")
        created = invoice_from_row(rows[0])
        logger.info(
            "請求書を登録しました",
            extra={"context": {"invoice_id": created.id, "invoice_number": created.invoice_number}},
        )

        # 明細の登録に失敗した場合は明細のない請求書を残さない
        try:
            line_rows = self.client.insert(
                "line_items",
                [line_item_to_row(item, created.id) for item in line_items],
            )
        except Exception as e:
            logger.error(f"明細の登録に失敗したため請求書を削除します: {created.invoice_number} ({e})")
            self.client.delete("invoices", {"id": eq(created.id)})
            raise
        logger.info(f"明細を {len(line_rows)} 件登録しました")
        return replace(created, line_items=[line_item_from_row(row) for row in line_rows])

    async def list(self) -> List[Invoice]:
        rows = self.client.select("invoices", columns=INVOICE_COLUMNS, order="created_at.desc")
        return [invoice_from_row(row) for row in rows]

    async def get(self, invoice_id: str) -> Invoice:
        row = self.client.select_one(
            "invoices",
            columns=INVOICE_COLUMNS,
            filters={"id": eq(invoice_id)},
        )
        if not row:
            raise DataStoreError(f"請求書が見つかりません: {invoice_id}", status_code=404)
        return invoice_from_row(row)

    async def update(
        self,
        invoice_id: str,
        changes: dict,
        line_items: Optional[List[InvoiceLineItem]] = None,
    ) -> None:
        self.client.update("invoices", changes, filters={"id": eq(invoice_id)})

        if line_items is not None:
            self.client.delete("line_items", filters={"invoice_id": eq(invoice_id)})
            self.client.insert(
                "line_items",
                [line_item_to_row(item, invoice_id) for item in line_items],
            )
        logger.info(f"請求書を更新しました: {invoice_id}")

    async def delete(self, invoice_id: str) -> None:
        self.client.delete("invoices", filters={"id": eq(invoice_id)})
        logger.info(f"請求書を削除しました: {invoice_id}")
