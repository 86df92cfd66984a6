"""一覧・削除・複製・メール作成ユースケースのテスト"""
from unittest.mock import AsyncMock

import pytest

from src.domain.exceptions import DataStoreError
from src.usecases.compose_invoice_email_use_case import ComposeInvoiceEmailUseCase
from src.usecases.delete_invoice_use_case import DeleteInvoiceUseCase
from src.usecases.duplicate_invoice_use_case import DuplicateInvoiceUseCase
from src.usecases.list_invoices_use_case import ListInvoicesUseCase


@pytest.mark.asyncio
async def test_list_invoices(mock_invoice_repo, sample_invoice):
    mock_invoice_repo.list = AsyncMock(return_value=[sample_invoice])

    rows = await ListInvoicesUseCase(mock_invoice_repo).execute()

    assert len(rows) == 1
    assert rows[0].id == "invoice-1"
    assert rows[0].client_name == "Acme Corp"
    assert rows[0].amount == sample_invoice.total
    assert rows[0].status == "sent"


@pytest.mark.asyncio
async def test_list_invoices_empty(mock_invoice_repo):
    assert await ListInvoicesUseCase(mock_invoice_repo).execute() == []


@pytest.mark.asyncio
async def test_delete_invoice(mock_invoice_repo):
    await DeleteInvoiceUseCase(mock_invoice_repo).execute("invoice-1")

    mock_invoice_repo.delete.assert_called_once_with("invoice-1")


@pytest.mark.asyncio
async def test_delete_invoice_error(mock_invoice_repo):
    mock_invoice_repo.delete = AsyncMock(side_effect=DataStoreError("削除に失敗しました"))

    with pytest.raises(DataStoreError):
        await DeleteInvoiceUseCase(mock_invoice_repo).execute("invoice-1")


@pytest.mark.asyncio
async def test_duplicate_invoice(mock_invoice_repo, sample_invoice):
    """複製は新しい番号・下書きステータスで登録する"""
    mock_invoice_repo.get = AsyncMock(return_value=sample_invoice)
    mock_invoice_repo.list = AsyncMock(return_value=[sample_invoice])
    mock_invoice_repo.create = AsyncMock(side_effect=lambda invoice, lines: invoice)

    duplicated = await DuplicateInvoiceUseCase(mock_invoice_repo).execute("invoice-1")

    assert duplicated.invoice_number == "INV-2025-002"
    assert duplicated.status == "draft"
    assert duplicated.id is None
    assert duplicated.total == sample_invoice.total
    assert duplicated.client_id == sample_invoice.client_id

    _, lines = mock_invoice_repo.create.call_args.args
    assert len(lines) == 1
    assert lines[0].id is None
    assert lines[0].invoice_id is None
    assert lines[0].description == "Consulting Services"


@pytest.mark.asyncio
async def test_duplicate_missing_invoice(mock_invoice_repo):
    mock_invoice_repo.get = AsyncMock(side_effect=DataStoreError("請求書が見つかりません", status_code=404))

    with pytest.raises(DataStoreError, match="請求書が見つかりません"):
        await DuplicateInvoiceUseCase(mock_invoice_repo).execute("missing")

    mock_invoice_repo.create.assert_not_called()


@pytest.mark.asyncio
async def test_compose_invoice_email(mock_invoice_repo, sample_invoice):
    mock_invoice_repo.get = AsyncMock(return_value=sample_invoice)

    email = await ComposeInvoiceEmailUseCase(mock_invoice_repo).execute("invoice-1")

    assert email.recipient == "accounts@acme.com"
    assert email.subject == "Invoice INV-2025-001 from HELIOS"
    assert email.body.startswith("Dear Acme Corp,")
    assert email.mailto_url.startswith(
        "mailto:accounts@acme.com?subject=Invoice%20INV-2025-001%20from%20HELIOS&body=Dear%20Acme%20Corp%2C"
    )
