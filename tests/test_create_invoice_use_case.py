"""CreateInvoiceUseCaseのテスト"""
import logging
from dataclasses import replace
from datetime import date, timedelta
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from pydantic import ValidationError

from src.domain.entities.invoice import Invoice
from src.domain.exceptions import DataStoreError
from src.usecases.create_invoice_use_case import CreateInvoiceUseCase


@pytest.fixture
def form_data() -> dict:
    """フォーム入力"""
    return {
        "invoice_number": "INV-2025-010",
        "client_id": "client-1",
        "company_id": "company-1",
        "issue_date": "2025-10-23",
        "due_date": "2025-11-22",
        "tax_rate": 16,
        "line_items": [
            {"description": "Consulting", "quantity": 2, "rate": 50, "vat_applicable": True},
        ],
    }


def echo_created(invoice: Invoice, line_items):
    return replace(invoice, id="new-id", line_items=line_items)


@pytest.mark.asyncio
async def test_execute_successful(mock_invoice_repo, test_config, form_data: dict):
    """正常な実行のテスト"""
    mock_invoice_repo.create = AsyncMock(side_effect=echo_created)
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    invoice = await use_case.execute(form_data)

    assert invoice.id == "new-id"
    assert invoice.invoice_number == "INV-2025-010"
    assert invoice.subtotal == Decimal("100")
    assert invoice.vat_amount == Decimal("16")
    assert invoice.total == Decimal("116.00")
    assert invoice.status == "draft"
    assert invoice.currency == "KES"

    sent_invoice, sent_lines = mock_invoice_repo.create.call_args.args
    assert sent_invoice.id is None
    assert len(sent_lines) == 1
    assert sent_lines[0].amount == Decimal("100")
    assert sent_lines[0].discount_amount == Decimal("0")


@pytest.mark.asyncio
async def test_execute_persists_line_discount(mock_invoice_repo, test_config, form_data: dict):
    form_data["line_items"][0].update({"discount_type": "fixed", "discount_value": 30})
    mock_invoice_repo.create = AsyncMock(side_effect=echo_created)
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    invoice = await use_case.execute(form_data)

    line = invoice.line_items[0]
    assert line.discount_type == "fixed"
    assert line.discount_value == Decimal("30")
    assert line.discount_amount == Decimal("30")
    assert invoice.subtotal == Decimal("100")


@pytest.mark.asyncio
async def test_execute_warns_when_totals_diverge(mock_invoice_repo, test_config, form_data: dict, caplog):
    """プレビューと保存の合計が異なる場合は警告を出す"""
    form_data["line_items"][0].update({"discount_type": "percentage", "discount_value": 10})
    mock_invoice_repo.create = AsyncMock(side_effect=echo_created)
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    with caplog.at_level(logging.WARNING):
        invoice = await use_case.execute(form_data)

    assert invoice.total == Decimal("116.00")
    assert "プレビューと保存時の合計が一致しません" in caplog.text


@pytest.mark.asyncio
async def test_execute_fills_defaults(mock_invoice_repo, test_config, sample_invoice):
    """通貨・期限・番号が無い場合は設定値から補う"""
    mock_invoice_repo.create = AsyncMock(side_effect=echo_created)
    mock_invoice_repo.list = AsyncMock(return_value=[sample_invoice])
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    invoice = await use_case.execute({
        "client_id": "client-1",
        "company_id": "company-1",
        "issue_date": "2025-03-01",
        "line_items": [{"description": "Support", "quantity": 1, "rate": 10}],
    })

    assert invoice.invoice_number == "INV-2025-002"
    assert invoice.due_date == date(2025, 3, 1) + timedelta(days=30)
    assert invoice.currency == "KES"
    assert invoice.vat_amount == Decimal("1.6")


@pytest.mark.asyncio
async def test_execute_validation_error(mock_invoice_repo, test_config, form_data: dict):
    """入力不正のテスト"""
    form_data["line_items"] = []
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    with pytest.raises(ValidationError):
        await use_case.execute(form_data)

    mock_invoice_repo.create.assert_not_called()


@pytest.mark.asyncio
async def test_execute_repository_error(mock_invoice_repo, test_config, form_data: dict):
    """登録エラーのテスト"""
    mock_invoice_repo.create = AsyncMock(side_effect=DataStoreError("登録に失敗しました", status_code=500))
    use_case = CreateInvoiceUseCase(invoice_repository=mock_invoice_repo, config=test_config)

    with pytest.raises(DataStoreError, match="登録に失敗しました"):
        await use_case.execute(form_data)
