"""pytest共通設定"""
from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.entities.client import Client
from src.domain.entities.company import Company
from src.domain.entities.invoice import Invoice, InvoiceLineItem
from src.domain.repositories.invoice_repository import IInvoiceRepository
from src.domain.value_objects.application_config import ApplicationConfig
from src.domain.value_objects.credentials import DataStoreCredentials


@pytest.fixture
def test_credentials() -> DataStoreCredentials:
    """テスト用の接続情報"""
    return DataStoreCredentials(
        url="example.supabase.co",
        api_key="test_api_key",
    )


@pytest.fixture
def test_config(tmp_path) -> ApplicationConfig:
    """テスト用のアプリケーション設定"""
    return ApplicationConfig(pdf_output_dir=str(tmp_path / "output"))


@pytest.fixture
def sample_company() -> Company:
    """サンプル会社"""
    return Company(
        id="company-1",
        name="HELIOS",
        email="billing@helios.com",
        phone="+254 700 000000",
        address="123 Business Street",
        pin_number="P051234567X",
        vat_registered=True,
    )


@pytest.fixture
def sample_client(sample_company: Company) -> Client:
    """サンプル請求先"""
    return Client(
        id="client-1",
        name="Acme Corp",
        company_id=sample_company.id,
        email="accounts@acme.com",
        phone="+254 711 111111",
        company=sample_company,
    )


@pytest.fixture
def sample_invoice(sample_client: Client, sample_company: Company) -> Invoice:
    """サンプル請求書"""
    return Invoice(
        id="invoice-1",
        invoice_number="INV-2025-001",
        client_id=sample_client.id,
        company_id=sample_company.id,
        issue_date=date(2025, 10, 23),
        due_date=date(2025, 11, 22),
        currency="KES",
        status="sent",
        subtotal=Decimal("100"),
        discount_amount=Decimal("0"),
        total_before_tax=Decimal("100"),
        vat_amount=Decimal("16"),
        withholding_tax_amount=Decimal("0"),
        total=Decimal("116.00"),
        notes="Payment is due within the specified terms.",
        line_items=[
            InvoiceLineItem(
                id="line-1",
                invoice_id="invoice-1",
                description="Consulting Services",
                quantity=Decimal("1"),
                rate=Decimal("100"),
                amount=Decimal("100"),
            )
        ],
        client=sample_client,
        company=sample_company,
    )


@pytest.fixture
def mock_invoice_repo() -> IInvoiceRepository:
    """モックInvoiceRepository"""
    repo = Mock(spec=IInvoiceRepository)
    repo.create = AsyncMock()
    repo.list = AsyncMock(return_value=[])
    repo.get = AsyncMock()
    repo.update = AsyncMock()
    repo.delete = AsyncMock()
    return repo
