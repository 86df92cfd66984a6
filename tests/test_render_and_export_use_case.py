"""RenderInvoiceUseCase / ExportInvoicePdfUseCaseのテスト"""
from dataclasses import replace
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.exceptions import PdfRenderError
from src.domain.repositories.pdf_repository import IPdfRepository
from src.infrastructure.templates.template_renderer import InvoiceTemplateRenderer
from src.usecases.export_invoice_pdf_use_case import ExportInvoicePdfUseCase, pdf_filename
from src.usecases.render_invoice_use_case import RenderInvoiceUseCase


@pytest.fixture
def render_use_case(mock_invoice_repo, sample_invoice) -> RenderInvoiceUseCase:
    mock_invoice_repo.get = AsyncMock(return_value=sample_invoice)
    return RenderInvoiceUseCase(
        mock_invoice_repo,
        InvoiceTemplateRenderer(),
        default_template="minimal",
        print_copies=["CUSTOMER COPY", "COMPANY COPY"],
    )


@pytest.mark.asyncio
async def test_render_uses_default_template(render_use_case, mock_invoice_repo):
    html = await render_use_case.execute("invoice-1")

    mock_invoice_repo.get.assert_called_once_with("invoice-1")
    assert "invoice-minimal" in html


@pytest.mark.asyncio
async def test_render_for_print(render_use_case):
    html = await render_use_case.execute("invoice-1", template="modern", for_print=True)

    assert "invoice-modern" in html
    assert "CUSTOMER COPY" in html
    assert "COMPANY COPY" in html
    assert "TAX COPY" not in html


@pytest.mark.asyncio
async def test_export_pdf(render_use_case, tmp_path: Path):
    """印刷用HTMLを invoice-{番号}.pdf として保存する"""
    pdf_repo = Mock(spec=IPdfRepository)
    pdf_repo.render_pdf = AsyncMock(side_effect=lambda html, path: path)
    use_case = ExportInvoicePdfUseCase(render_use_case, pdf_repo, tmp_path)

    saved = await use_case.execute("invoice-1")

    assert saved == tmp_path / "invoice-INV-2025-001.pdf"
    html, _ = pdf_repo.render_pdf.call_args.args
    assert "CUSTOMER COPY" in html


@pytest.mark.asyncio
async def test_export_pdf_error(render_use_case, tmp_path: Path):
    pdf_repo = Mock(spec=IPdfRepository)
    pdf_repo.render_pdf = AsyncMock(side_effect=PdfRenderError("PDFの生成に失敗しました"))
    use_case = ExportInvoicePdfUseCase(render_use_case, pdf_repo, tmp_path)

    with pytest.raises(PdfRenderError):
        await use_case.execute("invoice-1")


@pytest.mark.asyncio
async def test_export_pdf_keeps_file_inside_output_dir(render_use_case, mock_invoice_repo, sample_invoice, tmp_path: Path):
    """請求書番号にパス区切りが含まれても出力先の外には保存しない"""
    mock_invoice_repo.get = AsyncMock(return_value=replace(sample_invoice, invoice_number="../../etc/INV-1"))
    pdf_repo = Mock(spec=IPdfRepository)
    pdf_repo.render_pdf = AsyncMock(side_effect=lambda html, path: path)

    saved = await ExportInvoicePdfUseCase(render_use_case, pdf_repo, tmp_path).execute("invoice-1")

    assert saved.parent == tmp_path
    assert saved.name == "invoice-____etc_INV-1.pdf"


@pytest.mark.parametrize(
    "number, expected",
    [
        ("INV-2025-001", "invoice-INV-2025-001.pdf"),
        ("INV/2025\\001", "invoice-INV_2025_001.pdf"),
        ("C:INV", "invoice-C_INV.pdf"),
    ],
)
def test_pdf_filename(number, expected):
    assert pdf_filename(number) == expected
