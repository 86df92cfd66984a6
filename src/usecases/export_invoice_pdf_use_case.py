"""請求書をPDFに出力するユースケース"""
import logging
import re
from pathlib import Path
from typing import Optional

from src.domain.repositories.pdf_repository import IPdfRepository
from src.usecases.render_invoice_use_case import RenderInvoiceUseCase, invoice_view

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[\\/:]|\.\.")


def pdf_filename(invoice_number: str) -> str:
    """請求書番号から出力ファイル名を作る（パス区切りは _ に置き換える）"""
    return f"invoice-{_UNSAFE_FILENAME_CHARS.sub('_', invoice_number)}.pdf"


class ExportInvoicePdfUseCase:
    """印刷用HTMLを描画し、PDFとして保存するユースケース"""

    def __init__(
        self,
        render_use_case: RenderInvoiceUseCase,
        pdf_repository: IPdfRepository,
        output_dir: Path,
    ):
        self.render_use_case = render_use_case
        self.pdf_repository = pdf_repository
        self.output_dir = output_dir

    async def execute(self, invoice_id: str, template: Optional[str] = None) -> Path:
        """請求書PDFを出力する

        Args:
            invoice_id: 請求書ID
            template: テンプレート名

        Returns:
            Path: 保存した ``invoice-{請求書番号}.pdf`` のパス

        Raises:
            PdfRenderError: PDFの生成に失敗した場合
        """
        logger.info(f"請求書PDFの出力を開始します: {invoice_id}")

        try:
            invoice = await self.render_use_case.invoice_repository.get(invoice_id)
            html = self.render_use_case.render(invoice_view(invoice), template, for_print=True)
            output_path = self.output_dir / pdf_filename(invoice.invoice_number)
            saved = await self.pdf_repository.render_pdf(html, output_path)
        except Exception as e:
            logger.error(f"請求書PDFの出力中にエラーが発生しました: {e}")
            raise

        logger.info(f"請求書PDFを出力しました: {saved}")
        return saved
