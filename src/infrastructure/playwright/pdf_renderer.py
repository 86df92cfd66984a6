"""Playwright（ヘッドレスChromium）でHTMLをPDFに変換するサービス"""
import logging
from pathlib import Path
from typing import Optional

from playwright.async_api import Browser, BrowserContext, Page, Playwright, async_playwright

from src.domain.exceptions import PdfRenderError
from src.domain.repositories.pdf_repository import IPdfRepository

logger = logging.getLogger(__name__)


class PlaywrightPdfRenderer(IPdfRepository):
    """印刷用HTMLをA4のPDFとして保存するサービス"""

    def __init__(self, page_format: str = "A4", margin: str = "0.5cm"):
        self.page_format = page_format
        self.margin = margin
        self.playwright: Optional[Playwright] = None
        self.browser: Optional[Browser] = None
        self.context: Optional[BrowserContext] = None
        self.page: Optional[Page] = None

    async def _setup_browser(self) -> None:
        """ブラウザをセットアップする"""
        logger.info("ブラウザを初期化しています...")
        self.playwright = await async_playwright().start()
        self.browser = await self.playwright.chromium.launch(headless=True)
        self.context = await self.browser.new_context()
        self.page = await self.context.new_page()
        logger.info("ブラウザの初期化が完了しました（ヘッドレスモード）")

    async def _cleanup_browser(self) -> None:
        """ブラウザをクリーンアップする"""
        if self.page:
            await self.page.close()
        if self.context:
            await self.context.close()
        if self.browser:
            await self.browser.close()
        if self.playwright:
            await self.playwright.stop()
        self.page = self.context = self.browser = self.playwright = None
        logger.info("ブラウザをクリーンアップしました")

    async def render_pdf(self, html: str, output_path: Path) -> Path:
        """HTMLをPDFとして保存する

        Args:
            html: 印刷用HTML
            output_path: 保存先

        Returns:
            Path: 保存したPDFのパス

        Raises:
            PdfRenderError: 変換に失敗した場合
        """
        output_path.parent.mkdir(parents=True, exist_ok=True)
        try:
            await self._setup_browser()
            await self.page.set_content(html, wait_until="networkidle")
            await self.page.pdf(
                path=str(output_path),
                format=self.page_format,
                print_background=True,
                margin={
                    "top": self.margin,
                    "right": self.margin,
                    "bottom": self.margin,
                    "left": self.margin,
                },
            )
        except Exception as e:
            logger.error(f"PDFの生成に失敗しました: {e}")
            raise PdfRenderError(f"PDFの生成に失敗しました: {e}") from e
        finally:
            await self._cleanup_browser()

        if not self._validate_pdf_file(output_path):
            raise PdfRenderError(f"生成したファイルがPDF形式ではありません: {output_path}")

        logger.info("PDFを保存しました", extra={"context": {"path": str(output_path)}})
        return output_path

    def _validate_pdf_file(self, file_path: Path) -> bool:
        """ファイルがPDF形式かどうかを検証する"""
        if not file_path.exists():
            return False
        with open(file_path, "rb") as f:
            return f.read(4) == b"%PDF"
