"""PDF出力リポジトリのインターフェース"""
from abc import ABC, abstractmethod
from pathlib import Path


class IPdfRepository(ABC):
    """HTMLをPDFに変換して保存するリポジトリのインターフェース"""

    @abstractmethod
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
        pass
