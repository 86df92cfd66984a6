"""Jinja2による請求書HTMLの描画"""
import logging
from dataclasses import dataclass, field
from decimal import Decimal
from pathlib import Path
from typing import List, Optional, Sequence

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup, escape

from src.domain.value_objects.application_config import TemplateName

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class InvoiceViewItem:
    """テンプレートに渡す明細行"""

    description: str
    quantity: Decimal
    rate: Decimal
    amount: Decimal


@dataclass(frozen=True)
class InvoiceView:
    """テンプレートに渡す請求書の表示内容"""

    invoice_number: str
    issue_date: str
    due_date: str
    client_name: str
    client_email: str
    client_address: str
    company_name: str
    company_details: str
    currency: str
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    discount: Decimal = Decimal(0)
    withholding: Decimal = Decimal(0)
    notes: str = ""
    company_logo: Optional[str] = None
    items: List[InvoiceViewItem] = field(default_factory=list)


def _money(value: Decimal, currency: str = "") -> str:
    formatted = f"{value:,.2f}"
    return f"{currency} {formatted}" if currency else formatted


def _quantity(value: Decimal) -> str:
    if not value.is_finite():
        return str(value)
    return f"{value.normalize():f}"


def _nl2br(value: str) -> Markup:
    return Markup("<br>").join(escape(line) for line in (value or "").split("\n"))


class InvoiceTemplateRenderer:
    """請求書テンプレート（modern / minimal）をHTMLに描画する"""

    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["money"] = _money
        self.env.filters["quantity"] = _quantity
        self.env.filters["nl2br"] = _nl2br

    def resolve_template(self, template: Optional[str]) -> str:
        """テンプレート名を解決する（未知の名前は modern にフォールバック）"""
        if template in TemplateName.ALL:
            return template
        if template:
            logger.warning(f"未知のテンプレートです: {template}。{TemplateName.MODERN} を使用します。")
        return TemplateName.MODERN

    def render_body(self, invoice: InvoiceView, template: Optional[str] = None) -> Markup:
        """請求書本体のHTML断片を描画する"""
        name = self.resolve_template(template)
        html = self.env.get_template(f"{name}.html.j2").render(invoice=invoice)
        return Markup(html)

    def render(self, invoice: InvoiceView, template: Optional[str] = None) -> str:
        """画面表示用の完全なHTMLを描画する"""
        return self._render_document(invoice, template, copies=[""])

    def render_print(
        self,
        invoice: InvoiceView,
        template: Optional[str] = None,
        copies: Sequence[str] = (),
    ) -> str:
        """印刷用HTMLを描画する

        控えのラベルごとに請求書を繰り返し、間に改ページを入れる。
        ラベルが空の場合は1部だけ出力する。
        """
        return self._render_document(invoice, template, copies=list(copies) or [""])

    def _render_document(self, invoice: InvoiceView, template: Optional[str], copies: List[str]) -> str:
        body = self.render_body(invoice, template)
        return self.env.get_template("document.html.j2").render(
            invoice=invoice,
            body=body,
            copies=copies,
        )
