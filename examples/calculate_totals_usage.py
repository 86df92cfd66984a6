"""請求書合計計算とプレビュー描画の使用例"""
import json
import logging
import sys
from pathlib import Path

# プロジェクトルートをPythonパスに追加
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from src.domain.services.invoice_calculator import calculate_draft_totals, calculate_submission_totals
from src.domain.value_objects.invoice_form import InvoiceForm
from src.infrastructure.templates.template_renderer import InvoiceTemplateRenderer
from src.usecases.render_invoice_use_case import draft_view

# ロギングの設定
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def example_calculate_totals():
    """フォーム入力から合計を計算する例"""
    with open(Path(__file__).parent / "sample_invoice.json", encoding="utf-8") as f:
        form = InvoiceForm.model_validate(json.load(f))

    draft = form.to_draft()

    # プレビュー用の合計
    totals = calculate_draft_totals(draft)
    print(f"小計: {draft.currency} {totals.subtotal:,.2f}")
    print(f"割引: {draft.currency} {totals.discount_amount:,.2f}")
    print(f"VAT: {draft.currency} {totals.tax_amount:,.2f}")
    print(f"源泉徴収: {draft.currency} {totals.withholding_amount:,.2f}")
    print(f"合計: {draft.currency} {totals.total:,.2f}")

    # 保存時の合計（明細ごとに課税するため一致しないことがある）
    submission = calculate_submission_totals(draft)
    print(f"保存時の合計: {draft.currency} {submission.total:,.2f}")

    return draft


def example_render_preview(draft):
    """下書きをHTMLに描画する例"""
    html = InvoiceTemplateRenderer().render(draft_view(draft), "minimal")
    output_path = project_root / "output" / "preview.html"
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html, encoding="utf-8")
    print(f"プレビューを保存しました: {output_path}")


if __name__ == "__main__":
    example_render_preview(example_calculate_totals())
