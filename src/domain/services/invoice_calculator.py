"""請求書の合計計算

副作用のない純粋関数のみ。入力の検証は行わず、NaN や負の値はそのまま結果に伝播する。
無限大どうしの差のような無効な演算も例外にせず NaN として扱う。

合計の計算経路は2つある。

- ``calculate_totals``: プレビュー用。明細ごとの割引後金額を合算し、
  請求書全体の割引、VAT、源泉徴収の順に適用する。
- ``calculate_submission_totals``: 保存用。割引前の明細金額を合算し、
  VAT・源泉徴収は対象明細ごとに計算して足し合わせる。

同じ下書きでも両者の合計は一致しないことがある。
"""
from decimal import Decimal
from functools import lru_cache
from typing import Iterable, Optional

from src.domain.value_objects.computed_totals import ComputedTotals, LineTotals, SubmissionTotals
from src.domain.value_objects.discount import Discount, discount_amount
from src.domain.value_objects.invoice_draft import InvoiceDraft
from src.domain.value_objects.line_item import LineItem
from src.domain.value_objects.money import Number, nan_on_invalid_operation, round_money, to_decimal

WITHHOLDING_TAX_RATE = Decimal(5)

_HUNDRED = Decimal(100)


@nan_on_invalid_operation()
def calculate_line_totals(item: LineItem) -> LineTotals:
    """明細1行の金額・割引額・割引後金額を計算する"""
    amount = item.quantity * item.rate
    line_discount = discount_amount(item.discount, amount)
    return LineTotals(amount=amount, discount_amount=line_discount, net=amount - line_discount)


@nan_on_invalid_operation()
def calculate_totals(
    line_items: Iterable[LineItem],
    discount: Optional[Discount] = None,
    tax_rate: Number = 0,
    vat_applicable: bool = False,
    withholding_tax_applicable: bool = False,
) -> ComputedTotals:
    """プレビュー用の合計を計算する

    Args:
        line_items: 明細（順序どおり）
        discount: 請求書全体の割引
        tax_rate: VAT率（0〜100）
        vat_applicable: VATを加算するか
        withholding_tax_applicable: 源泉徴収（5%）を差し引くか

    Returns:
        ComputedTotals: 小計・割引額・税額・源泉徴収額・合計
    """
    subtotal = sum((calculate_line_totals(item).net for item in line_items), Decimal(0))
    invoice_discount = discount_amount(discount, subtotal)
    running_total = subtotal - invoice_discount

    tax_amount = Decimal(0)
    if vat_applicable:
        tax_amount = running_total * to_decimal(tax_rate) / _HUNDRED
        running_total += tax_amount

    withholding_amount = Decimal(0)
    if withholding_tax_applicable:
        withholding_amount = running_total * WITHHOLDING_TAX_RATE / _HUNDRED
        running_total -= withholding_amount

    return ComputedTotals(
        subtotal=subtotal,
        discount_amount=invoice_discount,
        tax_amount=tax_amount,
        withholding_amount=withholding_amount,
        total=round_money(running_total),
    )


@lru_cache(maxsize=256)
def calculate_draft_totals(draft: InvoiceDraft) -> ComputedTotals:
    """下書きのプレビュー用合計（入力ごとにメモ化）"""
    return calculate_totals(
        draft.line_items,
        discount=draft.discount,
        tax_rate=draft.tax_rate,
        vat_applicable=draft.vat_applicable,
        withholding_tax_applicable=draft.withholding_tax_applicable,
    )


@nan_on_invalid_operation()
def calculate_submission_totals(draft: InvoiceDraft) -> SubmissionTotals:
    """保存用の合計を計算する

    小計は明細割引前の金額の合計。VAT・源泉徴収は明細ごとのフラグで判定し、
    明細金額に対して計算する。
    """
    lines = tuple(calculate_line_totals(item) for item in draft.line_items)
    subtotal = sum((line.amount for line in lines), Decimal(0))
    invoice_discount = discount_amount(draft.discount, subtotal)
    total_before_tax = subtotal - invoice_discount

    vat_amount = sum(
        (
            line.amount * draft.tax_rate / _HUNDRED
            for item, line in zip(draft.line_items, lines)
            if item.vat_applicable
        ),
        Decimal(0),
    )
    withholding_amount = sum(
        (
            line.amount * WITHHOLDING_TAX_RATE / _HUNDRED
            for item, line in zip(draft.line_items, lines)
            if item.withholding_tax_applicable
        ),
        Decimal(0),
    )

    return SubmissionTotals(
        subtotal=subtotal,
        discount_amount=invoice_discount,
        total_before_tax=total_before_tax,
        vat_amount=vat_amount,
        withholding_tax_amount=withholding_amount,
        total=round_money(total_before_tax + vat_amount - withholding_amount),
        lines=lines,
    )
