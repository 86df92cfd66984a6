"""請求書合計計算のテスト"""
from datetime import date
from decimal import Decimal

import pytest

from src.domain.services.invoice_calculator import (
    calculate_draft_totals,
    calculate_line_totals,
    calculate_submission_totals,
    calculate_totals,
)
from src.domain.value_objects.discount import Discount
from src.domain.value_objects.invoice_draft import InvoiceDraft
from src.domain.value_objects.line_item import LineItem
from src.domain.value_objects.money import to_decimal


def make_draft(*items: LineItem, **kwargs) -> InvoiceDraft:
    kwargs.setdefault("vat_applicable", False)
    return InvoiceDraft(
        line_items=items,
        issue_date=date(2025, 1, 1),
        due_date=date(2025, 1, 31),
        **kwargs,
    )


def test_single_item_without_modifiers():
    """割引・税なしの1明細"""
    totals = calculate_totals([LineItem("Consulting", 1, 100)])

    assert totals.subtotal == Decimal("100")
    assert totals.discount_amount == 0
    assert totals.tax_amount == 0
    assert totals.withholding_amount == 0
    assert totals.total == Decimal("100.00")


def test_line_percentage_discount():
    """明細の率割引は割引後金額が小計になる"""
    item = LineItem("Design", 2, 50, discount=Discount.percentage(10))

    line = calculate_line_totals(item)
    assert line.amount == Decimal("100")
    assert line.discount_amount == Decimal("10")
    assert line.net == Decimal("90")

    assert calculate_totals([item]).total == Decimal("90.00")


def test_invoice_fixed_discount_then_vat():
    """請求書割引の後にVATを加算する"""
    totals = calculate_totals(
        [LineItem("Hosting", 1, 100)],
        discount=Discount.fixed(20),
        tax_rate=16,
        vat_applicable=True,
    )

    assert totals.discount_amount == Decimal("20")
    assert totals.tax_amount == Decimal("12.8")
    assert totals.total == Decimal("92.80")


def test_withholding_only():
    """源泉徴収は5%を差し引く"""
    totals = calculate_totals([LineItem("Audit", 1, 100)], withholding_tax_applicable=True)

    assert totals.withholding_amount == Decimal("5")
    assert totals.total == Decimal("95.00")


def test_withholding_applies_after_vat():
    totals = calculate_totals(
        [LineItem("Audit", 1, 100)],
        tax_rate=16,
        vat_applicable=True,
        withholding_tax_applicable=True,
    )

    assert totals.withholding_amount == Decimal("5.8")
    assert totals.total == Decimal("110.20")


def test_tax_rate_ignored_when_vat_not_applicable():
    totals = calculate_totals([LineItem("Audit", 1, 100)], tax_rate=16, vat_applicable=False)

    assert totals.tax_amount == 0
    assert totals.total == Decimal("100.00")


def test_invoice_percentage_discount():
    totals = calculate_totals(
        [LineItem("A", 1, 60), LineItem("B", 2, 20)],
        discount=Discount.percentage(25),
    )

    assert totals.subtotal == Decimal("100")
    assert totals.discount_amount == Decimal("25")
    assert totals.total == Decimal("75.00")


def test_total_is_rounded_half_up():
    totals = calculate_totals([LineItem("Fee", 1, Decimal("0.125"))])

    assert totals.total == Decimal("0.13")


def test_float_inputs_are_exact():
    totals = calculate_totals([LineItem("Fee", 3, 0.1)])

    assert totals.total == Decimal("0.30")


def test_fixed_line_discount_is_not_clamped():
    """固定額割引が明細金額を超えても切り詰めない"""
    item = LineItem("Promo", 1, 10, discount=Discount.fixed(25))

    assert calculate_line_totals(item).net == Decimal("-15")
    assert calculate_totals([item]).total == Decimal("-15.00")


def test_large_invoice_discount_gives_negative_total():
    totals = calculate_totals([LineItem("A", 1, 50)], discount=Discount.fixed(80))

    assert totals.total == Decimal("-30.00")


def test_nan_propagates():
    """NaNは例外にならず合計に伝播する"""
    totals = calculate_totals([LineItem("Broken", float("nan"), 100)], tax_rate=16, vat_applicable=True)

    assert totals.subtotal.is_nan()
    assert totals.total.is_nan()


INVALID_INPUTS = {
    "infinite_rate_times_zero": ([LineItem("Broken", 0, float("inf"))], None),
    "infinite_minus_infinite": ([LineItem("Broken", 1, float("inf"))], Discount.fixed(float("inf"))),
    "non_numeric_quantity": ([LineItem("Broken", "abc", 100)], None),
}


@pytest.mark.parametrize("items, discount", list(INVALID_INPUTS.values()), ids=list(INVALID_INPUTS))
def test_invalid_operations_give_nan_total(items, discount):
    """無効な演算は例外にならず NaN の合計になる"""
    totals = calculate_totals(items, discount=discount, tax_rate=16, vat_applicable=True)

    assert totals.total.is_nan()


@pytest.mark.parametrize("items, discount", list(INVALID_INPUTS.values()), ids=list(INVALID_INPUTS))
def test_invalid_operations_give_nan_submission_total(items, discount):
    """保存用の計算でも無効な演算は NaN になる"""
    draft = make_draft(*items, discount=discount, tax_rate=16, vat_applicable=True)

    assert calculate_submission_totals(draft).total.is_nan()
    assert calculate_draft_totals(draft).total.is_nan()


def test_non_numeric_string_converts_to_nan():
    assert to_decimal("abc").is_nan()


def test_calculation_is_idempotent():
    draft = make_draft(
        LineItem("A", 2, 50, discount=Discount.percentage(10)),
        LineItem("B", 1, 30),
        discount=Discount.fixed(5),
        tax_rate=16,
        vat_applicable=True,
        withholding_tax_applicable=True,
    )

    assert calculate_draft_totals(draft) == calculate_draft_totals(draft)
    assert calculate_submission_totals(draft) == calculate_submission_totals(draft)


def test_equal_drafts_share_memoized_result():
    first = make_draft(LineItem("A", 1, 100), tax_rate=16, vat_applicable=True)
    second = make_draft(LineItem("A", 1, 100), tax_rate=16, vat_applicable=True)

    assert calculate_draft_totals(first) is calculate_draft_totals(second)


@pytest.mark.parametrize("rates", [(10, 20), (0, 1), (99, 150)])
def test_raising_rate_never_decreases_totals(rates):
    """単価を上げても小計・合計は減らない"""
    low, high = rates
    other = LineItem("Other", 1, 40)

    def totals_for(rate):
        return calculate_totals(
            [LineItem("Item", 3, rate, discount=Discount.percentage(10)), other],
            discount=Discount.percentage(5),
            tax_rate=16,
            vat_applicable=True,
            withholding_tax_applicable=True,
        )

    assert totals_for(high).subtotal >= totals_for(low).subtotal
    assert totals_for(high).total >= totals_for(low).total


def test_submission_totals_use_line_flags():
    """保存用の合計は明細ごとのフラグでVAT・源泉徴収を計算する"""
    draft = make_draft(
        LineItem("Taxed", 1, 100, vat_applicable=True),
        LineItem("Withheld", 2, 50, vat_applicable=False, withholding_tax_applicable=True),
        discount=Discount.percentage(10),
        tax_rate=16,
    )

    totals = calculate_submission_totals(draft)

    assert totals.subtotal == Decimal("200")
    assert totals.discount_amount == Decimal("20")
    assert totals.total_before_tax == Decimal("180")
    assert totals.vat_amount == Decimal("16")
    assert totals.withholding_tax_amount == Decimal("5")
    assert totals.total == Decimal("191.00")
    assert [line.amount for line in totals.lines] == [Decimal("100"), Decimal("100")]


def test_submission_subtotal_ignores_line_discounts():
    item = LineItem("Design", 2, 50, discount=Discount.percentage(10), vat_applicable=False)
    draft = make_draft(item)

    submission = calculate_submission_totals(draft)
    preview = calculate_draft_totals(draft)

    assert submission.subtotal == Decimal("100")
    assert submission.lines[0].discount_amount == Decimal("10")
    assert submission.total == Decimal("100.00")
    assert preview.total == Decimal("90.00")
