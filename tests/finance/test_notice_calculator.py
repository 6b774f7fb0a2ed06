from decimal import Decimal

import pytest

from src.tuition_center.tuition_center.finance.calculator.standard_calculator import StandardNoticeCalculator


def test_opening_credit_covers_new_fee():
    result = StandardNoticeCalculator().compute(Decimal("200"), Decimal("150"))

    assert result.outstanding_debt == 0
    assert result.opening_credit == Decimal("200")
    assert result.total_due == 0


def test_old_debt_is_added_to_new_fee():
    result = StandardNoticeCalculator().compute(Decimal("-400"), Decimal("300"))

    assert result.outstanding_debt == Decimal("400")
    assert result.opening_credit == 0
    assert result.total_due == Decimal("700")


def test_partial_credit_reduces_total():
    result = StandardNoticeCalculator().compute(Decimal("100"), Decimal("300"))

    assert result.total_due == Decimal("200")


@pytest.mark.parametrize("before", ["-400", "0", "150", "1000"])
def test_total_due_never_decreases_with_invoice_amount(before):
    calc = StandardNoticeCalculator()
    totals = [calc.compute(Decimal(before), Decimal(a)).total_due for a in ("0", "100", "500", "2000")]

    assert totals == sorted(totals)
    assert all(t >= 0 for t in totals)
