from decimal import Decimal

from src.tuition_center.tuition_center.common.datetime_utils import format_month_label, split_month_key
from src.tuition_center.tuition_center.common.money import format_vnd, round_vnd, to_money


def test_format_vnd_uses_dot_thousands_separator():
    assert format_vnd(1234567) == "1.234.567 ₫"
    assert format_vnd(Decimal("0")) == "0 ₫"
    assert format_vnd(Decimal("999.6")) == "1.000 ₫"


def test_round_vnd_rounds_half_up():
    assert round_vnd(Decimal("2.5")) == 3
    assert round_vnd(Decimal("2.49")) == 2
    assert round_vnd(None) == 0


def test_to_money_avoids_float_noise():
    assert to_money(0.1) == Decimal("0.1")
    assert to_money("150000") == Decimal("150000")


def test_month_key_helpers():
    assert split_month_key("2024-03") == ("2024", "03")
    assert split_month_key("2024") == ("2024", "")
    assert format_month_label("2024-03") == "03/2024"
