from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..core.constants import CURRENCY_SUFFIX

ZERO = Decimal("0")


def to_money(value: Any) -> Decimal:
    """Coerce DB/driver/JSON values into Decimal money.

    mysql-connector returns DECIMAL columns as Decimal already; floats are
    routed through ``str`` to avoid binary noise.
    """

    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_vnd(value: Any) -> int:
    """Round to whole đồng, halves away from zero."""
    return int(to_money(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def format_vnd(value: Any) -> str:
    """Format money the vi-VN way: ``1234567`` -> ``"1.234.567 ₫"``."""
    amount = round_vnd(value)
    return f"{amount:,}".replace(",", ".") + f" {CURRENCY_SUFFIX}"
