from __future__ import annotations

from datetime import date


def split_month_key(month_key: str) -> tuple[str, str]:
    """Split a ``YYYY-MM`` billing key into ``(year, month)`` strings.

    Never raises: a key without ``-`` yields an empty month.
    """
    year, _, month = (month_key or "").partition("-")
    return year, month


def format_month_label(month_key: str) -> str:
    """``"2024-03"`` -> ``"03/2024"``."""
    year, month = split_month_key(month_key)
    return f"{month}/{year}"


def format_vn_date(value: date) -> str:
    return value.strftime("%d/%m/%Y")
