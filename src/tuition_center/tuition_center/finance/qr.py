from __future__ import annotations

from decimal import Decimal
from typing import Optional
from urllib.parse import urlencode

from ..center.model import CenterSettings
from ..common.datetime_utils import split_month_key
from ..common.money import round_vnd, to_money
from ..common.text import normalize_compact, normalize_uppercase_spaced
from ..core.constants import TUITION_FEE_TAG, VIETQR_IMAGE_BASE_URL, VIETQR_TEMPLATE
from ..students.model import Student
from .model import Invoice


def build_transfer_reference(student_name: str, month_key: str) -> str:
    """Transfer note the bank statement is matched on.

    ``("Trần Thị Hoa", "2024-03") -> "TranThiHoaHP0324"``
    """
    year, month = split_month_key(month_key)
    return f"{normalize_compact(student_name)}{TUITION_FEE_TAG}{month}{year[-2:]}"


def build_qr_url(
    settings: CenterSettings,
    student: Optional[Student],
    invoice: Invoice,
    total_due: Decimal,
) -> Optional[str]:
    """VietQR image URL for the amount due, or None when no QR can be offered."""

    if not settings.has_bank_transfer or student is None:
        return None
    if to_money(total_due) <= 0:
        return None

    params = {
        "amount": str(round_vnd(total_due)),
        "addInfo": build_transfer_reference(student.name, invoice.month),
    }
    if (settings.bank_account_holder or "").strip():
        params["accountName"] = normalize_uppercase_spaced(settings.bank_account_holder)

    bank_bin = settings.bank_bin.strip()
    account_number = settings.bank_account_number.strip()
    return f"{VIETQR_IMAGE_BASE_URL}/{bank_bin}-{account_number}-{VIETQR_TEMPLATE}.png?{urlencode(params)}"
