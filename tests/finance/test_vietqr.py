from datetime import date
from decimal import Decimal

import pytest

from src.tuition_center.tuition_center.center.model import CenterSettings
from src.tuition_center.tuition_center.finance.model import Invoice
from src.tuition_center.tuition_center.finance.qr import build_qr_url, build_transfer_reference
from src.tuition_center.tuition_center.students.model import Student

SETTINGS = CenterSettings(
    bank_name="Vietcombank",
    bank_bin="970436",
    bank_account_number="0123456789",
    bank_account_holder="Nguyễn Thị Lan",
)
STUDENT = Student(student_id="HV001", name="Trần Thị Hoa", balance=Decimal("-500000"))
INVOICE = Invoice(
    invoice_id="INV1",
    student_id="HV001",
    month="2024-03",
    amount=Decimal("300000"),
    generated_date=date(2024, 3, 1),
)


def test_transfer_reference_format():
    assert build_transfer_reference("Trần Thị Hoa", "2024-03") == "TranThiHoaHP0324"
    assert build_transfer_reference("Nguyễn Văn Đức", "2025-12") == "NguyenVanDucHP1225"


def test_full_url_with_account_name():
    url = build_qr_url(SETTINGS, STUDENT, INVOICE, Decimal("500000"))

    assert url == (
        "https://img.vietqr.io/image/970436-0123456789-compact2.png"
        "?amount=500000&addInfo=TranThiHoaHP0324&accountName=NGUYEN+THI+LAN"
    )


def test_account_name_omitted_without_holder():
    settings = CenterSettings(bank_bin="970436", bank_account_number="0123456789")

    url = build_qr_url(settings, STUDENT, INVOICE, Decimal("500000"))

    assert url.endswith("?amount=500000&addInfo=TranThiHoaHP0324")
    assert "accountName" not in url


def test_amount_is_rounded_to_integer():
    url = build_qr_url(SETTINGS, STUDENT, INVOICE, Decimal("150000.5"))

    assert "amount=150001&" in url


@pytest.mark.parametrize(
    "settings,total_due",
    [
        (CenterSettings(bank_bin="", bank_account_number="0123456789", bank_account_holder="X"), Decimal("1")),
        (CenterSettings(bank_bin="970436", bank_account_number="", bank_account_holder="X"), Decimal("1")),
        (CenterSettings(bank_bin="970436", bank_account_number="   "), Decimal("1")),
        (SETTINGS, Decimal("0")),
        (SETTINGS, Decimal("-10")),
    ],
)
def test_no_qr_when_config_incomplete_or_nothing_due(settings, total_due):
    assert build_qr_url(settings, STUDENT, INVOICE, total_due) is None


def test_no_qr_without_student():
    assert build_qr_url(SETTINGS, None, INVOICE, Decimal("500000")) is None
