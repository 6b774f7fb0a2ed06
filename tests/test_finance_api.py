from __future__ import annotations

from datetime import date
from decimal import Decimal
from types import SimpleNamespace

import pytest
from flask import Flask

from src.tuition_center.tuition_center.center.model import CenterSettings
from src.tuition_center.tuition_center.core.enums import TransactionType
from src.tuition_center.tuition_center.finance.controller import register
from src.tuition_center.tuition_center.finance.debt_report_service import DebtReportService
from src.tuition_center.tuition_center.finance.model import Invoice, Transaction
from src.tuition_center.tuition_center.finance.service import TuitionNoticeService
from src.tuition_center.tuition_center.students.model import ClassGroup, Student


class InMemoryStore:
    """One fake serving the student, ledger and center repository roles."""

    def __init__(self):
        self.students = {
            "HV001": Student(student_id="HV001", name="Trần Thị Hoa", balance=Decimal("-500000")),
            "HV002": Student(student_id="HV002", name="Nguyễn Văn Đức", balance=Decimal("200000")),
        }
        self.invoices = {
            "INV1": Invoice("INV1", "HV001", "2024-03", Decimal("300000"), date(2024, 3, 1), "8 buổi"),
            "INV2": Invoice("INV2", "HV002", "2024-03", Decimal("300000"), date(2024, 3, 1)),
            "INV9": Invoice("INV9", "GHOST", "2024-03", Decimal("300000"), date(2024, 3, 1)),
        }
        self.transactions = [
            Transaction("T1", "HV001", TransactionType.INVOICE, Decimal("-300000"), date(2024, 3, 1), "", "INV1"),
            Transaction("T2", "HV002", TransactionType.INVOICE, Decimal("-300000"), date(2024, 3, 1), "", "INV2"),
        ]
        self.settings = CenterSettings(
            name="Trung tâm Ánh Dương",
            bank_bin="970436",
            bank_account_number="0123456789",
            bank_account_holder="Nguyễn Thị Lan",
        )

    def get_by_id(self, student_id):
        return self.students.get(student_id)

    def list_all(self):
        return list(self.students.values())

    def list_classes(self):
        return [ClassGroup(class_id="L01", name="Tiếng Anh A1", student_ids=("HV001",))]

    def get_invoice(self, invoice_id):
        return self.invoices.get(invoice_id)

    def list_transactions_for_student(self, student_id):
        return [t for t in self.transactions if t.student_id == student_id]

    def get(self):
        return self.settings


@pytest.fixture
def client():
    store = InMemoryStore()
    container = SimpleNamespace(
        notice_service=TuitionNoticeService(store, store, store),
        debt_report_service=DebtReportService(store),
    )
    app = Flask(__name__)
    app.config["TESTING"] = True
    register(app, container)
    return app.test_client()


def test_notice_json(client):
    resp = client.get("/api/invoices/INV1/notice")

    assert resp.status_code == 200
    notice = resp.get_json()["notice"]
    assert notice["total_due"] == 500000
    assert notice["total_due_display"] == "500.000 ₫"
    assert notice["outstanding_debt"] == 200000
    assert notice["payment"]["transfer_reference"] == "TranThiHoaHP0324"
    assert notice["period"] == "Kỳ: Tháng 03/2024"
    assert notice["qr_url"].endswith("accountName=NGUYEN+THI+LAN")


def test_notice_for_missing_student(client):
    resp = client.get("/api/invoices/INV9/notice")

    assert resp.status_code == 200
    notice = resp.get_json()["notice"]
    assert notice["student_found"] is False
    assert notice["message"] == "Học viên không tồn tại."


def test_unknown_invoice_is_404(client):
    resp = client.get("/api/invoices/NOPE/notice")

    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_qr_redirects_to_vietqr(client):
    resp = client.get("/api/invoices/INV1/notice/qr")

    assert resp.status_code == 302
    assert resp.headers["Location"].startswith("https://img.vietqr.io/image/970436-0123456789-compact2.png")


def test_qr_missing_when_nothing_due(client):
    resp = client.get("/api/invoices/INV2/notice/qr")

    assert resp.status_code == 404


def test_debt_report_json(client):
    resp = client.get("/api/finance/debts")

    data = resp.get_json()
    assert data["total_debt"] == 500000
    assert data["rows"][0]["class_names"] == "Tiếng Anh A1"


def test_debt_report_bad_sort_is_400(client):
    resp = client.get("/api/finance/debts?sort=unknown")

    assert resp.status_code == 400


def test_debt_report_csv(client):
    resp = client.get("/api/finance/debts.csv")

    assert resp.mimetype == "text/csv"
    text = resp.data.decode("utf-8-sig")
    lines = text.strip().splitlines()
    assert lines[0] == "Họ Tên,Các Lớp Học,Số Tiền Nợ"
    assert lines[1] == "Trần Thị Hoa,Tiếng Anh A1,500000"


def test_high_debt_widget(client):
    resp = client.get("/api/finance/high-debt?limit=3")

    students = resp.get_json()["students"]
    assert [s["student_id"] for s in students] == ["HV001"]
    assert students[0]["debt_display"] == "500.000 ₫"
