from __future__ import annotations

import logging
from typing import Optional

from ..center.model import CenterSettings
from ..center.repository import CenterSettingsRepository
from ..common.datetime_utils import format_month_label, format_vn_date
from ..common.money import ZERO
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..students.model import Student
from ..students.repository import StudentRepository
from .calculator.base import NoticeCalculator
from .calculator.standard_calculator import StandardNoticeCalculator
from .model import Invoice, NoticeLine, PaymentNotice, ReconciledBalance
from .qr import build_qr_url, build_transfer_reference
from .reconciliation import BalanceReconciler
from .repository import LedgerRepository

logger = logging.getLogger(__name__)

NOTICE_TITLE = "Phiếu Báo Học Phí"
STUDENT_MISSING_MESSAGE = "Học viên không tồn tại."


class TuitionNoticeService:
    """Use case: build the payment notice (Phiếu Báo Học Phí) of one invoice.

    Always recomputed from the current repository snapshot; nothing is cached.
    """

    def __init__(
        self,
        students: StudentRepository,
        ledger: LedgerRepository,
        center: CenterSettingsRepository,
        *,
        calculator: Optional[NoticeCalculator] = None,
        reconciler: Optional[BalanceReconciler] = None,
    ):
        self._students = students
        self._ledger = ledger
        self._center = center
        self._calculator = calculator or StandardNoticeCalculator()
        self._reconciler = reconciler or BalanceReconciler()

    def build_notice(self, invoice_id: str) -> PaymentNotice:
        invoice_id = require_non_empty(invoice_id, "Mã hóa đơn")
        invoice = self._ledger.get_invoice(invoice_id)
        if not invoice:
            raise NotFoundError(f"Không tìm thấy hóa đơn #{invoice_id}")
        return self.build_notice_for(invoice)

    def build_notice_for(self, invoice: Invoice) -> PaymentNotice:
        student = self._students.get_by_id(invoice.student_id)
        settings = self._center.get()
        period_label = format_month_label(invoice.month)

        if student is None:
            logger.info("Invoice %s references missing student %s", invoice.invoice_id, invoice.student_id)
            return PaymentNotice(
                invoice=invoice,
                student_found=False,
                balance=ReconciledBalance(outstanding_debt=ZERO, opening_credit=ZERO, total_due=ZERO),
                reconciliation=self._reconciler.reconcile(None, invoice, ()),
                period_label=period_label,
                center=self._center_block(settings),
            )

        transactions = self._ledger.list_transactions_for_student(student.student_id)
        reconciliation = self._reconciler.reconcile(student, invoice, transactions)
        balance = self._calculator.compute(reconciliation.balance_before_invoice, invoice.amount)

        lines = (
            NoticeLine(label="Dư nợ kỳ trước", amount=balance.outstanding_debt),
            NoticeLine(label="Số dư/Đã trả kỳ trước", amount=balance.opening_credit),
            NoticeLine(
                label=f"Học phí phát sinh tháng {period_label}",
                amount=invoice.amount,
                details=invoice.details,
            ),
            NoticeLine(label="Tổng thanh toán", amount=balance.total_due),
        )

        transfer_reference = build_transfer_reference(student.name, invoice.month)
        return PaymentNotice(
            invoice=invoice,
            student_found=True,
            balance=balance,
            reconciliation=reconciliation,
            period_label=period_label,
            lines=lines,
            center=self._center_block(settings),
            student=self._student_block(student, invoice),
            payment={
                "bank_name": settings.bank_name,
                "bank_account_number": settings.bank_account_number,
                "bank_account_holder": settings.bank_account_holder,
            },
            transfer_reference=transfer_reference,
            qr_url=build_qr_url(settings, student, invoice, balance.total_due),
        )

    def _center_block(self, settings: CenterSettings) -> dict:
        return {
            "name": settings.name,
            "address": settings.address,
            "phone": settings.phone,
            "logo_url": settings.logo_url,
            "theme_color": settings.theme_color,
        }

    def _student_block(self, student: Student, invoice: Invoice) -> dict:
        return {
            "student_id": student.student_id,
            "name": student.name,
            "parent_name": student.guardian_name,
            "generated_date": format_vn_date(invoice.generated_date),
        }
