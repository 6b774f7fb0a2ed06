from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional

from ..core.enums import TransactionType


@dataclass(frozen=True)
class Transaction:
    """Thực thể miền (domain): Giao dịch trên sổ công nợ.

    ``amount`` có dấu: giao dịch INVOICE mang số âm (ghi nợ).
    """

    transaction_id: str
    student_id: str
    type: TransactionType
    amount: Decimal
    date: date
    description: str = ""
    related_invoice_id: Optional[str] = None


@dataclass(frozen=True)
class Invoice:
    """Thực thể miền (domain): Hóa đơn học phí của một kỳ (``YYYY-MM``).

    ``amount`` luôn là khoản phí mới phát sinh trong kỳ, không phải số dư lũy kế.
    """

    invoice_id: str
    student_id: str
    month: str
    amount: Decimal
    generated_date: date
    details: str = ""


@dataclass(frozen=True)
class ReconciledBalance:
    """Kết quả đối soát cho một phiếu báo; không lưu xuống CSDL."""

    outstanding_debt: Decimal
    opening_credit: Decimal
    total_due: Decimal


@dataclass(frozen=True)
class Reconciliation:
    student_found: bool
    balance_before_invoice: Decimal
    debit_amount: Decimal
    linked_transaction_id: Optional[str] = None
    fallback_used: bool = False
    candidate_count: int = 0


@dataclass(frozen=True)
class NoticeLine:
    label: str
    amount: Decimal
    details: str = ""


@dataclass(frozen=True)
class PaymentNotice:
    """Read-model phục vụ in/xuất Phiếu Báo Học Phí."""

    invoice: Invoice
    student_found: bool
    balance: ReconciledBalance
    reconciliation: Reconciliation
    period_label: str
    lines: tuple[NoticeLine, ...] = ()
    center: dict | None = None
    student: dict | None = None
    payment: dict | None = None
    transfer_reference: Optional[str] = None
    qr_url: Optional[str] = None


@dataclass(frozen=True)
class DebtRow:
    student_id: str
    name: str
    class_names: str
    balance: Decimal

    @property
    def debt(self) -> Decimal:
        return abs(self.balance)


@dataclass(frozen=True)
class DebtReport:
    rows: list[DebtRow]
    total_debt: Decimal
