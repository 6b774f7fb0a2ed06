from __future__ import annotations

from enum import Enum


class TransactionType(str, Enum):
    """Loại giao dịch trên sổ công nợ học viên."""

    INVOICE = "INVOICE"
    PAYMENT = "PAYMENT"
    CREDIT_ADJUSTMENT = "CREDIT_ADJUSTMENT"
    DEBIT_ADJUSTMENT = "DEBIT_ADJUSTMENT"


class SortOrder(str, Enum):
    """Chiều sắp xếp cho các báo cáo."""

    ASCENDING = "asc"
    DESCENDING = "desc"
