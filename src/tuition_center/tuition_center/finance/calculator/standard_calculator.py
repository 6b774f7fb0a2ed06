from __future__ import annotations

from decimal import Decimal

from ...common.money import ZERO, to_money
from ..model import ReconciledBalance
from .base import NoticeCalculator


class StandardNoticeCalculator(NoticeCalculator):
    """Standard rule: old debt + new fee - old credit, not below 0."""

    def compute(self, balance_before_invoice: Decimal, invoice_amount: Decimal) -> ReconciledBalance:
        before = to_money(balance_before_invoice)
        outstanding_debt = max(ZERO, -before)
        opening_credit = max(ZERO, before)
        total_due = max(ZERO, outstanding_debt + to_money(invoice_amount) - opening_credit)
        return ReconciledBalance(
            outstanding_debt=outstanding_debt,
            opening_credit=opening_credit,
            total_due=total_due,
        )
