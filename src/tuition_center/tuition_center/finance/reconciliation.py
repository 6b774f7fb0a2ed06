from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.money import ZERO, to_money
from ..core.enums import TransactionType
from ..students.model import Student
from .model import Invoice, Reconciliation, Transaction

logger = logging.getLogger(__name__)


class BalanceReconciler:
    """Recover the balance a student had just before an invoice was applied.

    ``student.balance`` already includes the invoice debit, so subtracting
    that debit's signed amount undoes it:
    current ``-500``, debit ``-300`` -> before ``-200``.
    """

    def find_invoice_debits(self, invoice: Invoice, transactions: Iterable[Transaction]) -> list[Transaction]:
        return [
            t
            for t in transactions
            if t.type == TransactionType.INVOICE and t.related_invoice_id == invoice.invoice_id
        ]

    def reconcile(
        self,
        student: Optional[Student],
        invoice: Invoice,
        transactions: Iterable[Transaction],
    ) -> Reconciliation:
        if student is None:
            return Reconciliation(student_found=False, balance_before_invoice=ZERO, debit_amount=ZERO)

        candidates = self.find_invoice_debits(invoice, transactions)
        if len(candidates) > 1:
            logger.warning(
                "Invoice %s has %d invoice debits (%s); using the first",
                invoice.invoice_id,
                len(candidates),
                ", ".join(t.transaction_id for t in candidates),
            )

        if candidates:
            linked = candidates[0]
            debit_amount = to_money(linked.amount)
        else:
            linked = None
            # Best effort: assume the full invoice amount was debited.
            debit_amount = -to_money(invoice.amount)
            logger.debug("Invoice %s has no linked debit; falling back to invoice amount", invoice.invoice_id)

        return Reconciliation(
            student_found=True,
            balance_before_invoice=to_money(student.balance) - debit_amount,
            debit_amount=debit_amount,
            linked_transaction_id=linked.transaction_id if linked else None,
            fallback_used=linked is None,
            candidate_count=len(candidates),
        )
