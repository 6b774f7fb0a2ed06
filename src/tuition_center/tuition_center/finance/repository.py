from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Invoice, Transaction


class LedgerRepository(Protocol):
    """Read-only view over invoices and ledger transactions.

    Writes (invoice generation, payments) belong to the ledger owner.
    """

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        raise NotImplementedError

    def list_transactions_for_student(self, student_id: str) -> Sequence[Transaction]:
        """Transactions in ledger order (oldest first)."""

        raise NotImplementedError
