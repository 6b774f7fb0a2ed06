from __future__ import annotations

from typing import Optional, Sequence

from ..common.money import to_money
from ..core.enums import TransactionType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Invoice, Transaction
from .repository import LedgerRepository


def _to_invoice(r: dict) -> Invoice:
    return Invoice(
        invoice_id=str(r["invoice_id"]),
        student_id=str(r["student_id"]),
        month=r["month"],
        amount=to_money(r["amount"]),
        generated_date=r["generated_date"],
        details=r.get("details") or "",
    )


def _to_transaction(r: dict) -> Transaction:
    related = r.get("related_invoice_id")
    return Transaction(
        transaction_id=str(r["transaction_id"]),
        student_id=str(r["student_id"]),
        type=TransactionType(r["type"]),
        amount=to_money(r["amount"]),
        date=r["txn_date"],
        description=r.get("description") or "",
        related_invoice_id=str(related) if related is not None else None,
    )


class MySQLLedgerRepository(LedgerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_invoice(self, invoice_id: str) -> Optional[Invoice]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT invoice_id, student_id, month, amount, details, generated_date
                FROM invoices
                WHERE invoice_id=%s
                """,
                (invoice_id,),
            )
            r = fetchone(cur)
            return _to_invoice(r) if r else None

    def list_transactions_for_student(self, student_id: str) -> Sequence[Transaction]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT transaction_id, student_id, type, amount, txn_date, description, related_invoice_id
                FROM transactions
                WHERE student_id=%s
                ORDER BY txn_date, transaction_id
                """,
                (student_id,),
            )
            return [_to_transaction(r) for r in fetchall(cur)]
