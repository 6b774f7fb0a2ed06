from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from ..model import ReconciledBalance


class NoticeCalculator(ABC):
    """Calculator interface (Strategy Pattern for payment notices)."""

    @abstractmethod
    def compute(self, balance_before_invoice: Decimal, invoice_amount: Decimal) -> ReconciledBalance:
        raise NotImplementedError
