from __future__ import annotations

from typing import Optional

from ..common.money import ZERO, round_vnd
from ..common.validators import require_positive_int
from ..core.constants import DEFAULT_HIGH_DEBT_LIMIT
from ..core.enums import SortOrder
from ..core.exceptions import ValidationError
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import DebtReport, DebtRow

SORT_KEYS = {"balance", "name"}

CSV_HEADERS = {
    "name": "Họ Tên",
    "class_names": "Các Lớp Học",
    "debt": "Số Tiền Nợ",
}


class DebtReportService:
    """Báo cáo công nợ học phí: học viên có số dư âm."""

    def __init__(self, students: StudentRepository):
        self._students = students

    def build_debt_report(
        self,
        *,
        class_id: Optional[str] = None,
        query: Optional[str] = None,
        sort_key: str = "balance",
        order: SortOrder | str = SortOrder.ASCENDING,
    ) -> DebtReport:
        if sort_key not in SORT_KEYS:
            raise ValidationError(f"Không hỗ trợ sắp xếp theo '{sort_key}'")
        try:
            order = SortOrder(order)
        except ValueError:
            raise ValidationError(f"Chiều sắp xếp '{order}' không hợp lệ") from None

        students = list(self._students.list_all())
        classes = list(self._students.list_classes())

        if class_id and class_id != "all":
            # Unknown class ids leave the list unfiltered.
            selected = next((c for c in classes if c.class_id == class_id), None)
            if selected:
                in_class = set(selected.student_ids)
                students = [s for s in students if s.student_id in in_class]

        if query:
            q = query.strip().lower()
            students = [s for s in students if q in s.name.lower() or q in s.student_id.lower()]

        rows = [
            DebtRow(
                student_id=s.student_id,
                name=s.name,
                class_names=", ".join(c.name for c in classes if s.student_id in c.student_ids),
                balance=s.balance,
            )
            for s in students
            if s.balance < 0
        ]
        rows.sort(key=lambda r: getattr(r, sort_key), reverse=order == SortOrder.DESCENDING)

        total_debt = sum((r.debt for r in rows), ZERO)
        return DebtReport(rows=rows, total_debt=total_debt)

    def high_debt_students(self, *, limit: int = DEFAULT_HIGH_DEBT_LIMIT) -> list[Student]:
        limit = require_positive_int(limit, "Số lượng")
        debtors = [s for s in self._students.list_all() if s.balance < 0]
        debtors.sort(key=lambda s: s.balance)
        return debtors[:limit]

    def export_rows(self, report: DebtReport) -> list[dict]:
        return [{"name": r.name, "class_names": r.class_names, "debt": round_vnd(r.debt)} for r in report.rows]
