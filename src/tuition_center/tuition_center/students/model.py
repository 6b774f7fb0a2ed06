from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Thực thể miền (domain): Học viên.

    ``balance`` là số dư thời gian thực: âm = đang nợ, dương = trả trước.
    Lưu ý: chỉ sổ công nợ (ledger) mới được phép thay đổi số dư.
    """

    student_id: str
    name: str
    balance: Decimal
    parent_name: Optional[str] = None

    @property
    def guardian_name(self) -> str:
        return self.parent_name or self.name


@dataclass(frozen=True)
class ClassGroup:
    """Thực thể miền (domain): Lớp học và danh sách học viên."""

    class_id: str
    name: str
    student_ids: tuple[str, ...] = field(default_factory=tuple)
