from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassGroup, Student


class StudentRepository(Protocol):
    """Giao diện repository cho Student/ClassGroup.

    Lưu ý (DIP): tầng service phụ thuộc vào interface này, không phụ thuộc trực tiếp DB cụ thể.
    """

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def list_classes(self) -> Sequence[ClassGroup]:
        raise NotImplementedError
