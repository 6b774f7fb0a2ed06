from __future__ import annotations

from typing import Optional, Sequence

from ..common.money import to_money
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import ClassGroup, Student
from .repository import StudentRepository


def _to_student(r: dict) -> Student:
    return Student(
        student_id=str(r["student_id"]),
        name=r["name"],
        balance=to_money(r.get("balance")),
        parent_name=r.get("parent_name"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, parent_name, balance
                FROM students
                WHERE student_id=%s
                """,
                (student_id,),
            )
            r = fetchone(cur)
            return _to_student(r) if r else None

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT student_id, name, parent_name, balance
                FROM students
                ORDER BY name
                """
            )
            return [_to_student(r) for r in fetchall(cur)]

    def list_classes(self) -> Sequence[ClassGroup]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT c.class_id, c.class_name, cs.student_id
                FROM classes c
                LEFT JOIN class_students cs ON cs.class_id = c.class_id
                ORDER BY c.class_name, cs.student_id
                """
            )
            rows = fetchall(cur)

        grouped: dict[str, dict] = {}
        for r in rows:
            g = grouped.setdefault(str(r["class_id"]), {"name": r["class_name"], "student_ids": []})
            if r.get("student_id") is not None:
                g["student_ids"].append(str(r["student_id"]))

        return [
            ClassGroup(class_id=class_id, name=g["name"], student_ids=tuple(g["student_ids"]))
            for class_id, g in grouped.items()
        ]
