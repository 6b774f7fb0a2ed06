from __future__ import annotations

from dataclasses import dataclass

from .center.mysql_center_repository import MySQLCenterSettingsRepository
from .database.connection import DBConfig, DatabaseConnection
from .finance.debt_report_service import DebtReportService
from .finance.mysql_ledger_repository import MySQLLedgerRepository
from .finance.service import TuitionNoticeService
from .students.mysql_student_repository import MySQLStudentRepository


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    students_repo: MySQLStudentRepository
    ledger_repo: MySQLLedgerRepository
    center_repo: MySQLCenterSettingsRepository

    notice_service: TuitionNoticeService
    debt_report_service: DebtReportService


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    students_repo = MySQLStudentRepository(conn)
    ledger_repo = MySQLLedgerRepository(conn)
    center_repo = MySQLCenterSettingsRepository(conn)

    notice_service = TuitionNoticeService(students_repo, ledger_repo, center_repo)
    debt_report_service = DebtReportService(students_repo)

    return Container(
        conn=conn,
        students_repo=students_repo,
        ledger_repo=ledger_repo,
        center_repo=center_repo,
        notice_service=notice_service,
        debt_report_service=debt_report_service,
    )
