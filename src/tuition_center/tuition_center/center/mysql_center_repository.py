from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import CenterSettings
from .repository import CenterSettingsRepository


class MySQLCenterSettingsRepository(CenterSettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get(self) -> CenterSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT name, address, phone, logo_url, theme_color,
                       bank_name, bank_bin, bank_account_number, bank_account_holder
                FROM center_settings
                ORDER BY settings_id
                LIMIT 1
                """
            )
            r = fetchone(cur)
            if not r:
                return CenterSettings()
            return CenterSettings(
                name=r.get("name") or "",
                address=r.get("address") or "",
                phone=r.get("phone") or "",
                logo_url=r.get("logo_url"),
                theme_color=r.get("theme_color") or CenterSettings.theme_color,
                bank_name=r.get("bank_name") or "",
                bank_bin=r.get("bank_bin") or "",
                bank_account_number=r.get("bank_account_number") or "",
                bank_account_holder=r.get("bank_account_holder") or "",
            )
