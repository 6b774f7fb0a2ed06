from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CenterSettings:
    """Thông tin trung tâm: hiển thị trên phiếu và cấu hình chuyển khoản."""

    name: str = ""
    address: str = ""
    phone: str = ""
    logo_url: Optional[str] = None
    theme_color: str = "#4f46e5"
    bank_name: str = ""
    bank_bin: str = ""
    bank_account_number: str = ""
    bank_account_holder: str = ""

    @property
    def has_bank_transfer(self) -> bool:
        """BIN + account number are the minimum a VietQR image needs."""
        return bool((self.bank_bin or "").strip() and (self.bank_account_number or "").strip())
