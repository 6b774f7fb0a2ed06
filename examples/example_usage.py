"""Ví dụ: dùng service layer (không qua Flask).

In Phiếu Báo Học Phí của một hóa đơn ra console từ dữ liệu demo (database/seed.sql).
"""

import importlib
import sys

from config import get_settings_module

from src.tuition_center.tuition_center.common.money import format_vnd
from src.tuition_center.tuition_center.container import build_container


def main(invoice_id: str = "INV-2024-03-HV001"):
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    notice = container.notice_service.build_notice(invoice_id)

    if not notice.student_found:
        print("Học viên không tồn tại.")
        return

    print(f"Phiếu Báo Học Phí - Tháng {notice.period_label} - {notice.student['name']}")
    for line in notice.lines:
        print(f"  {line.label:<40} {format_vnd(line.amount):>16}")
    print(f"  Nội dung CK: {notice.transfer_reference}")
    print(f"  QR: {notice.qr_url or '-'}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
