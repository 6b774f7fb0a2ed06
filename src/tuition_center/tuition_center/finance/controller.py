from __future__ import annotations

import csv
import io
from datetime import date

from flask import Flask, jsonify, redirect, request

from ..common.money import format_vnd, round_vnd
from ..container import Container
from ..core.constants import DEFAULT_CSV_ENCODING, DEFAULT_HIGH_DEBT_LIMIT
from ..core.exceptions import NotFoundError, ValidationError
from .debt_report_service import CSV_HEADERS
from .model import PaymentNotice
from .service import NOTICE_TITLE, STUDENT_MISSING_MESSAGE


def notice_to_json(notice: PaymentNotice) -> dict:
    invoice = notice.invoice
    data = {
        "invoice_id": invoice.invoice_id,
        "title": NOTICE_TITLE,
        "period": f"Kỳ: Tháng {notice.period_label}",
        "student_found": notice.student_found,
        "center": notice.center,
    }
    if not notice.student_found:
        data["message"] = STUDENT_MISSING_MESSAGE
        return data

    data.update(
        {
            "student": notice.student,
            "lines": [
                {
                    "label": line.label,
                    "amount": round_vnd(line.amount),
                    "display": format_vnd(line.amount),
                    "details": line.details,
                }
                for line in notice.lines
            ],
            "outstanding_debt": round_vnd(notice.balance.outstanding_debt),
            "opening_credit": round_vnd(notice.balance.opening_credit),
            "invoice_amount": round_vnd(invoice.amount),
            "total_due": round_vnd(notice.balance.total_due),
            "total_due_display": format_vnd(notice.balance.total_due),
            "payment": dict(notice.payment or {}, transfer_reference=notice.transfer_reference),
            "qr_url": notice.qr_url,
            "reconciliation": {
                "balance_before_invoice": round_vnd(notice.reconciliation.balance_before_invoice),
                "linked_transaction_id": notice.reconciliation.linked_transaction_id,
                "fallback_used": notice.reconciliation.fallback_used,
            },
        }
    )
    return data


def register(app: Flask, container: Container) -> None:
    def _error(message: str, status: int):
        return jsonify({"success": False, "message": message}), status

    @app.errorhandler(NotFoundError)
    def handle_not_found(e: NotFoundError):
        return _error(str(e), 404)

    @app.errorhandler(ValidationError)
    def handle_validation(e: ValidationError):
        return _error(str(e), 400)

    def _debt_report_from_args():
        return container.debt_report_service.build_debt_report(
            class_id=request.args.get("class_id") or None,
            query=request.args.get("q") or None,
            sort_key=request.args.get("sort") or "balance",
            order=request.args.get("order") or "asc",
        )

    @app.route("/api/invoices/<invoice_id>/notice", methods=["GET"], endpoint="invoice_notice")
    def invoice_notice(invoice_id: str):
        notice = container.notice_service.build_notice(invoice_id)
        return jsonify({"success": True, "notice": notice_to_json(notice)})

    @app.route("/api/invoices/<invoice_id>/notice/qr", methods=["GET"], endpoint="invoice_notice_qr")
    def invoice_notice_qr(invoice_id: str):
        notice = container.notice_service.build_notice(invoice_id)
        if not notice.qr_url:
            return _error("Không có mã QR cho phiếu này", 404)
        return redirect(notice.qr_url, code=302)

    @app.route("/api/finance/debts", methods=["GET"], endpoint="debt_report")
    def debt_report():
        report = _debt_report_from_args()
        return jsonify(
            {
                "success": True,
                "total_debt": round_vnd(report.total_debt),
                "total_debt_display": format_vnd(report.total_debt),
                "rows": [
                    {
                        "student_id": r.student_id,
                        "name": r.name,
                        "class_names": r.class_names,
                        "debt": round_vnd(r.debt),
                        "debt_display": format_vnd(r.debt),
                    }
                    for r in report.rows
                ],
            }
        )

    @app.route("/api/finance/debts.csv", methods=["GET"], endpoint="debt_report_csv")
    def debt_report_csv():
        report = _debt_report_from_args()

        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=list(CSV_HEADERS))
        writer.writerow(CSV_HEADERS)
        for row in container.debt_report_service.export_rows(report):
            writer.writerow(row)

        filename = f"BaoCaoCongNo_{date.today().strftime('%Y%m%d')}.csv"
        return app.response_class(
            out.getvalue().encode(DEFAULT_CSV_ENCODING),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={filename}"},
        )

    @app.route("/api/finance/high-debt", methods=["GET"], endpoint="high_debt")
    def high_debt():
        limit = request.args.get("limit", DEFAULT_HIGH_DEBT_LIMIT)
        students = container.debt_report_service.high_debt_students(limit=limit)
        return jsonify(
            {
                "success": True,
                "students": [
                    {
                        "student_id": s.student_id,
                        "name": s.name,
                        "debt": round_vnd(abs(s.balance)),
                        "debt_display": format_vnd(abs(s.balance)),
                    }
                    for s in students
                ],
            }
        )
