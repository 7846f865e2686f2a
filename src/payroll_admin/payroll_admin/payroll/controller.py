from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_error
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/payroll", methods=["GET"], endpoint="api_payroll")
    def api_payroll():
        month = _month_arg()
        if not month:
            return _missing_month()
        try:
            statements = container.payroll_service.monthly_payroll(month)
        except DomainError as e:
            return json_error(e)
        return jsonify([s.to_dict() for s in statements])

    @app.route("/api/payroll/<int:employee_id>/payslip", methods=["GET"], endpoint="api_payslip")
    def api_payslip(employee_id: int):
        month = _month_arg()
        if not month:
            return _missing_month()
        try:
            payslip = container.payroll_service.payslip(employee_id, month)
        except DomainError as e:
            return json_error(e)
        return jsonify(payslip.to_dict())


def _month_arg() -> str:
    return (request.args.get("month") or "").strip()


def _missing_month():
    return jsonify({"success": False, "message": "month is required (YYYY-MM)"}), 400
