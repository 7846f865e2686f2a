from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_error, request_payload
from ..core.exceptions import DomainError
from ..container import Container

_EDITABLE = ("work_date", "time_in", "time_out", "worked_hours", "slab_mode", "sunday_mode", "fare")


def _flag(value) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "on", "yes"}
    return bool(value)


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance", methods=["GET"], endpoint="api_attendance")
    def api_attendance():
        month = (request.args.get("month") or "").strip()
        employee_id = request.args.get("employee_id", type=int)
        try:
            if month:
                rows = container.attendance_service.list_for_month(month, employee_id=employee_id)
            else:
                rows = [
                    r
                    for r in container.attendance_service.list_all()
                    if employee_id is None or r.employee_id == employee_id
                ]
        except DomainError as e:
            return json_error(e)
        return jsonify([r.to_dict() for r in rows])

    @app.route("/api/attendance", methods=["POST"], endpoint="api_attendance_create")
    def api_attendance_create():
        data = request_payload()
        try:
            attendance_id = container.attendance_service.mark(
                employee_id=int(data.get("employee_id") or 0),
                work_date=data.get("work_date") or data.get("date") or "",
                time_in=data.get("time_in"),
                time_out=data.get("time_out"),
                worked_hours=data.get("worked_hours"),
                slab_mode=_flag(data.get("slab_mode")),
                sunday_mode=_flag(data.get("sunday_mode")),
                fare=data.get("fare") or 0,
            )
            return jsonify(container.attendance_service.get(attendance_id).to_dict()), 201
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/<int:attendance_id>", methods=["PUT"], endpoint="api_attendance_update")
    def api_attendance_update(attendance_id: int):
        data = request_payload()
        changes = {k: data[k] for k in _EDITABLE if k in data}
        for key in ("slab_mode", "sunday_mode"):
            if key in changes:
                changes[key] = _flag(changes[key])
        try:
            return jsonify(container.attendance_service.edit(attendance_id, changes).to_dict())
        except DomainError as e:
            return json_error(e)

    @app.route("/api/attendance/<int:attendance_id>", methods=["DELETE"], endpoint="api_attendance_delete")
    def api_attendance_delete(attendance_id: int):
        try:
            container.attendance_service.delete(attendance_id)
        except DomainError as e:
            return json_error(e)
        return jsonify({"success": True})
