from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_error, request_payload
from ..core.exceptions import DomainError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/settings", methods=["GET"], endpoint="api_settings")
    def api_settings():
        return jsonify(container.settings_service.get().to_dict())

    @app.route("/api/settings", methods=["POST"], endpoint="api_settings_update")
    def api_settings_update():
        data = request_payload()
        try:
            updated = container.settings_service.update(
                standard_hours=data.get("standard_hours"),
                slab_hours=data.get("slab_hours"),
            )
        except DomainError as e:
            return json_error(e)
        return jsonify(updated.to_dict())
