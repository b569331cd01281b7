from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/auth/login", methods=["POST"], endpoint="login")
    def login():
        data = require_json_object(request.get_json(silent=True))
        result = container.auth_service.login(
            data.get("username"),
            data.get("password"),
            data.get("role"),
        )
        return jsonify(result.to_dict())
