from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/attendance/mark", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        """Open endpoint: possession of an active session code is the only credential."""
        data = require_json_object(request.get_json(silent=True))
        result = container.attendance_recorder.mark(
            data.get("sessionCode"),
            data.get("studentId"),
            data.get("studentName"),
        )
        return jsonify(result.to_dict())
