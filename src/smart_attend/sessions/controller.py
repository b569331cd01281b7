from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.validators import require_json_object
from ..container import Container
from ..users.guards import build_token_required, current_user


def register(app: Flask, container: Container) -> None:
    token_required = build_token_required(container.tokens)

    @app.route("/api/sessions/start", methods=["POST"], endpoint="start_session")
    @token_required
    def start_session():
        data = require_json_object(request.get_json(silent=True) or {})
        session = container.session_service.start(current_user(), data.get("className"))
        return jsonify({"success": True, "session": session.to_dict(), "qrCode": session.qr_code})

    @app.route("/api/sessions/active", endpoint="active_sessions")
    @token_required
    def active_sessions():
        sessions = container.session_service.list_active(current_user())
        return jsonify({"sessions": [s.to_dict() for s in sessions]})

    @app.route("/api/sessions/<int:session_id>", endpoint="session_detail")
    @token_required
    def session_detail(session_id: int):
        session = container.session_service.get_owned(current_user(), session_id)
        return jsonify({"session": session.to_dict()})

    @app.route("/api/sessions/<int:session_id>/end", methods=["POST"], endpoint="end_session")
    @token_required
    def end_session(session_id: int):
        container.session_service.end(current_user(), session_id)
        return jsonify({"success": True, "message": "Session ended successfully"})
