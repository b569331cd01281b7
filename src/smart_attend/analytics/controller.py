from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..users.guards import build_token_required, current_user


def register(app: Flask, container: Container) -> None:
    token_required = build_token_required(container.tokens)
    analytics = container.analytics_service

    @app.route("/api/analytics/principal", endpoint="analytics_principal")
    @token_required
    def analytics_principal():
        summaries = analytics.principal_view(current_user())
        return jsonify({"analytics": [s.to_dict() for s in summaries]})

    @app.route("/api/analytics/hod", endpoint="analytics_hod")
    @token_required
    def analytics_hod():
        return jsonify(analytics.hod_view(current_user()).to_dict())

    @app.route("/api/analytics/faculty", endpoint="analytics_faculty")
    @token_required
    def analytics_faculty():
        return jsonify(analytics.faculty_view(current_user()).to_dict())

    @app.route("/api/analytics/student", endpoint="analytics_student")
    @token_required
    def analytics_student():
        return jsonify(analytics.student_view(current_user()).to_dict())
