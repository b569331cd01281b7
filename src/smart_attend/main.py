from __future__ import annotations

import importlib
import logging
from typing import Any, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify
from flask_cors import CORS

from config import get_settings_module

from .analytics.controller import register as register_analytics
from .attendance.controller import register as register_attendance
from .common.datetime_utils import now_utc, to_iso
from .common.http import register_error_handlers
from .container import build_container
from .notifications.controller import register as register_notifications
from .sessions.controller import register as register_sessions
from .users.controller import register as register_users

logger = logging.getLogger(__name__)

SETTINGS_KEYS = (
    "SECRET_KEY",
    "JWT_SECRET",
    "JWT_ALGORITHM",
    "TOKEN_TTL_HOURS",
    "DEMO_PASSWORD",
    "DEFAULT_CLASS_NAME",
    "SCOPED_BROADCAST",
    "DISTINCT_SESSION_ERRORS",
    "CORS_ORIGINS",
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "DEBUG",
    "TESTING",
)


def load_settings(settings_module: Optional[str] = None, **overrides: Any) -> dict:
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    values = {key: getattr(settings, key) for key in SETTINGS_KEYS if hasattr(settings, key)}
    values["SETTINGS_MODULE"] = settings_module
    values.update(overrides)
    return values


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def create_app(settings_module: Optional[str] = None, **overrides: Any) -> Flask:
    load_dotenv(override=False)
    settings = load_settings(settings_module, **overrides)
    configure_logging(str(settings.get("LOG_LEVEL", "INFO")).upper())

    app = Flask(__name__)
    app.config.update(settings)
    app.secret_key = settings["SECRET_KEY"]

    logger.info("[smart-attend] settings=%s storage=in-memory", settings["SETTINGS_MODULE"])

    CORS(app, resources={r"/api/*": {"origins": settings.get("CORS_ORIGINS", "*")}})

    container = build_container(settings=settings)
    app.extensions["smart_attend"] = container

    @app.route("/api/health", endpoint="health")
    def health():
        return jsonify({"status": "OK", "timestamp": to_iso(now_utc()), "storage": "in-memory"})

    register_users(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_notifications(app, container)
    register_analytics(app, container)
    register_error_handlers(app)

    return app


def run() -> None:
    app = create_app()
    # Threaded so event streams do not block other requests
    app.run(
        host=app.config.get("HOST", "127.0.0.1"),
        port=int(app.config.get("PORT", 5000)),
        debug=bool(app.config.get("DEBUG", False)),
        threaded=True,
    )


if __name__ == "__main__":
    run()
