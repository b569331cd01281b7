from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .analytics.service import AnalyticsService
from .attendance.service import AttendanceRecorder
from .core.constants import DEFAULT_CLASS_NAME, DEFAULT_TOKEN_TTL_HOURS
from .database.store import AppStore, build_store
from .notifications.broadcaster import NotificationBroadcaster
from .sessions.service import SessionLifecycleService
from .users.service import AuthService
from .users.tokens import TokenService


@dataclass(frozen=True)
class Container:
    store: AppStore

    tokens: TokenService
    broadcaster: NotificationBroadcaster

    auth_service: AuthService
    session_service: SessionLifecycleService
    attendance_recorder: AttendanceRecorder
    analytics_service: AnalyticsService


def build_container(*, settings: Mapping[str, Any], store: AppStore | None = None) -> Container:
    store = store or build_store(demo_password=str(settings["DEMO_PASSWORD"]))

    tokens = TokenService(
        str(settings["JWT_SECRET"]),
        algorithm=str(settings.get("JWT_ALGORITHM", "HS256")),
        ttl_hours=int(settings.get("TOKEN_TTL_HOURS", DEFAULT_TOKEN_TTL_HOURS)),
    )
    broadcaster = NotificationBroadcaster(scoped=bool(settings.get("SCOPED_BROADCAST", False)))

    auth_service = AuthService(store.users, tokens)
    session_service = SessionLifecycleService(
        store.sessions,
        default_class_name=str(settings.get("DEFAULT_CLASS_NAME", DEFAULT_CLASS_NAME)),
    )
    attendance_recorder = AttendanceRecorder(
        store.sessions,
        broadcaster,
        distinct_session_errors=bool(settings.get("DISTINCT_SESSION_ERRORS", False)),
    )
    analytics_service = AnalyticsService(store.roster)

    return Container(
        store=store,
        tokens=tokens,
        broadcaster=broadcaster,
        auth_service=auth_service,
        session_service=session_service,
        attendance_recorder=attendance_recorder,
        analytics_service=analytics_service,
    )
