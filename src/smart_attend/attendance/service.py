from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional

from ..common.datetime_utils import now_utc
from ..common.validators import optional_string, require_non_empty
from ..core.enums import CaptureMethod, MarkOutcome
from ..core.exceptions import SessionEndedError, SessionNotFoundError
from ..notifications.broadcaster import NotificationBroadcaster
from ..notifications.model import AttendanceUpdate
from ..sessions.model import AttendanceRecord
from ..sessions.repository import SessionRepository
from .model import MarkResult

logger = logging.getLogger(__name__)


def default_student_name(student_id: str) -> str:
    return f"Student {student_id}"


class AttendanceRecorder:
    """Use case: mark a participant present in an active session, at most once.

    No authentication is involved: knowing an active session code is enough.
    """

    def __init__(
        self,
        sessions: SessionRepository,
        broadcaster: NotificationBroadcaster,
        *,
        distinct_session_errors: bool = False,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._sessions = sessions
        self._broadcaster = broadcaster
        self._distinct_errors = distinct_session_errors
        self._clock = clock

    def _not_found(self, session_code: str) -> SessionNotFoundError:
        if self._distinct_errors:
            session = self._sessions.find_by_code(session_code)
            if session and not session.is_active:
                return SessionEndedError("Session has ended")
        return SessionNotFoundError("Session not found or expired")

    def mark(self, session_code: Any, student_id: Any, student_name: Optional[Any] = None) -> MarkResult:
        session_code = require_non_empty(session_code, "sessionCode")
        student_id = require_non_empty(student_id, "studentId")
        student_name = optional_string(student_name, "studentName")

        session = self._sessions.find_active_by_code(session_code)
        if not session:
            raise self._not_found(session_code)

        existing = session.get_attendee(student_id)
        if existing:
            return MarkResult(
                outcome=MarkOutcome.ALREADY_RECORDED,
                student_name=existing.student_name,
                total_attendees=session.total_attendees,
            )

        record = AttendanceRecord(
            student_id=student_id,
            student_name=student_name or default_student_name(student_id),
            timestamp=self._clock(),
            method=CaptureMethod.SCAN,
        )
        # The registry re-checks active state and duplicates under its own lock;
        # the session may have ended or the participant been recorded meanwhile.
        try:
            session, added = self._sessions.append_attendee_if_active(session.session_id, record)
        except SessionNotFoundError:
            raise self._not_found(session_code) from None

        if not added:
            existing = session.get_attendee(student_id)
            return MarkResult(
                outcome=MarkOutcome.ALREADY_RECORDED,
                student_name=existing.student_name,
                total_attendees=session.total_attendees,
            )

        logger.info(
            "Recorded %s in session %s (%d present)", student_id, session.session_id, session.total_attendees
        )
        self._broadcaster.publish(
            AttendanceUpdate(
                session_code=session_code,
                student_id=record.student_id,
                student_name=record.student_name,
                total_attendees=session.total_attendees,
                timestamp=record.timestamp,
            )
        )
        return MarkResult(
            outcome=MarkOutcome.RECORDED,
            student_name=record.student_name,
            total_attendees=session.total_attendees,
        )
