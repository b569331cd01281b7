from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Callable, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import optional_string
from ..core.constants import DEFAULT_CLASS_NAME
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.tokens import TokenClaims
from .codes import SessionCodeGenerator
from .model import Session
from .qr import render_qr_data_url
from .repository import SessionRepository

logger = logging.getLogger(__name__)


class SessionLifecycleService:
    """Use cases: start, end and list attendance sessions."""

    def __init__(
        self,
        sessions: SessionRepository,
        *,
        code_generator: Optional[Callable[[], str]] = None,
        qr_renderer: Callable[[str], str] = render_qr_data_url,
        default_class_name: str = DEFAULT_CLASS_NAME,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._sessions = sessions
        self._codes = code_generator or SessionCodeGenerator()
        self._render_qr = qr_renderer
        self._default_class_name = default_class_name
        self._clock = clock

    def start(self, requester: TokenClaims, class_name: Optional[Any] = None) -> Session:
        if requester.role != Role.FACULTY:
            raise AuthorizationError("Only faculty can start sessions")

        class_name = optional_string(class_name, "className") or self._default_class_name
        code = self._codes()
        session = self._sessions.add(
            session_code=code,
            professor_id=requester.user_id,
            professor_name=requester.name,
            class_name=class_name,
            qr_code=self._render_qr(code),
            start_time=self._clock(),
        )
        logger.info("Session %s (%s) started by %s", session.session_id, class_name, requester.username)
        return session

    def end(self, requester: TokenClaims, session_id: int) -> Session:
        session = self._sessions.get_by_id(session_id)
        if not session:
            raise NotFoundError("Session not found")
        if session.professor_id != requester.user_id:
            raise AuthorizationError("Access denied")

        # Ending twice re-applies and moves end_time forward.
        ended = self._sessions.deactivate(session_id, end_time=self._clock())
        logger.info(
            "Session %s ended by %s with %d attendees", session_id, requester.username, ended.total_attendees
        )
        return ended

    def list_active(self, requester: TokenClaims) -> Sequence[Session]:
        if requester.role != Role.FACULTY:
            raise AuthorizationError("Access denied")
        return self._sessions.list_for_professor(requester.user_id, active_only=True)

    def get_owned(self, requester: TokenClaims, session_id: int) -> Session:
        session = self._sessions.get_by_id(session_id)
        if not session:
            raise NotFoundError("Session not found")
        if session.professor_id != requester.user_id:
            raise AuthorizationError("Access denied")
        return session
