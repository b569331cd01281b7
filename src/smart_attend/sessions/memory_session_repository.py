from __future__ import annotations

import threading
from dataclasses import replace
from datetime import datetime
from typing import Optional, Sequence

from ..core.exceptions import NotFoundError, SessionNotFoundError
from .model import AttendanceRecord, Session
from .repository import SessionRepository


class InMemorySessionRepository(SessionRepository):
    """Append-only list of sessions in creation order.

    Lookups are linear scans; the registry stays small for a process lifetime.
    """

    def __init__(self):
        self._sessions: list[Session] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def add(
        self,
        *,
        session_code: str,
        professor_id: str,
        professor_name: str,
        class_name: str,
        qr_code: str,
        start_time: datetime,
    ) -> Session:
        with self._lock:
            session = Session(
                session_id=self._next_id,
                session_code=session_code,
                professor_id=professor_id,
                professor_name=professor_name,
                class_name=class_name,
                qr_code=qr_code,
                is_active=True,
                start_time=start_time,
            )
            self._next_id += 1
            self._sessions.append(session)
            return session

    def get_by_id(self, session_id: int) -> Optional[Session]:
        with self._lock:
            return next((s for s in self._sessions if s.session_id == session_id), None)

    def find_by_code(self, session_code: str) -> Optional[Session]:
        with self._lock:
            return next((s for s in self._sessions if s.session_code == session_code), None)

    def find_active_by_code(self, session_code: str) -> Optional[Session]:
        with self._lock:
            return next((s for s in self._sessions if s.session_code == session_code and s.is_active), None)

    def list_for_professor(self, professor_id: str, *, active_only: bool = False) -> Sequence[Session]:
        with self._lock:
            return [
                s for s in self._sessions if s.professor_id == professor_id and (s.is_active or not active_only)
            ]

    def list_all(self) -> Sequence[Session]:
        with self._lock:
            return list(self._sessions)

    def append_attendee_if_active(self, session_id: int, record: AttendanceRecord) -> tuple[Session, bool]:
        with self._lock:
            idx = self._index_of(session_id)
            current = self._sessions[idx]
            if not current.is_active:
                raise SessionNotFoundError("Session not found or expired")
            if current.get_attendee(record.student_id):
                return current, False
            updated = replace(current, attendees=current.attendees + (record,))
            self._sessions[idx] = updated
            return updated, True

    def deactivate(self, session_id: int, *, end_time: datetime) -> Session:
        with self._lock:
            idx = self._index_of(session_id)
            updated = replace(self._sessions[idx], is_active=False, end_time=end_time)
            self._sessions[idx] = updated
            return updated

    def _index_of(self, session_id: int) -> int:
        for idx, s in enumerate(self._sessions):
            if s.session_id == session_id:
                return idx
        raise NotFoundError("Session not found")
