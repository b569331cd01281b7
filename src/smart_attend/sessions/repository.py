from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, Session


class SessionRepository(Protocol):
    """Session registry interface.

    The registry is the only owner of sessions. Callers mutate through these
    methods by id and receive immutable snapshots back.
    """

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
        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[Session]:
        raise NotImplementedError

    def find_by_code(self, session_code: str) -> Optional[Session]:
        raise NotImplementedError

    def find_active_by_code(self, session_code: str) -> Optional[Session]:
        raise NotImplementedError

    def list_for_professor(self, professor_id: str, *, active_only: bool = False) -> Sequence[Session]:
        raise NotImplementedError

    def append_attendee_if_active(self, session_id: int, record: AttendanceRecord) -> tuple[Session, bool]:
        """Append ``record`` unless its participant is already present.

        Returns the current snapshot and whether the record was added. Raises
        ``SessionNotFoundError`` when the session is no longer active.
        """
        raise NotImplementedError

    def deactivate(self, session_id: int, *, end_time: datetime) -> Session:
        raise NotImplementedError
