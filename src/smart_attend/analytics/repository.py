from __future__ import annotations

from typing import Iterable, Optional, Protocol, Sequence

from .model import RosterEntry


class RosterRepository(Protocol):
    def list_by_department(self, department: Optional[str]) -> Sequence[RosterEntry]:
        raise NotImplementedError

    def get_by_id(self, student_id: Optional[str]) -> Optional[RosterEntry]:
        raise NotImplementedError


class InMemoryRosterRepository(RosterRepository):
    """Read-only roster loaded from seed data."""

    def __init__(self, entries: Iterable[RosterEntry] = ()):
        self._entries: tuple[RosterEntry, ...] = tuple(entries)

    def list_by_department(self, department: Optional[str]) -> Sequence[RosterEntry]:
        return [e for e in self._entries if e.department == department]

    def get_by_id(self, student_id: Optional[str]) -> Optional[RosterEntry]:
        return next((e for e in self._entries if e.student_id == student_id), None)
