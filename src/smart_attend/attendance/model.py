from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import MarkOutcome


@dataclass(frozen=True)
class MarkResult:
    """Outcome of a mark-attendance request."""

    outcome: MarkOutcome
    student_name: str
    total_attendees: int

    @property
    def already_marked(self) -> bool:
        return self.outcome == MarkOutcome.ALREADY_RECORDED

    def to_dict(self) -> dict:
        return {
            "success": True,
            "message": "Attendance already marked" if self.already_marked else "Attendance marked successfully",
            "studentName": self.student_name,
            "alreadyMarked": self.already_marked,
            "totalAttendees": self.total_attendees,
        }
