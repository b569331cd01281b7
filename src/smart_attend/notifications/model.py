from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class AttendanceUpdate:
    """Event pushed to listeners after a participant is newly recorded."""

    event_name: ClassVar[str] = "attendanceUpdate"

    session_code: str
    student_id: str
    student_name: str
    total_attendees: int
    timestamp: datetime

    def to_dict(self) -> dict:
        return {
            "sessionCode": self.session_code,
            "studentId": self.student_id,
            "studentName": self.student_name,
            "totalAttendees": self.total_attendees,
            "timestamp": to_iso(self.timestamp),
        }
