from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import to_iso
from ..core.enums import CaptureMethod


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one participant marked present in a session."""

    student_id: str
    student_name: str
    timestamp: datetime
    method: CaptureMethod = CaptureMethod.SCAN

    def to_dict(self) -> dict:
        return {
            "studentId": self.student_id,
            "studentName": self.student_name,
            "timestamp": to_iso(self.timestamp),
            "method": self.method.value,
        }


@dataclass(frozen=True)
class Session:
    """Domain entity: an attendance-collection window owned by one faculty.

    Snapshots are immutable; the registry replaces its stored copy whenever an
    attendee is appended or the session is ended. ``attendees`` is kept in
    arrival order.
    """

    session_id: int
    session_code: str
    professor_id: str
    professor_name: str
    class_name: str
    qr_code: str
    is_active: bool
    start_time: datetime
    end_time: Optional[datetime] = None
    attendees: tuple[AttendanceRecord, ...] = ()

    @property
    def total_attendees(self) -> int:
        return len(self.attendees)

    def get_attendee(self, student_id: str) -> Optional[AttendanceRecord]:
        return next((a for a in self.attendees if a.student_id == student_id), None)

    def to_dict(self) -> dict:
        return {
            "id": self.session_id,
            "sessionCode": self.session_code,
            "professorId": self.professor_id,
            "professorName": self.professor_name,
            "className": self.class_name,
            "qrCode": self.qr_code,
            "isActive": self.is_active,
            "startTime": to_iso(self.start_time),
            "endTime": to_iso(self.end_time),
            "attendees": [a.to_dict() for a in self.attendees],
        }
