from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class RosterEntry:
    """Static per-student figures used by the dashboards."""

    student_id: str
    name: str
    department: str
    attendance: int
    marks: int

    def to_dict(self) -> dict:
        return {
            "id": self.student_id,
            "name": self.name,
            "department": self.department,
            "attendance": self.attendance,
            "marks": self.marks,
        }


@dataclass(frozen=True)
class DepartmentSummary:
    department: str
    avg_attendance: int
    at_risk_students: int
    total_students: int
    remark: str

    def to_dict(self) -> dict:
        return {
            "department": self.department,
            "avgAttendance": self.avg_attendance,
            "atRiskStudents": self.at_risk_students,
            "totalStudents": self.total_students,
            "remark": self.remark,
        }


@dataclass(frozen=True)
class AtRiskStudent:
    student_id: str
    name: str
    attendance: int
    status: str

    def to_dict(self) -> dict:
        return {"id": self.student_id, "name": self.name, "attendance": self.attendance, "status": self.status}


@dataclass(frozen=True)
class HodView:
    department: Optional[str]
    total_students: int
    avg_attendance: int
    at_risk_students: list[AtRiskStudent] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "department": self.department,
            "totalStudents": self.total_students,
            "avgAttendance": self.avg_attendance,
            "atRiskStudents": [s.to_dict() for s in self.at_risk_students],
        }


@dataclass(frozen=True)
class FacultyView:
    students: list[RosterEntry]
    total_students: int
    avg_attendance: int
    avg_marks: int
    at_risk_count: int

    def to_dict(self) -> dict:
        return {
            "students": [s.to_dict() for s in self.students],
            "classStats": {
                "totalStudents": self.total_students,
                "avgAttendance": self.avg_attendance,
                "avgMarks": self.avg_marks,
                "atRiskCount": self.at_risk_count,
            },
        }


@dataclass(frozen=True)
class StudentView:
    student: RosterEntry
    attendance_trend: list[int]
    marks_trend: list[int]
    subject_attendance: list[tuple[str, int]]

    def to_dict(self) -> dict:
        return {
            "student": self.student.to_dict(),
            "attendanceTrend": list(self.attendance_trend),
            "marksTrend": list(self.marks_trend),
            "subjectAttendance": [
                {"subject": subject, "attendance": pct} for subject, pct in self.subject_attendance
            ],
        }
