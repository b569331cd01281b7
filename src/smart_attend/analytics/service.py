from __future__ import annotations

from typing import Sequence

from ..common.math_utils import rounded_mean
from ..core.constants import (
    AT_RISK_THRESHOLD,
    ATTENDANCE_TREND_BASE,
    CRITICAL_THRESHOLD,
    DEPARTMENTS,
    EXCELLENT_THRESHOLD,
    MARKS_TREND,
    SUBJECT_ATTENDANCE,
    WARNING_THRESHOLD,
)
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..users.tokens import TokenClaims
from .model import AtRiskStudent, DepartmentSummary, FacultyView, HodView, RosterEntry, StudentView
from .repository import RosterRepository


def is_at_risk(entry: RosterEntry) -> bool:
    return entry.attendance < AT_RISK_THRESHOLD


def department_remark(avg_attendance: int) -> str:
    if avg_attendance >= EXCELLENT_THRESHOLD:
        return "Excellent"
    if avg_attendance >= AT_RISK_THRESHOLD:
        return "Good"
    return "Needs Improvement"


def risk_band(attendance: int) -> str:
    if attendance < CRITICAL_THRESHOLD:
        return "Critical"
    if attendance < WARNING_THRESHOLD:
        return "Warning"
    return "Needs Counseling"


def _require_role(requester: TokenClaims, role: Role) -> None:
    if requester.role != role:
        raise AuthorizationError("Access denied")


class AnalyticsService:
    """Read-only summaries over the static roster. Live sessions are not consulted."""

    def __init__(self, roster: RosterRepository, *, departments: Sequence[str] = DEPARTMENTS):
        self._roster = roster
        self._departments = tuple(departments)

    def summarize_department(self, department: str) -> DepartmentSummary:
        students = self._roster.list_by_department(department)
        avg = rounded_mean(s.attendance for s in students)
        return DepartmentSummary(
            department=department,
            avg_attendance=avg,
            at_risk_students=sum(1 for s in students if is_at_risk(s)),
            total_students=len(students),
            remark=department_remark(avg),
        )

    def principal_view(self, requester: TokenClaims) -> list[DepartmentSummary]:
        _require_role(requester, Role.PRINCIPAL)
        return [self.summarize_department(d) for d in self._departments]

    def hod_view(self, requester: TokenClaims) -> HodView:
        _require_role(requester, Role.HOD)
        students = self._roster.list_by_department(requester.department)
        return HodView(
            department=requester.department,
            total_students=len(students),
            avg_attendance=rounded_mean(s.attendance for s in students),
            at_risk_students=[
                AtRiskStudent(student_id=s.student_id, name=s.name, attendance=s.attendance, status=risk_band(s.attendance))
                for s in students
                if is_at_risk(s)
            ],
        )

    def faculty_view(self, requester: TokenClaims) -> FacultyView:
        _require_role(requester, Role.FACULTY)
        students = list(self._roster.list_by_department(requester.department))
        return FacultyView(
            students=students,
            total_students=len(students),
            avg_attendance=rounded_mean(s.attendance for s in students),
            avg_marks=rounded_mean(s.marks for s in students),
            at_risk_count=sum(1 for s in students if is_at_risk(s)),
        )

    def student_view(self, requester: TokenClaims) -> StudentView:
        _require_role(requester, Role.STUDENT)
        student = self._roster.get_by_id(requester.roll_no)
        if not student:
            raise NotFoundError("Student not found")
        return StudentView(
            student=student,
            attendance_trend=[*ATTENDANCE_TREND_BASE, student.attendance],
            marks_trend=list(MARKS_TREND),
            subject_attendance=list(SUBJECT_ATTENDANCE),
        )
