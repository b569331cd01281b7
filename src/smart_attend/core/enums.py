from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles used for route gating."""

    PRINCIPAL = "principal"
    HOD = "hod"
    FACULTY = "faculty"
    STUDENT = "student"


class CaptureMethod(str, Enum):
    """How an attendance record was captured. Only scanning exists today."""

    SCAN = "scan"


class MarkOutcome(str, Enum):
    RECORDED = "RECORDED"
    ALREADY_RECORDED = "ALREADY_RECORDED"
