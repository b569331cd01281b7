"""Demo accounts and roster loaded at startup."""
from __future__ import annotations

from werkzeug.security import generate_password_hash

from ..analytics.model import RosterEntry
from ..core.enums import Role
from ..users.model import User

DEMO_USERS = (
    # (id, username, role, name, department, roll_no)
    ("1", "principal", Role.PRINCIPAL, "Dr. Principal", None, None),
    ("2", "hod", Role.HOD, "Prof. HOD", "CSE", None),
    ("3", "faculty", Role.FACULTY, "Dr. Faculty", "CSE", None),
    ("4", "student", Role.STUDENT, "Alice Johnson", None, "CS001"),
    ("5", "student2", Role.STUDENT, "Bob Smith", None, "CS002"),
)

DEMO_ROSTER = (
    RosterEntry("CS001", "Alice Johnson", "CSE", 94, 91),
    RosterEntry("CS002", "Bob Smith", "CSE", 74, 72),
    RosterEntry("CS003", "Carol Davis", "CSE", 80, 78),
    RosterEntry("CS004", "David Wilson", "CSE", 69, 65),
    RosterEntry("EC001", "Eva Brown", "ECE", 88, 85),
    RosterEntry("EC002", "Frank Miller", "ECE", 92, 88),
    RosterEntry("EE001", "Grace Lee", "EEE", 85, 82),
    RosterEntry("IT001", "Henry Taylor", "IT", 91, 89),
    RosterEntry("ME001", "Ivy Anderson", "MECH", 78, 75),
)


def build_demo_users(password: str) -> list[User]:
    # One hash shared by every demo account
    password_hash = generate_password_hash(password)
    return [
        User(
            user_id=user_id,
            username=username,
            full_name=name,
            role=role,
            password_hash=password_hash,
            department=department,
            roll_no=roll_no,
        )
        for user_id, username, role, name, department, roll_no in DEMO_USERS
    ]
