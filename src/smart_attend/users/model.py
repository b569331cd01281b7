from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: an account that can log in.

    Plain data object, created from seed data at startup and never updated.
    """

    user_id: str
    username: str
    full_name: str
    role: Role
    password_hash: str
    department: Optional[str] = None
    roll_no: Optional[str] = None
