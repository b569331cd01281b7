from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

from werkzeug.security import check_password_hash

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository
from .tokens import TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoginResult:
    token: str
    user: User

    def to_dict(self) -> dict:
        return {
            "success": True,
            "token": self.token,
            "user": {
                "id": self.user.user_id,
                "username": self.user.username,
                "role": self.user.role.value,
                "name": self.user.full_name,
                "department": self.user.department,
                "rollNo": self.user.roll_no,
            },
        }


class AuthService:
    """Use case: authenticate a user for a given role and hand out a token."""

    def __init__(self, users: UserRepository, tokens: TokenService):
        self._users = users
        self._tokens = tokens

    def login(self, username: Any, password: Any, role: Any, *, ttl: Optional[timedelta] = None) -> LoginResult:
        username = require_non_empty(username, "username")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")
        role_s = require_non_empty(role, "role")
        try:
            role_e = Role(role_s)
        except ValueError:
            raise ValidationError(f"Unknown role: {role_s}") from None

        user = self._users.get_by_username_and_role(username, role_e)
        if not user:
            raise AuthenticationError("Invalid credentials")

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # unknown hash method in a seeded record
            ok = False

        if not ok:
            logger.info("Rejected login for %s as %s", username, role_e.value)
            raise AuthenticationError("Invalid credentials")

        logger.info("User %s logged in as %s", user.username, user.role.value)
        return LoginResult(token=self._tokens.issue(user, ttl=ttl), user=user)
