from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional

import jwt

from ..common.datetime_utils import now_utc
from ..core.constants import DEFAULT_TOKEN_TTL_HOURS
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, InvalidTokenError
from .model import User


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried inside a verified bearer token."""

    user_id: str
    username: str
    role: Role
    name: str
    department: Optional[str]
    roll_no: Optional[str]


class TokenService:
    """Issue and verify signed, time-limited bearer tokens (PyJWT)."""

    def __init__(self, secret: str, *, algorithm: str = "HS256", ttl_hours: int = DEFAULT_TOKEN_TTL_HOURS):
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(hours=ttl_hours)

    def issue(self, user: User, *, ttl: Optional[timedelta] = None) -> str:
        now = now_utc()
        payload = {
            "id": user.user_id,
            "username": user.username,
            "role": user.role.value,
            "name": user.full_name,
            "department": user.department,
            "rollNo": user.roll_no,
            "iat": int(now.timestamp()),
            "exp": int((now + (ttl if ttl is not None else self._ttl)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        if not token:
            raise AuthenticationError("Access token required")

        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
            return TokenClaims(
                user_id=str(payload["id"]),
                username=payload["username"],
                role=Role(payload["role"]),
                name=payload["name"],
                department=payload.get("department"),
                roll_no=payload.get("rollNo"),
            )
        except (jwt.InvalidTokenError, KeyError, ValueError) as exc:
            # ExpiredSignatureError is an InvalidTokenError too
            raise InvalidTokenError("Invalid token") from exc

    @staticmethod
    def from_authorization_header(header: Optional[str]) -> Optional[str]:
        """Extract the token from ``Bearer <token>``; None when absent."""
        if not header:
            return None
        parts = header.split(" ", 1)
        if len(parts) != 2 or not parts[1].strip():
            return None
        return parts[1].strip()
