from __future__ import annotations

from typing import Iterable, Optional

from ..core.enums import Role
from .model import User
from .repository import UserRepository


class InMemoryUserRepository(UserRepository):
    def __init__(self, users: Iterable[User] = ()):
        self._users: tuple[User, ...] = tuple(users)

    def get_by_username_and_role(self, username: str, role: Role) -> Optional[User]:
        return next((u for u in self._users if u.username == username and u.role == role), None)
