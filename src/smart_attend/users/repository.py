from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import Role
from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Services depend on this interface, never on a concrete store.
    """

    def get_by_username_and_role(self, username: str, role: Role) -> Optional[User]:
        raise NotImplementedError
