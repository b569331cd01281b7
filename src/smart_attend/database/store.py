from __future__ import annotations

import logging
from dataclasses import dataclass

from ..analytics.repository import InMemoryRosterRepository
from ..sessions.memory_session_repository import InMemorySessionRepository
from ..users.memory_user_repository import InMemoryUserRepository
from .seed import DEMO_ROSTER, build_demo_users

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppStore:
    """All process state for one application instance.

    Built once at startup and handed to every service; there is no module
    level registry, so each test can build its own.
    """

    users: InMemoryUserRepository
    sessions: InMemorySessionRepository
    roster: InMemoryRosterRepository


def build_store(*, demo_password: str) -> AppStore:
    users = build_demo_users(demo_password)
    logger.info("Demo users created in memory (%d accounts)", len(users))
    return AppStore(
        users=InMemoryUserRepository(users),
        sessions=InMemorySessionRepository(),
        roster=InMemoryRosterRepository(DEMO_ROSTER),
    )
