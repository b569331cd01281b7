from __future__ import annotations

import itertools
import logging
import queue
import threading
from typing import Optional

from .model import AttendanceUpdate

logger = logging.getLogger(__name__)


class Subscription:
    """One listener's inbox. Events published before subscribing are never replayed."""

    def __init__(self, broadcaster: "NotificationBroadcaster", subscriber_id: int):
        self.subscriber_id = subscriber_id
        self.joined: set[str] = set()
        self._broadcaster = broadcaster
        self._inbox: "queue.Queue[AttendanceUpdate]" = queue.Queue()

    def join(self, session_code: str) -> None:
        self._broadcaster.join(self, session_code)

    def get(self, timeout: Optional[float] = None) -> Optional[AttendanceUpdate]:
        """Next event, or None when nothing arrives within ``timeout`` seconds."""
        try:
            return self._inbox.get(timeout=timeout)
        except queue.Empty:
            return None

    def drain(self) -> list[AttendanceUpdate]:
        events = []
        while True:
            try:
                events.append(self._inbox.get_nowait())
            except queue.Empty:
                return events

    def close(self) -> None:
        self._broadcaster.unsubscribe(self)

    def _deliver(self, event: AttendanceUpdate) -> None:
        self._inbox.put_nowait(event)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


class NotificationBroadcaster:
    """Fan attendance events out to subscribers.

    In broad mode (the default) every subscriber receives every event, whatever
    session it joined. In scoped mode only subscribers that joined the event's
    session code receive it. Delivery is fire-and-forget with no acknowledgement.
    """

    def __init__(self, *, scoped: bool = False):
        self._scoped = scoped
        self._subscribers: dict[int, Subscription] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def subscriptions(self) -> list[Subscription]:
        with self._lock:
            return list(self._subscribers.values())

    def subscribe(self, session_code: Optional[str] = None) -> Subscription:
        with self._lock:
            sub = Subscription(self, next(self._ids))
            self._subscribers[sub.subscriber_id] = sub
        logger.debug("Subscriber %s connected", sub.subscriber_id)
        if session_code:
            self.join(sub, session_code)
        return sub

    def join(self, subscription: Subscription, session_code: str) -> None:
        with self._lock:
            subscription.joined.add(session_code)
        logger.info("Subscriber %s joined session %s", subscription.subscriber_id, session_code)

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            removed = self._subscribers.pop(subscription.subscriber_id, None)
        if removed is not None:
            logger.debug("Subscriber %s disconnected", subscription.subscriber_id)

    def publish(self, event: AttendanceUpdate) -> int:
        """Deliver ``event`` and return how many subscribers received it."""
        with self._lock:
            targets = [
                s for s in self._subscribers.values() if not self._scoped or event.session_code in s.joined
            ]
        for sub in targets:
            sub._deliver(event)
        return len(targets)
