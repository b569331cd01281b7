from __future__ import annotations

import json

from flask import Flask, Response, request, stream_with_context

from ..container import Container
from .broadcaster import Subscription
from .model import AttendanceUpdate

KEEPALIVE_SECONDS = 15.0


def format_sse(event: AttendanceUpdate) -> str:
    return f"event: {event.event_name}\ndata: {json.dumps(event.to_dict())}\n\n"


def stream_events(subscription: Subscription, *, keepalive: float = KEEPALIVE_SECONDS):
    """Yield SSE frames until the client goes away."""
    try:
        yield ": connected\n\n"
        while True:
            event = subscription.get(timeout=keepalive)
            if event is None:
                yield ": keep-alive\n\n"
                continue
            yield format_sse(event)
    finally:
        subscription.close()


def register(app: Flask, container: Container) -> None:
    @app.route("/api/events", endpoint="events")
    def events():
        """Unauthenticated event channel; ``sessionCode`` joins that session."""
        subscription = container.broadcaster.subscribe(request.args.get("sessionCode") or None)
        return Response(
            stream_with_context(stream_events(subscription)),
            mimetype="text/event-stream",
            headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
        )
