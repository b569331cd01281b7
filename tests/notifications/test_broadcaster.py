from datetime import datetime, timezone

from smart_attend.notifications.broadcaster import NotificationBroadcaster
from smart_attend.notifications.controller import stream_events
from smart_attend.notifications.model import AttendanceUpdate


def event(code="ATT-1-aaaaaaaa", student_id="CS001", total=1):
    return AttendanceUpdate(
        session_code=code,
        student_id=student_id,
        student_name="Alice Johnson",
        total_attendees=total,
        timestamp=datetime(2025, 3, 1, 9, 15, tzinfo=timezone.utc),
    )


def test_broad_mode_reaches_every_listener_regardless_of_join():
    b = NotificationBroadcaster()
    joined = b.subscribe("ATT-1-aaaaaaaa")
    other = b.subscribe("ATT-2-bbbbbbbb")
    idle = b.subscribe()

    delivered = b.publish(event())

    assert delivered == 3
    assert [len(s.drain()) for s in (joined, other, idle)] == [1, 1, 1]


def test_scoped_mode_only_reaches_joined_listeners():
    b = NotificationBroadcaster(scoped=True)
    joined = b.subscribe()
    joined.join("ATT-1-aaaaaaaa")
    other = b.subscribe("ATT-2-bbbbbbbb")

    b.publish(event())

    assert len(joined.drain()) == 1
    assert other.drain() == []


def test_late_listener_gets_no_replay():
    b = NotificationBroadcaster()
    b.publish(event())

    late = b.subscribe()

    assert late.get(timeout=0.01) is None


def test_closed_subscription_stops_receiving():
    b = NotificationBroadcaster()
    with b.subscribe() as sub:
        assert b.subscriber_count == 1
    b.publish(event())

    assert b.subscriber_count == 0
    assert sub.drain() == []


def test_event_payload_shape():
    assert event(total=3).to_dict() == {
        "sessionCode": "ATT-1-aaaaaaaa",
        "studentId": "CS001",
        "studentName": "Alice Johnson",
        "totalAttendees": 3,
        "timestamp": "2025-03-01T09:15:00.000Z",
    }


def test_stream_events_yields_sse_frames_and_unsubscribes():
    b = NotificationBroadcaster()
    frames = stream_events(b.subscribe("ATT-1-aaaaaaaa"), keepalive=0.01)

    assert next(frames) == ": connected\n\n"
    assert next(frames) == ": keep-alive\n\n"
    b.publish(event(total=2))
    frame = next(frames)
    frames.close()

    assert frame.startswith("event: attendanceUpdate\ndata: ")
    assert '"totalAttendees": 2' in frame
    assert b.subscriber_count == 0
