from __future__ import annotations

import pytest

from smart_attend.core.enums import Role
from smart_attend.main import create_app
from smart_attend.notifications.controller import format_sse
from smart_attend.users.model import User


@pytest.fixture
def app():
    return create_app("config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


def login(client, username, role=None):
    resp = client.post(
        "/api/auth/login", json={"username": username, "password": "password123", "role": role or username}
    )
    assert resp.status_code == 200, resp.get_json()
    return {"Authorization": f"Bearer {resp.get_json()['token']}"}


def start(client, headers, class_name="Networks"):
    resp = client.post("/api/sessions/start", json={"className": class_name}, headers=headers)
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()


def test_health(client):
    body = client.get("/api/health").get_json()

    assert body["status"] == "OK"


def test_login_with_wrong_password_is_401(client):
    resp = client.post("/api/auth/login", json={"username": "faculty", "password": "bad", "role": "faculty"})

    assert resp.status_code == 401
    assert resp.get_json() == {"error": "Invalid credentials"}


def test_login_without_json_body_is_400(client):
    resp = client.post("/api/auth/login", data="username=faculty")

    assert resp.status_code == 400


def test_missing_token_is_401_and_bad_token_is_403(client):
    assert client.post("/api/sessions/start", json={}).status_code == 401

    resp = client.post("/api/sessions/start", json={}, headers={"Authorization": "Bearer not-a-jwt"})
    assert resp.status_code == 403
    assert resp.get_json() == {"error": "Invalid token"}


def test_student_cannot_start_session(client):
    resp = client.post("/api/sessions/start", json={}, headers=login(client, "student"))

    assert resp.status_code == 403


def test_start_returns_session_with_qr_image(client):
    body = start(client, login(client, "faculty"), class_name=None)

    session = body["session"]
    assert body["success"] is True
    assert session["id"] == 1
    assert session["className"] == "Computer Science 101"
    assert session["sessionCode"].startswith("ATT-")
    assert session["isActive"] is True
    assert session["attendees"] == []
    assert session["endTime"] is None
    assert body["qrCode"].startswith("data:image/png;base64,")
    assert session["qrCode"] == body["qrCode"]


def test_full_session_flow(app, client):
    faculty = login(client, "faculty")
    session = start(client, faculty)["session"]
    code = session["sessionCode"]
    listener = app.extensions["smart_attend"].broadcaster.subscribe(code)

    first = client.post("/api/attendance/mark", json={"sessionCode": code, "studentId": "CS001", "studentName": "Alice Johnson"})
    again = client.post("/api/attendance/mark", json={"sessionCode": code, "studentId": "CS001"})
    anon = client.post("/api/attendance/mark", json={"sessionCode": code, "studentId": "77"})

    assert first.get_json()["message"] == "Attendance marked successfully"
    assert again.status_code == 200
    assert again.get_json()["message"] == "Attendance already marked"
    assert anon.get_json()["studentName"] == "Student 77"

    events = listener.drain()
    assert [e.total_attendees for e in events] == [1, 2]
    assert format_sse(events[0]).startswith("event: attendanceUpdate\ndata: {")

    active = client.get("/api/sessions/active", headers=faculty).get_json()["sessions"]
    assert [s["id"] for s in active] == [session["id"]]
    assert [a["studentId"] for a in active[0]["attendees"]] == ["CS001", "77"]
    assert active[0]["attendees"][0]["method"] == "scan"

    ended = client.post(f"/api/sessions/{session['id']}/end", headers=faculty)
    assert ended.get_json() == {"success": True, "message": "Session ended successfully"}

    late = client.post("/api/attendance/mark", json={"sessionCode": code, "studentId": "CS002"})
    assert late.status_code == 404
    assert client.get("/api/sessions/active", headers=faculty).get_json()["sessions"] == []


def test_mark_with_unknown_code_is_404(client):
    resp = client.post("/api/attendance/mark", json={"sessionCode": "ATT-0-missing", "studentId": "CS001"})

    assert resp.status_code == 404
    assert resp.get_json() == {"error": "Session not found or expired"}


def test_mark_with_missing_fields_is_400(client):
    resp = client.post("/api/attendance/mark", json={"studentId": "CS001"})

    assert resp.status_code == 400


def test_other_faculty_cannot_end_session(app, client):
    session = start(client, login(client, "faculty"))["session"]
    container = app.extensions["smart_attend"]
    # second faculty account, signed with the app's own key
    other = User(user_id="9", username="other", full_name="Dr. Other", role=Role.FACULTY, password_hash="x", department="ECE")
    headers = {"Authorization": f"Bearer {container.tokens.issue(other)}"}

    resp = client.post(f"/api/sessions/{session['id']}/end", headers=headers)

    assert resp.status_code == 403
    assert container.store.sessions.get_by_id(session["id"]).is_active is True


def test_end_unknown_session_is_404(client):
    resp = client.post("/api/sessions/999/end", headers=login(client, "faculty"))

    assert resp.status_code == 404


def test_principal_analytics(client):
    resp = client.get("/api/analytics/principal", headers=login(client, "principal"))

    cse = resp.get_json()["analytics"][0]
    assert cse == {"department": "CSE", "avgAttendance": 79, "atRiskStudents": 2, "totalStudents": 4, "remark": "Good"}


def test_analytics_are_role_gated(client):
    resp = client.get("/api/analytics/principal", headers=login(client, "faculty"))

    assert resp.status_code == 403


def test_student_analytics(client):
    body = client.get("/api/analytics/student", headers=login(client, "student2", role="student")).get_json()

    assert body["student"]["id"] == "CS002"
    assert body["attendanceTrend"][-1] == 74


def test_apps_do_not_share_state():
    first = create_app("config.testing")
    second = create_app("config.testing")
    c1 = first.test_client()

    start(c1, login(c1, "faculty"))

    assert first.extensions["smart_attend"].store.sessions.list_all() != []
    assert second.extensions["smart_attend"].store.sessions.list_all() == []


def test_session_detail_is_owner_only(client):
    faculty = login(client, "faculty")
    session = start(client, faculty)["session"]

    own = client.get(f"/api/sessions/{session['id']}", headers=faculty)
    other = client.get(f"/api/sessions/{session['id']}", headers=login(client, "hod"))

    assert own.get_json()["session"]["sessionCode"] == session["sessionCode"]
    assert other.status_code == 403


def test_event_stream_joins_session_and_filters_in_scoped_mode():
    app = create_app("config.testing", SCOPED_BROADCAST=True)
    client = app.test_client()
    broadcaster = app.extensions["smart_attend"].broadcaster
    faculty = login(client, "faculty")
    watched = start(client, faculty, "Networks")["session"]["sessionCode"]
    other = start(client, faculty, "Databases")["session"]["sessionCode"]

    resp = client.get(f"/api/events?sessionCode={watched}", buffered=False)
    frames = resp.iter_encoded()

    assert resp.status_code == 200
    assert resp.mimetype == "text/event-stream"
    assert [s.joined for s in broadcaster.subscriptions()] == [{watched}]
    assert next(frames) == b": connected\n\n"

    client.post("/api/attendance/mark", json={"sessionCode": other, "studentId": "CS002"})
    client.post("/api/attendance/mark", json={"sessionCode": watched, "studentId": "CS001"})
    frame = next(frames).decode("utf-8")

    assert frame.startswith("event: attendanceUpdate\ndata: ")
    assert f'"sessionCode": "{watched}"' in frame
    assert '"studentId": "CS001"' in frame
    assert broadcaster.subscriptions()[0].drain() == []

    resp.close()
    assert broadcaster.subscriber_count == 0
