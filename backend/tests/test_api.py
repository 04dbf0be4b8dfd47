import json

import pytest
from fastapi.testclient import TestClient

from nyaybuddy.engine import detailed, scan
from nyaybuddy.engine.orchestrator import sessions
from nyaybuddy.errors import CreditsExhaustedError, RateLimitedError
from nyaybuddy.main import app
from tests.fakes import FLIGHT_CASE, FakeGateway, make_detailed_analysis, make_follow_up

client = TestClient(app)


@pytest.fixture
def gateway(monkeypatch, consumer_analysis):
    fake = FakeGateway(analysis=consumer_analysis)
    monkeypatch.setattr(sessions, "gateway", fake)
    return fake


def _chat_json_returning(payload):
    async def fake_chat_json(system_prompt, messages):
        return payload, json.dumps(payload)

    return fake_chat_json


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_nyayscan_returns_analysis(monkeypatch):
    monkeypatch.setattr(scan, "chat_json", _chat_json_returning({
        "caseType": "Cyber Crime",
        "summary": "UPI fraud.",
        "isConsumerCase": False,
        "requiresFIR": True,
    }))

    resp = client.post("/api/nyayscan", json={"caseDescription": "Lost money to UPI fraud"})

    assert resp.status_code == 200
    analysis = resp.json()["analysis"]
    assert analysis["caseType"] == "Cyber Crime"
    assert analysis["requiresFIR"] is True
    assert analysis["nextSteps"] == []


def test_nyayscan_rejects_blank_description():
    resp = client.post("/api/nyayscan", json={"caseDescription": "  "})
    assert resp.status_code == 400


@pytest.mark.parametrize(
    "error, status, message",
    [
        (RateLimitedError(), 429, "Rate limit exceeded. Please try again in a moment."),
        (CreditsExhaustedError(), 402, "AI credits exhausted. Please add credits to continue."),
    ],
)
def test_nyayscan_quota_errors(monkeypatch, error, status, message):
    async def failing(system_prompt, messages):
        raise error

    monkeypatch.setattr(scan, "chat_json", failing)

    resp = client.post("/api/nyayscan", json={"caseDescription": FLIGHT_CASE})

    assert resp.status_code == status
    assert resp.json() == {"error": message}


def test_nyayscan_detailed(monkeypatch, consumer_analysis):
    monkeypatch.setattr(detailed, "chat_json", _chat_json_returning({
        "type": "follow_up",
        "message": "Just one thing.",
        "questions": ["Which city did you fly from?"],
    }))

    resp = client.post("/api/nyayscan/detailed", json={
        "caseDescription": FLIGHT_CASE,
        "initialAnalysis": consumer_analysis.model_dump(by_alias=True),
        "conversationHistory": [],
        "action": "start",
    })

    assert resp.status_code == 200
    result = resp.json()["result"]
    assert result["type"] == "follow_up"
    assert result["questions"][0]["id"] == "q1"


def test_nyayscan_detailed_rejects_unknown_action(consumer_analysis):
    resp = client.post("/api/nyayscan/detailed", json={
        "caseDescription": FLIGHT_CASE,
        "initialAnalysis": consumer_analysis.model_dump(by_alias=True),
        "action": "summarize",
    })
    assert resp.status_code == 422


def test_intake_session_lawyer_path(gateway):
    session = client.post("/api/intake/start", json={}).json()
    sid = session["sessionId"]
    assert session["step"] == "input"

    view = client.post(f"/api/intake/{sid}/describe", json={"caseDescription": FLIGHT_CASE}).json()
    assert view["step"] == "consumer-check"

    view = client.post(f"/api/intake/{sid}/consumer-check", json={"registered": False}).json()
    assert view["step"] == "proceed-choice"

    view = client.post(f"/api/intake/{sid}/proceed", json={"choice": "lawyer"}).json()
    assert view["step"] == "result"
    assert view["result"]["lawyerConnect"]["title"] == "Connect with Consumer Court Lawyers"
    assert view["result"]["filingGuide"] is None


def test_intake_detailed_dialogue(gateway, criminal_analysis):
    gateway.analysis = criminal_analysis
    gateway.replies = [make_follow_up(), make_detailed_analysis()]
    sid = client.post("/api/intake/start", json={"preferences": {"language": "hi"}}).json()["sessionId"]
    client.post(f"/api/intake/{sid}/describe", json={"caseDescription": "Phone snatched"})

    view = client.post(f"/api/intake/{sid}/detailed").json()
    assert view["step"] == "detailed-followup"
    assert view["round"] == 1
    assert [q["id"] for q in view["questions"]] == ["flight_date", "complained"]

    resp = client.post(f"/api/intake/{sid}/answers", json={"responses": {"flight_date": "2024-01-10"}})
    assert resp.status_code == 400

    view = client.post(f"/api/intake/{sid}/skip").json()
    assert view["step"] == "detailed-result"
    assert view["detailedAnalysis"]["authority"]["name"].startswith("District Consumer")

    view = client.post(f"/api/intake/{sid}/back").json()
    assert view["result"]["labels"]["case_type"] == "केस का प्रकार"


def test_intake_gateway_error_reverts(gateway):
    gateway.analysis = RateLimitedError()
    sid = client.post("/api/intake/start").json()["sessionId"]

    resp = client.post(f"/api/intake/{sid}/describe", json={"caseDescription": FLIGHT_CASE})
    assert resp.status_code == 429

    view = client.get(f"/api/intake/{sid}").json()
    assert view["step"] == "input"
    assert view["notification"] == "Rate limit exceeded. Please try again in a moment."


def test_intake_invalid_transition(gateway):
    sid = client.post("/api/intake/start").json()["sessionId"]
    resp = client.post(f"/api/intake/{sid}/proceed", json={"choice": "online"})
    assert resp.status_code == 409


def test_unknown_session():
    assert client.get("/api/intake/nope").status_code == 404


def test_lawyers_endpoints():
    resp = client.get("/api/lawyers", params={"specialization": "Family Law", "state": "Punjab"})
    assert [l["id"] for l in resp.json()] == ["l19"]
    assert resp.json()[0]["barCouncilId"] == "PB/5678/2015"

    assert client.get("/api/lawyers/l6").json()["name"] == "Adv. Arjun Menon"
    assert client.get("/api/lawyers/l99").status_code == 404


def test_update_preferences(gateway):
    sid = client.post("/api/intake/start").json()["sessionId"]

    resp = client.put(f"/api/intake/{sid}/preferences", json={"language": "hi", "theme": "dark"})

    assert resp.status_code == 200
    assert resp.json()["preferences"] == {"language": "hi", "theme": "dark"}
    assert client.put(f"/api/intake/{sid}/preferences", json={"language": "fr"}).status_code == 422


def test_end_session(gateway):
    sid = client.post("/api/intake/start").json()["sessionId"]

    resp = client.delete(f"/api/intake/{sid}")

    assert resp.status_code == 200
    assert resp.json() == {"status": "deleted", "sessionId": sid}
    assert sid not in sessions.sessions
    assert client.get(f"/api/intake/{sid}").status_code == 404
    assert client.delete(f"/api/intake/{sid}").status_code == 404
