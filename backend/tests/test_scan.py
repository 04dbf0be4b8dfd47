import asyncio
import json

import pytest

from nyaybuddy.engine import scan
from nyaybuddy.engine.llm import parse_json_content
from nyaybuddy.errors import RateLimitedError


def _reply(monkeypatch, raw):
    async def fake_chat_json(system_prompt, messages):
        fake_chat_json.messages = messages
        return parse_json_content(raw), raw

    monkeypatch.setattr(scan, "chat_json", fake_chat_json)
    return fake_chat_json


def test_valid_reply_is_parsed(monkeypatch):
    raw = "```json\n" + json.dumps({
        "caseType": "Consumer Court",
        "summary": "Refund refused for a cancelled flight.",
        "isConsumerCase": True,
        "requiresFIR": False,
        "prerequisites": ["Ticket"],
        "recommendations": ["Complain to the airline"],
        "nextSteps": ["Register on NCH"],
        "consumerComplaintRegistered": None,
        "urgencyLevel": "HIGH",
        "estimatedTimeframe": "3-6 months",
    }) + "\n```"
    fake = _reply(monkeypatch, raw)

    analysis = asyncio.run(scan.analyze_case("Flight cancelled, no refund"))

    assert analysis.case_type == "Consumer Court"
    assert analysis.is_consumer_case is True
    assert analysis.urgency_level == "high"
    assert fake.messages[0]["content"].endswith("Flight cancelled, no refund")


def test_malformed_json_falls_back(monkeypatch):
    _reply(monkeypatch, "Sorry, I can't help with that {")

    analysis = asyncio.run(scan.analyze_case("Something happened"))

    assert analysis.case_type == "General Legal Matter"
    assert analysis.summary == "Sorry, I can't help with that {"
    assert analysis.is_consumer_case is False
    assert analysis.requires_fir is False
    assert analysis.prerequisites
    assert analysis.recommendations
    assert analysis.next_steps
    assert analysis.urgency_level == "medium"


def test_schema_mismatch_falls_back(monkeypatch):
    _reply(monkeypatch, json.dumps({"summary": "No case type here"}))

    analysis = asyncio.run(scan.analyze_case("Something happened"))

    assert analysis.case_type == "General Legal Matter"


def test_missing_lists_default_to_empty(monkeypatch):
    _reply(monkeypatch, json.dumps({
        "caseType": "Family Law",
        "summary": "Maintenance dispute.",
        "prerequisites": None,
        "urgencyLevel": "critical",
    }))

    analysis = asyncio.run(scan.analyze_case("Maintenance not paid"))

    assert analysis.prerequisites == []
    assert analysis.next_steps == []
    assert analysis.urgency_level == "medium"


def test_gateway_errors_propagate(monkeypatch):
    async def rate_limited(system_prompt, messages):
        raise RateLimitedError()

    monkeypatch.setattr(scan, "chat_json", rate_limited)
    with pytest.raises(RateLimitedError):
        asyncio.run(scan.analyze_case("Anything"))
