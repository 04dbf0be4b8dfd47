"""
Adaptive detailed-analysis dialogue against the inference gateway.

One call per action:

- ``start``: decide whether clarifying questions are needed.
- ``respond``: read the latest answers and either ask more or signal readiness.
- ``generate``: produce the full ``DetailedAnalysis``.

Every reply is validated against the expected shape. Anything that cannot be
parsed comes back as a ``GatewayFailure`` so the caller can decide what to show.
"""
from __future__ import annotations

import json
import logging

from pydantic import TypeAdapter, ValidationError

from ..schemas import (
    DetailedAnalysis,
    DetailedReply,
    DetailedRequest,
    GatewayFailure,
)
from .llm import chat_json

logger = logging.getLogger(__name__)

MAX_FOLLOWUP_ROUNDS = 5

_reply_adapter = TypeAdapter(DetailedReply)

QUESTION_SCHEMA = (
    "{\n"
    '  "type": "follow_up",\n'
    '  "message": "Brief educational context about why you\'re asking",\n'
    '  "questions": [\n'
    "    {\n"
    '      "id": "short_snake_case_id",\n'
    '      "question": "The question text",\n'
    '      "type": "yes_no" | "multiple_choice" | "scale" | "date" | "amount" | "text",\n'
    '      "options": ["only for multiple_choice"],\n'
    '      "scale_labels": {"min": "label for 1", "max": "label for 5"},\n'
    '      "required": true\n'
    "    }\n"
    "  ]\n"
    "}\n"
)

READY_SCHEMA = (
    "{\n"
    '  "type": "analysis_ready",\n'
    '  "message": "I have enough information to provide detailed analysis."\n'
    "}\n"
)

ANALYSIS_SCHEMA = (
    "{\n"
    '  "type": "detailed_analysis",\n'
    '  "authority": {\n'
    '    "name": "Relevant department/authority name",\n'
    '    "explanation": "Why this authority applies in simple terms",\n'
    '    "role": "What this authority can do for the user"\n'
    "  },\n"
    '  "legalProvisions": [\n'
    '    {"act": "Name of the Act", "section": "Section number", '
    '"description": "What it provides, in plain language"}\n'
    "  ],\n"
    '  "actionPlan": [\n'
    '    {"step": 1, "action": "Clear action description", '
    '"explanation": "Why this step matters", '
    '"expectedOutcome": "What to expect after this step"}\n'
    "  ],\n"
    '  "pastCases": [\n'
    '    {"summary": "Brief description of similar case pattern", '
    '"outcome": "What relief was commonly granted", '
    '"relevance": "How it relates to user\'s situation"}\n'
    "  ],\n"
    '  "timeline": {"estimatedDuration": "Overall duration", '
    '"milestones": ["Key stages in order"]},\n'
    '  "costEstimate": {"courtFees": "...", "legalFees": "...", "otherExpenses": "..."},\n'
    '  "finalAssessment": {\n'
    '    "currentStage": "Where the issue currently stands",\n'
    '    "immediateAction": "What to do right now",\n'
    '    "legalAssistance": "not_required" | "optional" | "recommended",\n'
    '    "assistanceReasoning": "Why professional help is/isn\'t needed"\n'
    "  }\n"
    "}\n"
)

START_USER_MESSAGE = (
    "Start the detailed analysis. Determine if you need any follow-up questions."
)
GENERATE_USER_MESSAGE = "Generate the complete detailed analysis now."


def _action_rules(action: str) -> str:
    if action == "start":
        return (
            "This is the START of detailed analysis. Analyze if you need more "
            "information.\n\n"
            "If you need clarification, respond with JSON:\n"
            f"{QUESTION_SCHEMA}\n"
            "If you have enough information, respond with JSON:\n"
            f"{READY_SCHEMA}\n"
            "Ask at most 3 questions per round. Pick the question type that makes "
            "answering easiest (yes_no for facts, amount for money, date for "
            "timelines, scale for severity from 1 to 5).\n"
            "Examples of what to ask about (only if unclear):\n"
            "- Timeline/dates\n"
            "- Prior actions taken\n"
            "- Location/jurisdiction\n"
            "- Specific parties involved\n"
            "- Amount/value involved\n"
        )
    if action == "respond":
        return (
            "The user has answered your questions. Analyze their answers.\n\n"
            "If you still need more clarity "
            f"(at most {MAX_FOLLOWUP_ROUNDS} rounds in total), respond with:\n"
            f"{QUESTION_SCHEMA}\n"
            "If sufficient clarity is reached, respond with:\n"
            f"{READY_SCHEMA}"
        )
    return (
        "Generate the COMPLETE detailed analysis. Respond with JSON:\n"
        f"{ANALYSIS_SCHEMA}\n"
        "IMPORTANT for action plan:\n"
        "- Make steps sequential and logical\n"
        "- Explain expected outcomes\n"
        "- Be specific to Indian jurisdiction\n"
        "- Reference relevant Indian laws/acts if applicable\n\n"
        "IMPORTANT for past cases:\n"
        "- Focus on patterns and awareness\n"
        "- Do not make specific predictions\n"
        "- Keep it educational\n"
    )


def build_detailed_prompt(request: DetailedRequest) -> str:
    initial = json.dumps(
        request.initial_analysis.model_dump(by_alias=True), ensure_ascii=False
    )
    return (
        "You are NyayScan Detailed Analyst, an expert AI legal assistant for Indian "
        "users. You provide in-depth, educational legal guidance through adaptive "
        "conversation.\n\n"
        "INITIAL CASE CONTEXT:\n"
        f"Case Description: {request.case_description}\n"
        f"Initial Analysis: {initial}\n\n"
        "YOUR ROLE:\n"
        "- You are educational, not interrogative\n"
        "- Ask only necessary follow-up questions to clarify the case\n"
        "- Never overwhelm the user with too many questions at once\n"
        "- Never push for legal escalation - lawyers are an option, not default\n"
        "- Make all reasoning transparent and easy to understand\n\n"
        "BEHAVIOR RULES:\n"
        f"{_action_rules(request.action)}\n"
        "Always respond with valid JSON only, no additional text or markdown."
    )


def build_detailed_messages(request: DetailedRequest) -> list[dict]:
    messages = [m.model_dump() for m in request.conversation_history]
    if request.action == "start":
        messages.append({"role": "user", "content": START_USER_MESSAGE})
    elif request.action == "generate":
        messages.append({"role": "user", "content": GENERATE_USER_MESSAGE})
    # "respond": the answers are already the last user turn in the history.
    return messages


def parse_detailed_reply(parsed: dict | None, action: str):
    if parsed is None:
        return GatewayFailure()

    try:
        reply = _reply_adapter.validate_python(parsed)
    except ValidationError as e:
        logger.error("Detailed reply did not match schema: %s", e)
        return GatewayFailure()

    if action == "generate" and not isinstance(reply, (DetailedAnalysis, GatewayFailure)):
        logger.error("Expected detailed_analysis, got %s", reply.type)
        return GatewayFailure()
    return reply


async def run_detailed_action(request: DetailedRequest):
    """Run one dialogue action and return the typed reply."""
    logger.info(
        "Detailed analysis action: %s (history=%d)",
        request.action,
        len(request.conversation_history),
    )
    parsed, _ = await chat_json(
        build_detailed_prompt(request), build_detailed_messages(request)
    )
    return parse_detailed_reply(parsed, request.action)
