from __future__ import annotations

from typing import Any

from ..schemas import ConversationMessage, SmartQuestion

DEFAULT_SCALE_VALUE = 3


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def _yes_no(value: Any) -> str:
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in ("yes", "true"):
            return "Yes"
        if normalized in ("no", "false"):
            return "No"
    return "Not answered"


def format_answer(question: SmartQuestion, value: Any) -> str:
    if question.type == "yes_no":
        return _yes_no(value)
    if question.type == "scale":
        return f"{DEFAULT_SCALE_VALUE if _is_empty(value) else value}/5"
    if question.type == "multiple_choice":
        return "Not selected" if _is_empty(value) else str(value)
    return "Not provided" if _is_empty(value) else str(value)


def is_answered(question: SmartQuestion, responses: dict[str, Any]) -> bool:
    value = responses.get(question.id)
    if question.type == "scale":
        return True
    if question.type == "yes_no":
        return _yes_no(value) != "Not answered"
    return not _is_empty(value)


def format_answers(questions: list[SmartQuestion], responses: dict[str, Any]) -> str:
    """Render one round of answers as the Q/A text block the gateway expects."""
    return "\n\n".join(
        f"Q: {q.question}\nA: {format_answer(q, responses.get(q.id))}"
        for q in questions
    )


def missing_required(
    questions: list[SmartQuestion], responses: dict[str, Any]
) -> list[SmartQuestion]:
    return [q for q in questions if q.required and not is_answered(q, responses)]


def answered_questions(
    questions: list[SmartQuestion], responses: dict[str, Any]
) -> list[SmartQuestion]:
    """Questions the user actually gave a value for; scale defaults don't count."""
    answered = []
    for q in questions:
        if q.type == "scale":
            if not _is_empty(responses.get(q.id)):
                answered.append(q)
        elif is_answered(q, responses):
            answered.append(q)
    return answered


def format_questions(message: str, questions: list[SmartQuestion]) -> str:
    lines = [f"{i}. {q.question}" for i, q in enumerate(questions, start=1)]
    if message:
        return message + "\n\n" + "\n".join(lines)
    return "\n".join(lines)


def fold_round(
    message: str,
    questions: list[SmartQuestion],
    responses: dict[str, Any],
) -> list[ConversationMessage]:
    """The assistant/user pair that records one finished round."""
    return [
        ConversationMessage(
            role="assistant", content=format_questions(message, questions)
        ),
        ConversationMessage(role="user", content=format_answers(questions, responses)),
    ]
