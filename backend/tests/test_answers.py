from nyaybuddy.engine.answers import (
    answered_questions,
    fold_round,
    format_answer,
    format_answers,
    missing_required,
)
from nyaybuddy.schemas import SmartQuestion

QUESTIONS = [
    SmartQuestion(id="paid_card", question="Did you pay by card?", type="yes_no"),
    SmartQuestion(id="impact", question="How severe is the impact?", type="scale"),
    SmartQuestion(
        id="airline",
        question="Which airline?",
        type="multiple_choice",
        options=["IndiGo", "Air India", "Other"],
    ),
    SmartQuestion(id="flight_date", question="When was the flight?", type="date"),
    SmartQuestion(id="amount", question="How much was paid?", type="amount"),
    SmartQuestion(id="notes", question="Anything else?", type="text", required=False),
]


def test_format_answers_all_types():
    responses = {"paid_card": True, "airline": "IndiGo", "amount": "8000"}
    assert format_answers(QUESTIONS, responses) == (
        "Q: Did you pay by card?\nA: Yes\n\n"
        "Q: How severe is the impact?\nA: 3/5\n\n"
        "Q: Which airline?\nA: IndiGo\n\n"
        "Q: When was the flight?\nA: Not provided\n\n"
        "Q: How much was paid?\nA: 8000\n\n"
        "Q: Anything else?\nA: Not provided"
    )


def test_format_answers_is_deterministic_and_ordered():
    responses = {"notes": "Refund promised by email", "paid_card": "no", "impact": 5}
    first = format_answers(QUESTIONS, responses)
    assert first == format_answers(QUESTIONS, dict(reversed(list(responses.items()))))
    blocks = first.split("\n\n")
    assert [b.splitlines()[0] for b in blocks] == [f"Q: {q.question}" for q in QUESTIONS]


def test_yes_no_rendering():
    q = QUESTIONS[0]
    assert format_answer(q, True) == "Yes"
    assert format_answer(q, "no") == "No"
    assert format_answer(q, None) == "Not answered"


def test_empty_multiple_choice_is_not_selected():
    assert format_answer(QUESTIONS[2], "") == "Not selected"


def test_scale_value_rendering():
    assert format_answer(QUESTIONS[1], 4) == "4/5"
    assert format_answer(QUESTIONS[1], None) == "3/5"


def test_missing_required():
    missing = missing_required(QUESTIONS, {"paid_card": False, "airline": "Other"})
    assert [q.id for q in missing] == ["flight_date", "amount"]


def test_answered_questions_ignores_scale_default():
    answered = answered_questions(QUESTIONS, {"amount": "8000"})
    assert [q.id for q in answered] == ["amount"]


def test_fold_round_produces_assistant_then_user():
    folded = fold_round("Tell me more.", QUESTIONS[:1], {"paid_card": True})
    assert [m.role for m in folded] == ["assistant", "user"]
    assert folded[0].content == "Tell me more.\n\n1. Did you pay by card?"
    assert folded[1].content == "Q: Did you pay by card?\nA: Yes"


def test_answered_questions_skips_unrecognised_yes_no():
    answered = answered_questions(QUESTIONS, {"paid_card": "maybe", "impact": 4})
    assert [q.id for q in answered] == ["impact"]
