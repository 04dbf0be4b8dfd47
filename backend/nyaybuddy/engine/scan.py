"""
First-pass case classification.

Sends the user's free-text description to the inference gateway and turns the
reply into an ``InitialAnalysis``. A reply that is not valid JSON, or that does
not fit the schema, never reaches the caller as an error: a conservative
"General Legal Matter" analysis is returned instead.
"""
from __future__ import annotations

import logging

from pydantic import ValidationError

from ..schemas import InitialAnalysis
from .llm import chat_json

logger = logging.getLogger(__name__)

GENERAL_CASE_TYPE = "General Legal Matter"

CLASSIFICATION_PROMPT = (
    "You are NyayScan, an AI legal assistant for Indian users. Analyze the user's "
    "legal issue and provide structured guidance.\n\n"
    "Your response MUST be in this exact JSON format:\n"
    "{\n"
    '  "caseType": "string (e.g., Consumer Court, Criminal Law, Family Law, '
    'Property Disputes, Labour Law, Cyber Crime, etc.)",\n'
    '  "summary": "Brief 2-3 sentence summary of the case",\n'
    '  "isConsumerCase": boolean,\n'
    '  "requiresFIR": boolean,\n'
    '  "prerequisites": ["list of documents/requirements needed"],\n'
    '  "recommendations": ["list of actionable recommendations"],\n'
    '  "nextSteps": ["ordered list of next steps to take"],\n'
    '  "urgencyLevel": "low/medium/high",\n'
    '  "estimatedTimeframe": "string describing typical timeline"\n'
    "}\n\n"
    "Important Indian legal context:\n"
    "- For consumer cases: Check if complaint should be registered on National "
    "Consumer Helpline (NCH) or e-Daakhil portal\n"
    "- For criminal matters: FIR filing at local police station is often the first step\n"
    "- Consider jurisdictional requirements based on case type\n"
    "- Include relevant Indian laws/acts when applicable\n\n"
    "Always respond with valid JSON only, no additional text."
)


def fallback_analysis(raw_content: str | None = None) -> InitialAnalysis:
    return InitialAnalysis(
        case_type=GENERAL_CASE_TYPE,
        summary=(
            (raw_content or "").strip()
            or "Unable to analyze the case. Please provide more details."
        ),
        is_consumer_case=False,
        requires_fir=False,
        prerequisites=[
            "Gather all relevant documents",
            "Note down important dates and details",
        ],
        recommendations=["Consult with a legal professional for detailed advice"],
        next_steps=["Document all evidence", "Seek legal consultation"],
        urgency_level="medium",
        estimated_timeframe="Varies based on case complexity",
    )


def build_classification_messages(case_description: str) -> list[dict]:
    return [
        {
            "role": "user",
            "content": (
                "Analyze this legal issue and provide guidance:\n\n"
                f"{case_description}"
            ),
        }
    ]


async def analyze_case(case_description: str) -> InitialAnalysis:
    """Classify a case description. Gateway errors propagate; bad replies don't."""
    logger.info("Analyzing case: %s...", case_description[:100])
    parsed, raw = await chat_json(
        CLASSIFICATION_PROMPT, build_classification_messages(case_description)
    )
    if parsed is None:
        return fallback_analysis(raw)

    try:
        return InitialAnalysis.model_validate(parsed)
    except ValidationError as e:
        logger.error("Classification reply did not match schema: %s", e)
        return fallback_analysis()
