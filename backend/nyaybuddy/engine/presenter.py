from __future__ import annotations

from dataclasses import asdict

from ..knowledge import (
    E_DAAKHIL,
    NATIONAL_CONSUMER_HELPLINE_URL,
    get_lawyers_by_specialization,
)
from ..preferences import Preferences, translate
from ..schemas import (
    FilingGuide,
    HelplineNotice,
    InitialAnalysis,
    LawyerConnect,
    LawyerProfile,
    ResultView,
)

MAX_SUGGESTED_LAWYERS = 3

LABEL_KEYS = (
    "case_analysis",
    "case_type",
    "urgency",
    "estimated_time",
    "prerequisites",
    "recommendations",
    "next_steps",
    "fir_required",
    "filing_guide",
    "find_lawyers_btn",
    "new_scan",
    "detailed_analysis",
    "disclaimer",
)


def build_result_view(
    analysis: InitialAnalysis,
    helpline_registered: bool | None = None,
    proceed_choice: str | None = None,
    preferences: Preferences | None = None,
) -> ResultView:
    """What the result screen shows for a finished classification."""
    preferences = preferences or Preferences()

    helpline_notice = None
    if analysis.is_consumer_case and helpline_registered is False:
        helpline_notice = HelplineNotice(
            message=(
                "Registering on National Consumer Helpline is recommended "
                "before proceeding."
            ),
            url=NATIONAL_CONSUMER_HELPLINE_URL,
        )

    filing_guide = None
    if analysis.is_consumer_case and proceed_choice == "online":
        filing_guide = FilingGuide(portal_url=E_DAAKHIL.url, steps=list(E_DAAKHIL.steps))

    lawyer_connect = None
    if not analysis.is_consumer_case or proceed_choice == "lawyer":
        lawyers = get_lawyers_by_specialization(analysis.case_type)
        lawyer_connect = LawyerConnect(
            title=f"Connect with {analysis.case_type} Lawyers",
            description="Find experienced lawyers specialized in your case type",
            lawyers=[
                LawyerProfile.model_validate(asdict(lawyer))
                for lawyer in lawyers[:MAX_SUGGESTED_LAWYERS]
            ],
        )

    return ResultView(
        analysis=analysis,
        fir_warning=analysis.requires_fir,
        helpline_notice=helpline_notice,
        filing_guide=filing_guide,
        lawyer_connect=lawyer_connect,
        labels={key: translate(key, preferences.language) for key in LABEL_KEYS},
    )
