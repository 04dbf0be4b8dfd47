from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .preferences import Preferences

URGENCY_LEVELS = ("low", "medium", "high")
QUESTION_TYPES = ("yes_no", "multiple_choice", "scale", "date", "amount", "text")

QuestionType = Literal["yes_no", "multiple_choice", "scale", "date", "amount", "text"]
DetailedAction = Literal["start", "respond", "generate"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _none_to_list(v: Any) -> Any:
    if v is None:
        return []
    if isinstance(v, str):
        return [v]
    return v


# ----------------------------------------------------------------------
# Classification
# ----------------------------------------------------------------------


class InitialAnalysis(CamelModel):
    case_type: str
    summary: str
    is_consumer_case: bool = False
    requires_fir: bool = Field(default=False, alias="requiresFIR")
    prerequisites: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    next_steps: list[str] = Field(default_factory=list)
    urgency_level: str = "medium"
    estimated_timeframe: str = "Varies based on case complexity"

    @field_validator("prerequisites", "recommendations", "next_steps", mode="before")
    @classmethod
    def coerce_lists(cls, v):
        return _none_to_list(v)

    @field_validator("urgency_level", mode="before")
    @classmethod
    def normalize_urgency(cls, v):
        """Accept 'HIGH', ' High ' etc.; anything unrecognised reads as medium."""
        if isinstance(v, str) and v.strip().lower() in URGENCY_LEVELS:
            return v.strip().lower()
        return "medium"


class AnalyzeRequest(CamelModel):
    case_description: str


class AnalyzeResponse(BaseModel):
    analysis: InitialAnalysis


# ----------------------------------------------------------------------
# Detailed dialogue
# ----------------------------------------------------------------------


class ConversationMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str


class SmartQuestion(BaseModel):
    id: str
    question: str
    type: QuestionType = "text"
    options: Optional[list[str]] = None
    scale_labels: Optional[dict[str, str]] = None
    required: bool = True

    @field_validator("type", mode="before")
    @classmethod
    def normalize_type(cls, v):
        if isinstance(v, str) and v.strip().lower() in QUESTION_TYPES:
            return v.strip().lower()
        return "text"

    @field_validator("scale_labels", mode="before")
    @classmethod
    def coerce_scale_labels(cls, v):
        if isinstance(v, (list, tuple)) and len(v) == 2:
            return {"min": str(v[0]), "max": str(v[1])}
        return v


class FollowUp(BaseModel):
    type: Literal["follow_up"] = "follow_up"
    message: str = ""
    questions: list[SmartQuestion] = Field(min_length=1)

    @field_validator("questions", mode="before")
    @classmethod
    def coerce_plain_questions(cls, v):
        # Older prompts asked for a list of plain strings.
        if not isinstance(v, list):
            return v
        questions = []
        for i, item in enumerate(v, start=1):
            if isinstance(item, str):
                questions.append({"id": f"q{i}", "question": item, "type": "text"})
            elif isinstance(item, dict) and "id" not in item:
                questions.append({**item, "id": f"q{i}"})
            else:
                questions.append(item)
        return questions


class AnalysisReady(BaseModel):
    type: Literal["analysis_ready"] = "analysis_ready"
    message: str = ""


class Authority(BaseModel):
    name: str
    explanation: str = ""
    role: str = ""


class LegalProvision(BaseModel):
    act: str
    section: str = ""
    description: str = ""


class ActionStep(CamelModel):
    step: int
    action: str
    explanation: str = ""
    expected_outcome: str = ""


class PastCase(BaseModel):
    summary: str
    outcome: str = ""
    relevance: str = ""


class Timeline(CamelModel):
    estimated_duration: str = ""
    milestones: list[str] = Field(default_factory=list)

    @field_validator("milestones", mode="before")
    @classmethod
    def coerce_lists(cls, v):
        return _none_to_list(v)


class CostEstimate(CamelModel):
    court_fees: str = ""
    legal_fees: str = ""
    other_expenses: str = ""


class FinalAssessment(CamelModel):
    current_stage: str = ""
    immediate_action: str = ""
    legal_assistance: Literal["not_required", "optional", "recommended"] = "optional"
    assistance_reasoning: str = ""


class DetailedAnalysis(CamelModel):
    type: Literal["detailed_analysis"] = "detailed_analysis"
    authority: Authority
    legal_provisions: list[LegalProvision] = Field(default_factory=list)
    action_plan: list[ActionStep] = Field(default_factory=list)
    past_cases: list[PastCase] = Field(default_factory=list)
    timeline: Timeline = Field(default_factory=Timeline)
    cost_estimate: CostEstimate = Field(default_factory=CostEstimate)
    final_assessment: FinalAssessment = Field(default_factory=FinalAssessment)

    @field_validator("legal_provisions", "action_plan", "past_cases", mode="before")
    @classmethod
    def coerce_lists(cls, v):
        return [] if v is None else v


class GatewayFailure(BaseModel):
    type: Literal["error"] = "error"
    message: str = "Unable to process the analysis. Please try again."


DetailedReply = Annotated[
    Union[FollowUp, AnalysisReady, DetailedAnalysis, GatewayFailure],
    Field(discriminator="type"),
]


class DetailedRequest(CamelModel):
    case_description: str
    initial_analysis: InitialAnalysis
    conversation_history: list[ConversationMessage] = Field(default_factory=list)
    action: DetailedAction


class DetailedResponse(BaseModel):
    result: DetailedReply


# ----------------------------------------------------------------------
# Lawyers & result view
# ----------------------------------------------------------------------


class LawyerProfile(CamelModel):
    id: str
    name: str
    city: str
    state: str
    specialization: str
    experience: int
    languages: list[str]
    bar_council_id: str
    availability: str
    rating: float
    cases_won: int


class HelplineNotice(BaseModel):
    message: str
    url: str


class FilingGuide(CamelModel):
    portal_url: str
    steps: list[str]


class LawyerConnect(BaseModel):
    title: str
    description: str
    lawyers: list[LawyerProfile] = Field(default_factory=list)


class ResultView(CamelModel):
    analysis: InitialAnalysis
    fir_warning: bool = False
    helpline_notice: Optional[HelplineNotice] = None
    filing_guide: Optional[FilingGuide] = None
    lawyer_connect: Optional[LawyerConnect] = None
    labels: dict[str, str] = Field(default_factory=dict)


# ----------------------------------------------------------------------
# Intake session API
# ----------------------------------------------------------------------


class StartSessionRequest(BaseModel):
    preferences: Preferences = Field(default_factory=Preferences)


class DescribeRequest(CamelModel):
    case_description: str


class ConsumerCheckRequest(CamelModel):
    registered: bool
    complaint_id: Optional[str] = None


class ProceedRequest(BaseModel):
    choice: str


class AnswersRequest(BaseModel):
    responses: dict[str, Any] = Field(default_factory=dict)


class SessionView(CamelModel):
    session_id: str
    step: str
    loading: bool = False
    round: int = 0
    message: Optional[str] = None
    questions: list[SmartQuestion] = Field(default_factory=list)
    case_description: Optional[str] = None
    initial_analysis: Optional[InitialAnalysis] = None
    result: Optional[ResultView] = None
    detailed_analysis: Optional[DetailedAnalysis] = None
    conversation_history: list[ConversationMessage] = Field(default_factory=list)
    notification: Optional[str] = None
    preferences: Preferences
