from __future__ import annotations

import logging
import uuid
from typing import Any

from ..errors import (
    GatewayError,
    IntakeValidationError,
    InvalidTransition,
    SessionNotFound,
)
from ..preferences import Preferences
from ..schemas import (
    AnalysisReady,
    ConversationMessage,
    DetailedAnalysis,
    DetailedRequest,
    FollowUp,
    GatewayFailure,
    InitialAnalysis,
    SessionView,
)
from .answers import answered_questions, fold_round, missing_required
from .detailed import MAX_FOLLOWUP_ROUNDS, run_detailed_action
from .presenter import build_result_view
from .scan import analyze_case
from .steps import (
    Analyzing,
    ConsumerCheck,
    DetailedFollowup,
    DetailedLoading,
    DetailedResult,
    Input,
    ProceedChoice,
    Result,
    Step,
    is_loading,
)

logger = logging.getLogger(__name__)

PROCEED_CHOICES = ("online", "lawyer")

ANALYZE_FAILED = "Failed to analyze case. Please try again."
DETAILED_FAILED = "Failed to generate detailed analysis. Please try again."


class LLMGateway:
    """Calls the inference gateway in-process."""

    async def analyze(self, case_description: str) -> InitialAnalysis:
        return await analyze_case(case_description)

    async def detailed(self, request: DetailedRequest):
        return await run_detailed_action(request)


class IntakeOrchestrator:
    """Drives one user's NyayScan intake from description to final report."""

    def __init__(
        self,
        gateway: Any = None,
        preferences: Preferences | None = None,
        session_id: str | None = None,
    ) -> None:
        self.session_id = session_id or str(uuid.uuid4())
        self.gateway = gateway or LLMGateway()
        self.preferences = preferences or Preferences()
        self._clear()

    def _clear(self) -> None:
        self.step: Step = Input()
        self.case_description: str | None = None
        self.initial_analysis: InitialAnalysis | None = None
        self.helpline_registered: bool | None = None
        self.complaint_id: str | None = None
        self.proceed_choice: str | None = None
        self.conversation_history: list[ConversationMessage] = []
        self.responses: dict[str, Any] = {}
        self.detailed_analysis: DetailedAnalysis | None = None
        self.notification: str | None = None

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    async def submit_description(self, case_description: str) -> Step:
        self._expect("submit a description", Input)
        text = (case_description or "").strip()
        if not text:
            raise IntakeValidationError("Please describe your legal issue")

        self.case_description = text
        self.notification = None
        self.step = Analyzing()
        try:
            analysis = await self.gateway.analyze(text)
        except Exception as e:
            self._revert(Input(), e, ANALYZE_FAILED)
            raise

        self.initial_analysis = analysis
        self.step = ConsumerCheck() if analysis.is_consumer_case else Result()
        logger.info(
            "Session %s classified as %s -> %s",
            self.session_id, analysis.case_type, self.step.name,
        )
        return self.step

    def answer_consumer_check(
        self, registered: bool, complaint_id: str | None = None
    ) -> Step:
        self._expect("answer the helpline question", ConsumerCheck)
        complaint_id = (complaint_id or "").strip() or None
        if registered and complaint_id is None:
            raise IntakeValidationError("Please enter your complaint ID")

        self.helpline_registered = registered
        self.complaint_id = complaint_id if registered else None
        self.step = ProceedChoice()
        return self.step

    def choose_proceed(self, choice: str) -> Step:
        self._expect("choose how to proceed", ProceedChoice)
        if choice not in PROCEED_CHOICES:
            raise IntakeValidationError("Please select how you want to proceed")

        self.proceed_choice = choice
        self.step = Result()
        return self.step

    async def start_detailed(self) -> Step:
        self._expect("start detailed analysis", Result)
        self.notification = None
        self.conversation_history = []
        self.responses = {}
        self.detailed_analysis = None
        self.step = DetailedLoading()

        reply = await self._request("start", [])
        return await self._handle_reply(reply, current_round=0, history=[])

    async def submit_answers(self, responses: dict[str, Any]) -> Step:
        step = self._expect("submit answers", DetailedFollowup)
        missing = missing_required(list(step.questions), responses)
        if missing:
            raise IntakeValidationError(
                "Please answer all required questions: "
                + ", ".join(q.question for q in missing)
            )

        self.responses = dict(responses)
        history = self.conversation_history + fold_round(
            step.message, list(step.questions), self.responses
        )
        self.notification = None
        self.step = DetailedLoading()

        if step.round >= MAX_FOLLOWUP_ROUNDS:
            logger.info(
                "Session %s reached %d rounds, generating analysis",
                self.session_id, step.round,
            )
            return await self._generate(history)

        reply = await self._request("respond", history)
        return await self._handle_reply(reply, current_round=step.round, history=history)

    async def skip_to_analysis(self, responses: dict[str, Any] | None = None) -> Step:
        step = self._expect("skip to analysis", DetailedFollowup)
        if responses is not None:
            self.responses = dict(responses)

        answered = answered_questions(list(step.questions), self.responses)
        history = list(self.conversation_history)
        if answered:
            history += fold_round(step.message, answered, self.responses)

        self.notification = None
        self.step = DetailedLoading()
        return await self._generate(history)

    def back_to_result(self) -> Step:
        self._expect("return to the result", DetailedFollowup, DetailedResult)
        self.step = Result()
        return self.step

    def reset(self) -> Step:
        if is_loading(self.step):
            raise InvalidTransition("Cannot reset while a request is in progress")
        self._clear()
        return self.step

    def set_preferences(self, preferences: Preferences) -> None:
        self.preferences = preferences

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _expect(self, action: str, *allowed: type) -> Any:
        if not isinstance(self.step, allowed):
            raise InvalidTransition(
                f"Cannot {action} while the session is at '{self.step.name}'"
            )
        return self.step

    def _revert(self, step: Step, error: Exception, default_message: str) -> None:
        if isinstance(error, GatewayError):
            message = error.message
        else:
            logger.exception("Session %s failed unexpectedly", self.session_id)
            message = default_message
        logger.warning(
            "Session %s reverting to %s: %s", self.session_id, step.name, message
        )
        self.step = step
        self.notification = message

    async def _request(self, action: str, history: list[ConversationMessage]):
        request = DetailedRequest(
            case_description=self.case_description,
            initial_analysis=self.initial_analysis,
            conversation_history=history,
            action=action,
        )
        try:
            reply = await self.gateway.detailed(request)
        except Exception as e:
            self._revert(Result(), e, DETAILED_FAILED)
            raise

        if isinstance(reply, GatewayFailure):
            error = GatewayError(reply.message or DETAILED_FAILED)
            self._revert(Result(), error, DETAILED_FAILED)
            raise error
        return reply

    async def _handle_reply(
        self, reply, current_round: int, history: list[ConversationMessage]
    ) -> Step:
        self.conversation_history = history

        if isinstance(reply, DetailedAnalysis):
            return self._finish(reply)

        if isinstance(reply, FollowUp) and current_round < MAX_FOLLOWUP_ROUNDS:
            self.responses = {}
            self.step = DetailedFollowup(
                round=current_round + 1,
                message=reply.message,
                questions=tuple(reply.questions),
            )
            return self.step

        if isinstance(reply, (FollowUp, AnalysisReady)):
            return await self._generate(history)

        error = GatewayError(DETAILED_FAILED)
        self._revert(Result(), error, DETAILED_FAILED)
        raise error

    async def _generate(self, history: list[ConversationMessage]) -> Step:
        self.step = DetailedLoading()
        reply = await self._request("generate", history)
        if not isinstance(reply, DetailedAnalysis):
            error = GatewayError(DETAILED_FAILED)
            self._revert(Result(), error, DETAILED_FAILED)
            raise error
        self.conversation_history = history
        return self._finish(reply)

    def _finish(self, analysis: DetailedAnalysis) -> Step:
        self.detailed_analysis = analysis
        self.responses = {}
        self.step = DetailedResult(analysis=analysis)
        return self.step

    # ------------------------------------------------------------------
    # View
    # ------------------------------------------------------------------

    def view(self) -> SessionView:
        step = self.step
        result = None
        if isinstance(step, Result) and self.initial_analysis is not None:
            result = build_result_view(
                self.initial_analysis,
                helpline_registered=self.helpline_registered,
                proceed_choice=self.proceed_choice,
                preferences=self.preferences,
            )

        followup = step if isinstance(step, DetailedFollowup) else None
        return SessionView(
            session_id=self.session_id,
            step=step.name,
            loading=is_loading(step),
            round=followup.round if followup else 0,
            message=followup.message if followup else None,
            questions=list(followup.questions) if followup else [],
            case_description=self.case_description,
            initial_analysis=self.initial_analysis,
            result=result,
            detailed_analysis=self.detailed_analysis,
            conversation_history=self.conversation_history,
            notification=self.notification,
            preferences=self.preferences,
        )


class IntakeSessions:
    def __init__(self, gateway: Any = None) -> None:
        self.gateway = gateway
        self.sessions: dict[str, IntakeOrchestrator] = {}

    def create(self, preferences: Preferences | None = None) -> IntakeOrchestrator:
        orchestrator = IntakeOrchestrator(gateway=self.gateway, preferences=preferences)
        self.sessions[orchestrator.session_id] = orchestrator
        return orchestrator

    def get(self, session_id: str) -> IntakeOrchestrator:
        orchestrator = self.sessions.get(session_id)
        if orchestrator is None:
            raise SessionNotFound(session_id)
        return orchestrator

    def discard(self, session_id: str) -> None:
        if self.sessions.pop(session_id, None) is None:
            raise SessionNotFound(session_id)


sessions = IntakeSessions()
