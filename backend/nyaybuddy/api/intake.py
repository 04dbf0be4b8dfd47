import inspect
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..engine.orchestrator import sessions
from ..errors import IntakeValidationError, InvalidTransition, SessionNotFound
from ..preferences import Preferences
from ..schemas import (
    AnswersRequest,
    ConsumerCheckRequest,
    DescribeRequest,
    ProceedRequest,
    SessionView,
    StartSessionRequest,
)

router = APIRouter(prefix="/api/intake", tags=["intake"])


def _session(session_id: str):
    try:
        return sessions.get(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")


async def _apply(session, event, *args) -> SessionView:
    try:
        result = event(*args)
        if inspect.isawaitable(result):
            await result
    except IntakeValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InvalidTransition as e:
        raise HTTPException(status_code=409, detail=str(e))
    return session.view()


@router.post("/start", response_model=SessionView)
async def start_session(req: Optional[StartSessionRequest] = None):
    preferences = req.preferences if req else Preferences()
    return sessions.create(preferences).view()


@router.get("/{session_id}", response_model=SessionView)
async def get_session(session_id: str):
    return _session(session_id).view()


@router.put("/{session_id}/preferences", response_model=SessionView)
async def update_preferences(session_id: str, preferences: Preferences):
    session = _session(session_id)
    session.set_preferences(preferences)
    return session.view()


@router.post("/{session_id}/describe", response_model=SessionView)
async def describe(session_id: str, req: DescribeRequest):
    session = _session(session_id)
    return await _apply(session, session.submit_description, req.case_description)


@router.post("/{session_id}/consumer-check", response_model=SessionView)
async def consumer_check(session_id: str, req: ConsumerCheckRequest):
    session = _session(session_id)
    return await _apply(
        session, session.answer_consumer_check, req.registered, req.complaint_id
    )


@router.post("/{session_id}/proceed", response_model=SessionView)
async def proceed(session_id: str, req: ProceedRequest):
    session = _session(session_id)
    return await _apply(session, session.choose_proceed, req.choice)


@router.post("/{session_id}/detailed", response_model=SessionView)
async def start_detailed(session_id: str):
    session = _session(session_id)
    return await _apply(session, session.start_detailed)


@router.post("/{session_id}/answers", response_model=SessionView)
async def submit_answers(session_id: str, req: AnswersRequest):
    session = _session(session_id)
    return await _apply(session, session.submit_answers, req.responses)


@router.post("/{session_id}/skip", response_model=SessionView)
async def skip_to_analysis(session_id: str, req: Optional[AnswersRequest] = None):
    session = _session(session_id)
    responses = req.responses if req else None
    return await _apply(session, session.skip_to_analysis, responses)


@router.post("/{session_id}/back", response_model=SessionView)
async def back_to_result(session_id: str):
    session = _session(session_id)
    return await _apply(session, session.back_to_result)


@router.post("/{session_id}/reset", response_model=SessionView)
async def reset(session_id: str):
    session = _session(session_id)
    return await _apply(session, session.reset)


@router.delete("/{session_id}")
async def end_session(session_id: str):
    try:
        sessions.discard(session_id)
    except SessionNotFound:
        raise HTTPException(status_code=404, detail="Session not found")
    return {"status": "deleted", "sessionId": session_id}
