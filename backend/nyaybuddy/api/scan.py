from fastapi import APIRouter, HTTPException

from ..engine.detailed import run_detailed_action
from ..engine.scan import analyze_case
from ..schemas import (
    AnalyzeRequest,
    AnalyzeResponse,
    DetailedRequest,
    DetailedResponse,
)

router = APIRouter(prefix="/api/nyayscan", tags=["nyayscan"])


@router.post("", response_model=AnalyzeResponse)
async def analyze(req: AnalyzeRequest):
    description = req.case_description.strip()
    if not description:
        raise HTTPException(status_code=400, detail="Please describe your legal issue")

    analysis = await analyze_case(description)
    return AnalyzeResponse(analysis=analysis)


@router.post("/detailed", response_model=DetailedResponse)
async def detailed(req: DetailedRequest):
    result = await run_detailed_action(req)
    return DetailedResponse(result=result)
