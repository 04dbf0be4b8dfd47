from dataclasses import asdict
from typing import Optional

from fastapi import APIRouter, HTTPException

from ..knowledge import (
    LAWYERS,
    get_lawyer_by_id,
    get_lawyers_by_location,
    get_lawyers_by_specialization,
)
from ..schemas import LawyerProfile

router = APIRouter(prefix="/api/lawyers", tags=["lawyers"])


def _profile(lawyer) -> LawyerProfile:
    return LawyerProfile.model_validate(asdict(lawyer))


@router.get("", response_model=list[LawyerProfile])
async def list_lawyers(
    specialization: Optional[str] = None,
    state: Optional[str] = None,
    city: Optional[str] = None,
):
    if state:
        lawyers = get_lawyers_by_location(state, city)
    else:
        lawyers = list(LAWYERS)
    if specialization:
        wanted = {lawyer.id for lawyer in get_lawyers_by_specialization(specialization)}
        lawyers = [lawyer for lawyer in lawyers if lawyer.id in wanted]
    return [_profile(lawyer) for lawyer in lawyers]


@router.get("/{lawyer_id}", response_model=LawyerProfile)
async def get_lawyer(lawyer_id: str):
    lawyer = get_lawyer_by_id(lawyer_id)
    if lawyer is None:
        raise HTTPException(status_code=404, detail="Lawyer not found")
    return _profile(lawyer)
