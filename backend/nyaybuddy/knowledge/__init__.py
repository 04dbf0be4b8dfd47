from .base import Lawyer
from .lawyers import LAWYERS
from .portals import E_DAAKHIL, NATIONAL_CONSUMER_HELPLINE_URL

LAWYERS_BY_ID = {lawyer.id: lawyer for lawyer in LAWYERS}


def get_lawyer_by_id(lawyer_id: str) -> Lawyer | None:
    return LAWYERS_BY_ID.get(lawyer_id)


def get_lawyers_by_specialization(specialization: str) -> list[Lawyer]:
    """Case-insensitive match in either direction, best rated first.

    "Consumer" finds "Consumer Court"; "Consumer Court / Consumer Protection"
    also finds "Consumer Court".
    """
    wanted = specialization.strip().lower()
    if not wanted:
        return []
    matches = [
        lawyer for lawyer in LAWYERS
        if wanted in lawyer.specialization.lower()
        or lawyer.specialization.lower() in wanted
    ]
    matches.sort(key=lambda lawyer: (-lawyer.rating, -lawyer.experience))
    return matches


def get_lawyers_by_location(state: str, city: str | None = None) -> list[Lawyer]:
    state = state.strip().lower()
    results = [lawyer for lawyer in LAWYERS if lawyer.state.lower() == state]
    if city:
        results = [lawyer for lawyer in results if lawyer.city.lower() == city.strip().lower()]
    return results


__all__ = [
    "E_DAAKHIL",
    "LAWYERS",
    "Lawyer",
    "NATIONAL_CONSUMER_HELPLINE_URL",
    "get_lawyer_by_id",
    "get_lawyers_by_location",
    "get_lawyers_by_specialization",
]
