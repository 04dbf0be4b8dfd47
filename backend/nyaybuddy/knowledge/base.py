from dataclasses import dataclass, field


@dataclass
class Lawyer:
    id: str
    name: str
    city: str
    state: str
    specialization: str
    experience: int  # years at the bar
    languages: list[str] = field(default_factory=list)
    bar_council_id: str = ""
    availability: str = ""
    rating: float = 0.0
    cases_won: int = 0


@dataclass
class FilingPortal:
    name: str
    url: str
    steps: list[str]
