"""
The steps an intake session moves through.

Each step is its own frozen dataclass so a session can only ever hold data
that makes sense for where it is: a ``DetailedFollowup`` always has its round
and questions, a ``Result`` never does.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from ..schemas import DetailedAnalysis, SmartQuestion


@dataclass(frozen=True)
class Input:
    name = "input"


@dataclass(frozen=True)
class Analyzing:
    name = "analyzing"


@dataclass(frozen=True)
class ConsumerCheck:
    name = "consumer-check"


@dataclass(frozen=True)
class ProceedChoice:
    name = "proceed-choice"


@dataclass(frozen=True)
class Result:
    name = "result"


@dataclass(frozen=True)
class DetailedLoading:
    name = "detailed-loading"


@dataclass(frozen=True)
class DetailedFollowup:
    round: int
    message: str
    questions: tuple[SmartQuestion, ...] = field(default_factory=tuple)

    name = "detailed-followup"


@dataclass(frozen=True)
class DetailedResult:
    analysis: DetailedAnalysis

    name = "detailed-result"


Step = Union[
    Input,
    Analyzing,
    ConsumerCheck,
    ProceedChoice,
    Result,
    DetailedLoading,
    DetailedFollowup,
    DetailedResult,
]

LOADING_STEPS = (Analyzing, DetailedLoading)


def is_loading(step: Step) -> bool:
    return isinstance(step, LOADING_STEPS)
