import pytest

from nyaybuddy.schemas import AnalysisReady, InitialAnalysis


@pytest.fixture
def consumer_analysis():
    return InitialAnalysis(
        case_type="Consumer Court",
        summary="Airline refused a refund for a cancelled flight.",
        is_consumer_case=True,
        requires_fir=False,
        prerequisites=["Ticket", "Payment receipt"],
        recommendations=["Send a written complaint to the airline"],
        next_steps=["Register on NCH", "File on e-Daakhil"],
        urgency_level="medium",
        estimated_timeframe="3-6 months",
    )


@pytest.fixture
def criminal_analysis():
    return InitialAnalysis(
        case_type="Criminal Law",
        summary="Phone snatched on the street.",
        is_consumer_case=False,
        requires_fir=True,
        urgency_level="high",
    )


@pytest.fixture
def analysis_ready():
    return AnalysisReady(message="I have enough information.")
