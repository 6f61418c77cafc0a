"""Domain models for the satisfaction survey."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from survey_app.constants.survey_constants import SQD_FIELDS


class QuestionType(Enum):
    """Answer widget a question is rendered with."""

    LIKERT = "Likert"
    RADIO = "Radio"
    TEXT = "Text"


class QuestionCategory(Enum):
    """Questionnaire section a question belongs to."""

    CC = "CC"
    SQD = "SQD"


class View(Enum):
    """Top-level view selected by the mode controller."""

    LANDING = auto()
    SURVEY = auto()
    ADMIN = auto()


class LandingVariant(Enum):
    """Which landing screen is shown while the view is LANDING."""

    STANDARD = auto()
    KIOSK = auto()


@dataclass(slots=True)
class SurveyQuestion:
    """A questionnaire item keyed by a stable string id."""

    id: str
    text: str
    type: QuestionType
    required: bool
    category: QuestionCategory
    order: int | None = None
    choices: list[str] | None = None


@dataclass(frozen=True, slots=True)
class SurveyResponse:
    """A submitted questionnaire, including the derived SQD average. Immutable once stored."""

    id: int
    ref_id: str
    date: str
    client_type: str
    sex: str
    age: str
    region: str
    service: str
    cc1: str
    cc2: str
    cc3: str
    sqd0: str
    sqd1: str
    sqd2: str
    sqd3: str
    sqd4: str
    sqd5: str
    sqd6: str
    sqd7: str
    sqd8: str
    sqd_avg: float
    suggestions: str
    timestamp: int
    email: str = ""
    service_other: str = ""

    def sqd_answers(self) -> list[str]:
        return [getattr(self, name) for name in SQD_FIELDS]


@dataclass(slots=True)
class User:
    """Administrative account shown in the user management table."""

    id: int
    name: str
    email: str
    role: str
    status: str = "Active"


@dataclass(slots=True)
class SurveySummary:
    """Aggregated dashboard figures over the response log."""

    total_responses: int
    average_satisfaction: float
    by_service: dict[str, int] = field(default_factory=dict)
    by_client_type: dict[str, int] = field(default_factory=dict)
    cc1_distribution: dict[str, int] = field(default_factory=dict)
    sqd_dimension_averages: dict[str, float] = field(default_factory=dict)
