"""Aggregated dashboard figures over the response log."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from survey_app.constants.survey_constants import ALL_NA_AVERAGE, SQD_FIELDS
from survey_app.core.models import SurveyResponse, SurveySummary
from survey_app.core.services.score_calculator import parse_likert, round_average


def summarize(responses: Sequence[SurveyResponse]) -> SurveySummary:
    """Build the admin dashboard summary for ``responses``."""
    if not responses:
        return SurveySummary(total_responses=0, average_satisfaction=ALL_NA_AVERAGE)

    average = sum(r.sqd_avg for r in responses) / len(responses)
    return SurveySummary(
        total_responses=len(responses),
        average_satisfaction=round_average(average, 2),
        by_service=_count(r.service for r in responses),
        by_client_type=_count(r.client_type for r in responses),
        cc1_distribution=_count(r.cc1 for r in responses),
        sqd_dimension_averages=_dimension_averages(responses),
    )


def _count(values) -> dict[str, int]:
    return dict(Counter(values).most_common())


def _dimension_averages(responses: Sequence[SurveyResponse]) -> dict[str, float]:
    averages: dict[str, float] = {}
    for name in SQD_FIELDS:
        scores = [
            score
            for score in (parse_likert(getattr(r, name)) for r in responses)
            if score is not None
        ]
        averages[name] = round_average(sum(scores) / len(scores), 2) if scores else ALL_NA_AVERAGE
    return averages
