"""Service for recording submitted survey responses."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime, timezone
import math
import random
import time

from survey_app.constants.survey_constants import CC_FIELDS, REF_ID_PREFIX, SQD_FIELDS
from survey_app.core.errors import DuplicateKeyError, InvalidAnswerError
from survey_app.core.models import SurveyResponse
from survey_app.core.payloads import ResponseSubmission
from survey_app.core.services.id_allocator import next_id
from survey_app.core.services.score_calculator import compute_average, parse_choice


class ResponseLog:
    """Append-only log of responses, most recent first."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._responses: list[SurveyResponse] = []
        self._rng = rng or random.Random()

    def __len__(self) -> int:
        return len(self._responses)

    def load(self, responses: Iterable[SurveyResponse]) -> None:
        """Replace the log with ``responses``, already ordered most recent first."""
        loaded = list(responses)
        ids = [response.id for response in loaded]
        if len(ids) != len(set(ids)):
            raise DuplicateKeyError("Seeded responses must have distinct ids.")
        for response in loaded:
            expected = compute_average(response.sqd_answers())
            if not math.isclose(response.sqd_avg, expected):
                raise InvalidAnswerError(
                    f"Response {response.id} has sqd_avg {response.sqd_avg}, expected {expected}."
                )
        self._responses = loaded

    def list(self) -> tuple[SurveyResponse, ...]:
        return tuple(self._responses)

    def submit(
        self,
        submission: ResponseSubmission,
        now_ms: int | None = None,
        choice_counts: Mapping[str, int] | None = None,
    ) -> SurveyResponse:
        """Derive the average, assign id and timestamp, and prepend the record.

        ``choice_counts`` maps CC fields to the number of choices their
        question offers; CC answers outside that range are rejected.
        """
        data = submission.model_dump()
        counts = choice_counts or {}
        for name in CC_FIELDS:
            parse_choice(data[name], counts.get(name))
        sqd_avg = compute_average([data[name] for name in SQD_FIELDS])

        timestamp = now_ms if now_ms is not None else current_time_ms()
        if not data["ref_id"]:
            data["ref_id"] = generate_ref_id(timestamp, self._rng)
        if not data["date"]:
            data["date"] = _date_for(timestamp)

        response = SurveyResponse(
            id=next_id(r.id for r in self._responses),
            sqd_avg=sqd_avg,
            timestamp=timestamp,
            **data,
        )
        self._responses.insert(0, response)
        return response

    def clear(self) -> None:
        self._responses = []


def current_time_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_ref_id(now_ms: int, rng: random.Random) -> str:
    """Build the externally visible reference, e.g. ``VZM-CSM-1759662846524-3555``."""
    return f"{REF_ID_PREFIX}-{now_ms}-{rng.randint(1000, 9999)}"


def _date_for(timestamp_ms: int) -> str:
    return datetime.fromtimestamp(timestamp_ms / 1000, tz=timezone.utc).date().isoformat()
