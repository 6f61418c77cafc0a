"""Parsing and scoring of questionnaire answers."""

from __future__ import annotations

from collections.abc import Sequence

from survey_app.constants.survey_constants import (
    ALL_NA_AVERAGE,
    AVERAGE_DISPLAY_DIGITS,
    LIKERT_MAX,
    LIKERT_MIN,
    NA_ANSWER,
    SQD_FIELDS,
)
from survey_app.core.errors import InvalidAnswerError

_LIKERT_NUMERALS = frozenset(str(score) for score in range(LIKERT_MIN, LIKERT_MAX + 1))


def compute_average(sqd_answers: Sequence[str]) -> float:
    """Return the mean of the numeric SQD answers, ignoring "na" entries.

    When every answer is "na" the result is ``ALL_NA_AVERAGE`` (0.0).
    """
    if len(sqd_answers) != len(SQD_FIELDS):
        raise InvalidAnswerError(
            f"Expected {len(SQD_FIELDS)} SQD answers, got {len(sqd_answers)}."
        )

    scores = [score for score in (parse_likert(value) for value in sqd_answers) if score is not None]
    if not scores:
        return ALL_NA_AVERAGE
    return sum(scores) / len(scores)


def parse_likert(value: str) -> int | None:
    """Parse one SQD answer; ``None`` means not applicable."""
    if not isinstance(value, str):
        raise InvalidAnswerError(f"SQD answer must be a string, got {value!r}.")

    cleaned = value.strip()
    if cleaned.lower() == NA_ANSWER:
        return None
    if cleaned not in _LIKERT_NUMERALS:
        raise InvalidAnswerError(
            f"SQD answer {value!r} must be 'na' or one of {LIKERT_MIN}..{LIKERT_MAX}."
        )
    return int(cleaned)


def parse_choice(value: str, choice_count: int | None = None) -> int:
    """Parse a CC answer, the 1-based index of the selected choice.

    ``choice_count`` bounds the index when the question's choices are known.
    """
    if not isinstance(value, str):
        raise InvalidAnswerError(f"CC answer must be a string, got {value!r}.")

    cleaned = value.strip()
    # isdecimal() alone would admit non-ASCII digits.
    if not (cleaned.isascii() and cleaned.isdecimal()) or cleaned.startswith("0"):
        raise InvalidAnswerError(f"CC answer {value!r} is not a choice number.")
    index = int(cleaned)
    if choice_count is not None and index > choice_count:
        raise InvalidAnswerError(f"CC answer {index} exceeds the {choice_count} available choices.")
    return index


def round_average(value: float, digits: int = AVERAGE_DISPLAY_DIGITS) -> float:
    return round(value, digits)
