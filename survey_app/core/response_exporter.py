"""Export the response log as CSV for offline review."""

from __future__ import annotations

import csv
from collections.abc import Sequence
from dataclasses import fields
from pathlib import Path

from survey_app.core.models import SurveyResponse

_COLUMNS = [f.name for f in fields(SurveyResponse)]


def save_responses_to_csv(file_path: Path, responses: Sequence[SurveyResponse]) -> int:
    """Write ``responses`` in log order; return the number of rows written."""
    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    with file_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.writer(handle)
        writer.writerow(_COLUMNS)
        for response in responses:
            writer.writerow([getattr(response, column) for column in _COLUMNS])
    return len(responses)
