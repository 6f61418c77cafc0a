"""Validated payloads for the intents sent by the presentation surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from survey_app.core.models import QuestionCategory, QuestionType


class _IntentPayload(BaseModel):
    # Accepts both the camelCase keys used by web forms and snake_case names.
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class ResponseSubmission(_IntentPayload):
    """A completed questionnaire; id, timestamp and sqdAvg are assigned on submit."""

    ref_id: str | None = None
    date: str | None = None
    client_type: str
    sex: str
    age: str
    region: str
    service: str
    service_other: str = ""
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
    suggestions: str = ""
    email: str = ""


class _PartialUpdate(_IntentPayload):
    """Fields left out are unchanged; an explicit null is rejected."""

    model_config = ConfigDict(extra="forbid")


def _not_null(value, field_name: str):
    if value is None:
        raise ValueError(f"{field_name} cannot be null")
    return value


class QuestionUpdate(_PartialUpdate):
    id: str | None = None
    text: str | None = None
    type: QuestionType | None = None
    required: bool | None = None
    category: QuestionCategory | None = None
    choices: list[str] | None = None

    # choices may be cleared when a question stops being a Radio item.
    @field_validator("id", "text", "type", "required", "category", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        return _not_null(value, info.field_name)


class NewUser(_IntentPayload):
    name: str
    email: str
    role: str
    status: str = "Active"


class UserUpdate(_PartialUpdate):
    id: int | None = None
    name: str | None = None
    email: str | None = None
    role: str | None = None
    status: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value, info):
        return _not_null(value, info.field_name)
