"""Service for managing the ordered collection of survey questions."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import fields, replace
from typing import Any

from survey_app.core.errors import (
    DuplicateKeyError,
    ImmutableFieldError,
    InvalidPermutationError,
    InvalidQuestionError,
    NotFoundError,
)
from survey_app.core.models import QuestionCategory, QuestionType, SurveyQuestion

_QUESTION_FIELDS = frozenset(f.name for f in fields(SurveyQuestion))


class QuestionRegistry:
    """Owns the survey questions and keeps them in presentation order."""

    def __init__(self) -> None:
        self._questions: list[SurveyQuestion] = []

    def __len__(self) -> int:
        return len(self._questions)

    def __contains__(self, key: object) -> bool:
        return any(question.id == key for question in self._questions)

    def list(self) -> list[SurveyQuestion]:
        """Return copies of all questions sorted by ``order`` ascending."""
        return [_copy(question) for question in self._sorted()]

    def by_category(self, category: QuestionCategory) -> list[SurveyQuestion]:
        return [question for question in self.list() if question.category is category]

    def get(self, key: str) -> SurveyQuestion:
        return _copy(self._questions[self._index_of(key)])

    def add(self, question: SurveyQuestion) -> SurveyQuestion:
        prepared = self._prepare_question(question)
        if prepared.id in self:
            raise DuplicateKeyError(f"Question '{prepared.id}' already exists.")

        if prepared.order is None:
            prepared.order = self._max_order() + 1
        self._questions.append(prepared)
        return _copy(prepared)

    def update(self, key: str, updates: Mapping[str, Any]) -> SurveyQuestion:
        """Merge ``updates`` into the question with ``key``.

        The merged record is validated before it replaces the stored one, so
        a rejected update leaves the registry untouched.
        """
        index = self._index_of(key)
        unknown = set(updates) - _QUESTION_FIELDS
        if unknown:
            raise ValueError(f"Unknown question field(s): {', '.join(sorted(unknown))}.")
        if "id" in updates and updates["id"] != key:
            raise ImmutableFieldError(f"Question key '{key}' cannot be changed.")
        if "order" in updates:
            raise ImmutableFieldError("Question order can only be changed by reorder.")
        nulls = sorted(name for name, value in updates.items() if value is None and name != "choices")
        if nulls:
            raise InvalidQuestionError(f"Question field(s) cannot be null: {', '.join(nulls)}.")

        merged = replace(self._questions[index], **dict(updates))
        prepared = self._prepare_question(merged)
        self._questions[index] = prepared
        return _copy(prepared)

    def delete(self, key: str) -> None:
        self._questions.pop(self._index_of(key))

    def reorder(self, new_order: Iterable[SurveyQuestion | str]) -> list[SurveyQuestion]:
        """Reassign ``order`` values 1..N to follow the supplied sequence.

        Accepts question keys or question objects; only their keys are used.
        """
        keys = [item if isinstance(item, str) else item.id for item in new_order]
        if Counter(keys) != Counter(question.id for question in self._questions):
            raise InvalidPermutationError(
                "Reorder payload must contain exactly the existing question keys."
            )

        by_key = {question.id: question for question in self._questions}
        reordered = []
        for position, key in enumerate(keys, start=1):
            question = by_key[key]
            question.order = position
            reordered.append(question)
        self._questions = reordered
        return self.list()

    def clear(self) -> None:
        self._questions = []

    def _sorted(self) -> list[SurveyQuestion]:
        # sorted() is stable, so equal orders keep insertion order.
        return sorted(self._questions, key=lambda question: question.order)

    def _index_of(self, key: str) -> int:
        for index, question in enumerate(self._questions):
            if question.id == key:
                return index
        raise NotFoundError(f"Question '{key}' does not exist.")

    def _max_order(self) -> int:
        return max((question.order for question in self._questions), default=0)

    def _prepare_question(self, question: SurveyQuestion) -> SurveyQuestion:
        """Validate and normalize a question before storage."""
        key = question.id.strip() if isinstance(question.id, str) else ""
        if not key:
            raise InvalidQuestionError("Question key must be a non-empty string.")

        cleaned_text = question.text.strip() if isinstance(question.text, str) else ""
        if not cleaned_text:
            raise InvalidQuestionError("Question text must not be empty.")

        question_type = self._coerce_enum(QuestionType, question.type, "type")
        category = self._coerce_enum(QuestionCategory, question.category, "category")
        choices = self._validate_choices(question_type, question.choices)

        if question.order is not None and (isinstance(question.order, bool) or not isinstance(question.order, int)):
            raise InvalidQuestionError("Question order must be an integer.")

        return SurveyQuestion(
            id=key,
            text=cleaned_text,
            type=question_type,
            required=bool(question.required),
            category=category,
            order=question.order,
            choices=choices,
        )

    @staticmethod
    def _coerce_enum(enum_type, value, label: str):
        if isinstance(value, enum_type):
            return value
        try:
            return enum_type(value)
        except ValueError as exc:
            raise InvalidQuestionError(f"Unsupported question {label}: {value!r}.") from exc

    @staticmethod
    def _validate_choices(question_type: QuestionType, choices: list[str] | None) -> list[str] | None:
        if choices is None:
            if question_type is QuestionType.RADIO:
                raise InvalidQuestionError("Radio questions must define at least one choice.")
            return None
        cleaned = [choice.strip() for choice in choices]
        if any(not choice for choice in cleaned):
            raise InvalidQuestionError("Choice text cannot be empty.")
        if question_type is QuestionType.RADIO and not cleaned:
            raise InvalidQuestionError("Radio questions must define at least one choice.")
        return cleaned


def _copy(question: SurveyQuestion) -> SurveyQuestion:
    choices = list(question.choices) if question.choices is not None else None
    return replace(question, choices=choices)
