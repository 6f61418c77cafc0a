"""Exceptions raised by the survey core.

All of them are local, recoverable validation failures. The presentation
layer is expected to catch them and show a corrective message.
"""

from __future__ import annotations


class SurveyError(Exception):
    """Base class for survey core errors."""


class InvalidAnswerError(SurveyError):
    """Raised when a Likert answer is neither "na" nor an integer in range."""


class DuplicateKeyError(SurveyError):
    """Raised when adding a record whose key already exists."""


class NotFoundError(SurveyError):
    """Raised when an update or delete targets an absent key or id."""


class InvalidPermutationError(SurveyError):
    """Raised when a reorder payload is not a permutation of the current keys."""


class ImmutableFieldError(SurveyError):
    """Raised when an update tries to change a record's identity."""


class InvalidQuestionError(SurveyError):
    """Raised when a question fails structural validation."""


class InvalidTransitionError(SurveyError):
    """Raised when an input event is not allowed from the current view."""
