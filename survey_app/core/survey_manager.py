"""Business logic for the survey state shared between the kiosk and admin views."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
import random
from threading import Lock
from typing import Any

from survey_app.core.kiosk_store import InMemoryKioskStore, KioskStateStore
from survey_app.core.models import QuestionCategory, SurveyQuestion, SurveyResponse, SurveySummary, User, View
from survey_app.core.payloads import NewUser, QuestionUpdate, ResponseSubmission, UserUpdate
from survey_app.core.response_exporter import save_responses_to_csv
from survey_app.core.seed_data import default_questions, default_responses, default_users
from survey_app.core.services import response_stats
from survey_app.core.services.mode_controller import ModeController
from survey_app.core.services.question_registry import QuestionRegistry
from survey_app.core.services.response_log import ResponseLog
from survey_app.core.services.user_directory import UserDirectory

logger = logging.getLogger(__name__)


class SurveyManager:
    """Facade for survey services: Questions, Responses, Users, and the ModeController.

    Collections are guarded by one lock so id allocation and insertion happen
    atomically. The mode controller is event driven and not locked.
    """

    def __init__(self, kiosk_store: KioskStateStore | None = None, rng: random.Random | None = None) -> None:
        self._lock = Lock()

        # Services
        self._questions = QuestionRegistry()
        self._responses = ResponseLog(rng=rng)
        self._users = UserDirectory()
        self._kiosk_store = kiosk_store or InMemoryKioskStore()
        self.mode = ModeController(self._kiosk_store)

    @classmethod
    def with_seed_data(cls, kiosk_store: KioskStateStore | None = None, rng: random.Random | None = None) -> "SurveyManager":
        manager = cls(kiosk_store=kiosk_store, rng=rng)
        manager.load(default_questions(), default_responses(), default_users())
        return manager

    def load(
        self,
        questions: Iterable[SurveyQuestion],
        responses: Iterable[SurveyResponse],
        users: Iterable[User],
    ) -> None:
        with self._lock:
            self._questions.clear()
            for question in questions:
                self._questions.add(question)
            self._responses.load(responses)
            self._users.load(users)
            logger.info(
                "Loaded %d questions, %d responses, %d users",
                len(self._questions), len(self._responses), len(self._users),
            )

    # --- Question Registry Delegation ---

    def get_questions(self) -> list[SurveyQuestion]:
        with self._lock:
            return self._questions.list()

    def get_question(self, key: str) -> SurveyQuestion:
        with self._lock:
            return self._questions.get(key)

    def add_question(self, question: SurveyQuestion) -> SurveyQuestion:
        with self._lock:
            added = self._questions.add(question)
        logger.info("Added question %s", added.id)
        return added

    def update_question(self, key: str, updates: Mapping[str, Any] | QuestionUpdate) -> SurveyQuestion:
        changes = _changes(QuestionUpdate, updates)
        with self._lock:
            updated = self._questions.update(key, changes)
        logger.info("Updated question %s (%s)", key, ", ".join(sorted(changes)))
        return updated

    def delete_question(self, key: str) -> None:
        with self._lock:
            self._questions.delete(key)
        logger.info("Deleted question %s", key)

    def reorder_questions(self, new_order: Iterable[SurveyQuestion | str]) -> list[SurveyQuestion]:
        with self._lock:
            return self._questions.reorder(new_order)

    # --- Response Log Delegation ---

    def get_responses(self) -> tuple[SurveyResponse, ...]:
        with self._lock:
            return self._responses.list()

    def submit_response(
        self,
        submission: Mapping[str, Any] | ResponseSubmission,
        now_ms: int | None = None,
    ) -> SurveyResponse:
        if not isinstance(submission, ResponseSubmission):
            submission = ResponseSubmission.model_validate(submission)
        with self._lock:
            choice_counts = {
                question.id: len(question.choices)
                for question in self._questions.by_category(QuestionCategory.CC)
                if question.choices
            }
            response = self._responses.submit(submission, now_ms=now_ms, choice_counts=choice_counts)
        logger.info("Recorded response %d (%s), SQD average %.2f", response.id, response.ref_id, response.sqd_avg)
        return response

    def get_summary(self) -> SurveySummary:
        with self._lock:
            return response_stats.summarize(self._responses.list())

    def export_responses_csv(self, file_path: Path) -> int:
        with self._lock:
            responses = self._responses.list()
        count = save_responses_to_csv(file_path, responses)
        logger.info("Exported %d responses to %s", count, file_path)
        return count

    # --- User Directory Delegation ---

    def get_users(self) -> list[User]:
        with self._lock:
            return self._users.list()

    def add_user(self, new_user: Mapping[str, Any] | NewUser) -> User:
        if not isinstance(new_user, NewUser):
            new_user = NewUser.model_validate(new_user)
        with self._lock:
            user = self._users.add(new_user)
        logger.info("Added user %d (%s)", user.id, user.role)
        return user

    def update_user(self, user_id: int, updates: Mapping[str, Any] | UserUpdate) -> User:
        changes = _changes(UserUpdate, updates)
        with self._lock:
            user = self._users.update(user_id, changes)
        logger.info("Updated user %d (%s)", user_id, ", ".join(sorted(changes)))
        return user

    def delete_user(self, user_id: int) -> None:
        with self._lock:
            self._users.delete(user_id)
        logger.info("Deleted user %d", user_id)

    # --- Mode Controller Delegation ---

    def get_view(self) -> View:
        return self.mode.view

    def is_kiosk_mode(self) -> bool:
        return self.mode.kiosk_mode

    def handle_event(self, name: str) -> None:
        self.mode.handle_event(name)

    def close(self) -> None:
        self.mode.close()


def _changes(payload_type, updates) -> dict[str, Any]:
    if not isinstance(updates, payload_type):
        updates = payload_type.model_validate(updates)
    return updates.model_dump(exclude_unset=True)
