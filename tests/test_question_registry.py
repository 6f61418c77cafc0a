"""Tests for the ordered question registry."""

import pytest

from survey_app.core.errors import (
    DuplicateKeyError,
    ImmutableFieldError,
    InvalidPermutationError,
    InvalidQuestionError,
    NotFoundError,
)
from survey_app.core.models import QuestionCategory, QuestionType, SurveyQuestion
from survey_app.core.seed_data import default_questions
from survey_app.core.services.question_registry import QuestionRegistry


def _likert(key, order=None, text="How was it?"):
    return SurveyQuestion(
        id=key,
        text=text,
        type=QuestionType.LIKERT,
        required=True,
        category=QuestionCategory.SQD,
        order=order,
    )


@pytest.fixture
def registry():
    reg = QuestionRegistry()
    for question in default_questions():
        reg.add(question)
    return reg


class TestAdd:
    """Adding questions."""

    def test_seeded_questions_sorted_by_order(self, registry):
        keys = [q.id for q in registry.list()]
        assert keys == [f"sqd{i}" for i in range(9)] + ["cc1", "cc2", "cc3"]

    def test_duplicate_key_rejected(self, registry):
        with pytest.raises(DuplicateKeyError):
            registry.add(_likert("sqd0"))
        assert len(registry) == 12

    def test_missing_order_goes_last(self, registry):
        added = registry.add(_likert("extra"))
        assert added.order == 13
        assert registry.list()[-1].id == "extra"

    def test_padded_key_collides_with_existing(self, registry):
        with pytest.raises(DuplicateKeyError):
            registry.add(_likert(" sqd0 "))
        assert [q.id for q in registry.list()].count("sqd0") == 1
        assert len(registry) == 12

    def test_padded_key_is_stored_stripped(self, registry):
        added = registry.add(_likert("  extra "))
        assert added.id == "extra"
        assert registry.get("extra").order == 13

    def test_radio_requires_choices(self, registry):
        radio = SurveyQuestion(
            id="cc4", text="Pick one", type=QuestionType.RADIO,
            required=False, category=QuestionCategory.CC, choices=[],
        )
        with pytest.raises(InvalidQuestionError):
            registry.add(radio)
        assert "cc4" not in registry

    def test_string_tags_are_normalized(self):
        reg = QuestionRegistry()
        added = reg.add(SurveyQuestion(
            id="t1", text="  Comments  ", type="Text", required=False, category="SQD",
        ))
        assert added.type is QuestionType.TEXT
        assert added.category is QuestionCategory.SQD
        assert added.text == "Comments"

    def test_unknown_type_rejected(self):
        with pytest.raises(InvalidQuestionError):
            QuestionRegistry().add(SurveyQuestion(
                id="x", text="t", type="Slider", required=True, category="SQD",
            ))


class TestUpdate:
    """Partial updates keyed by question id."""

    def test_merges_fields(self, registry):
        updated = registry.update("sqd0", {"text": "Overall satisfied?", "required": False})
        assert updated.text == "Overall satisfied?"
        assert updated.required is False
        assert updated.order == 1

    def test_missing_key_leaves_registry_unchanged(self, registry):
        before = registry.list()
        with pytest.raises(NotFoundError):
            registry.update("nope", {"text": "x"})
        assert registry.list() == before

    def test_key_is_immutable(self, registry):
        with pytest.raises(ImmutableFieldError):
            registry.update("sqd0", {"id": "sqd99"})

    def test_invalid_merge_does_not_mutate(self, registry):
        with pytest.raises(InvalidQuestionError):
            registry.update("cc1", {"choices": None})
        assert len(registry.get("cc1").choices) == 4

    def test_order_cannot_change_through_update(self, registry):
        before = registry.list()
        with pytest.raises(ImmutableFieldError):
            registry.update("cc3", {"order": 0})
        assert registry.list() == before

    @pytest.mark.parametrize("field", ["text", "required", "type", "category"])
    def test_null_field_rejected(self, registry, field):
        before = registry.get("sqd0")
        with pytest.raises(InvalidQuestionError):
            registry.update("sqd0", {field: None})
        assert registry.get("sqd0") == before

    def test_choices_can_be_cleared_for_non_radio(self, registry):
        updated = registry.update("sqd0", {"choices": None})
        assert updated.choices is None

    def test_unknown_field_rejected(self, registry):
        with pytest.raises(ValueError):
            registry.update("sqd0", {"colour": "red"})

    def test_returned_copies_do_not_alias_storage(self, registry):
        question = registry.get("cc2")
        question.choices.append("6. Other")
        assert len(registry.get("cc2").choices) == 5


class TestDelete:
    def test_removes_question(self, registry):
        registry.delete("cc3")
        assert "cc3" not in registry
        assert len(registry) == 11

    def test_absent_key_raises(self, registry):
        with pytest.raises(NotFoundError):
            registry.delete("cc9")


class TestReorder:
    """Reordering must be a permutation of the existing keys."""

    def test_assigns_sequential_orders(self, registry):
        keys = ["cc1", "cc2", "cc3"] + [f"sqd{i}" for i in range(9)]
        result = registry.reorder(keys)
        assert [q.id for q in result] == keys
        assert [q.order for q in result] == list(range(1, 13))

    def test_accepts_question_objects(self, registry):
        reversed_questions = list(reversed(registry.list()))
        result = registry.reorder(reversed_questions)
        assert result[0].id == "cc3"
        assert result[0].order == 1

    def test_dropping_a_key_fails_without_change(self, registry):
        before = registry.list()
        with pytest.raises(InvalidPermutationError):
            registry.reorder([q.id for q in before][:-1])
        assert registry.list() == before

    def test_adding_a_key_fails_without_change(self, registry):
        before = registry.list()
        with pytest.raises(InvalidPermutationError):
            registry.reorder([q.id for q in before] + ["new"])
        assert registry.list() == before

    def test_duplicated_key_fails(self, registry):
        keys = [q.id for q in registry.list()]
        keys[-1] = keys[0]
        with pytest.raises(InvalidPermutationError):
            registry.reorder(keys)

    def test_orders_unique_after_reorder(self):
        reg = QuestionRegistry()
        reg.add(_likert("a", order=5))
        reg.add(_likert("b", order=5))
        reg.reorder(["b", "a"])
        assert [(q.id, q.order) for q in reg.list()] == [("b", 1), ("a", 2)]


def test_by_category(registry):
    assert [q.id for q in registry.by_category(QuestionCategory.CC)] == ["cc1", "cc2", "cc3"]
