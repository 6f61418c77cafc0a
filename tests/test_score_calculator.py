"""Tests for the SQD average calculation."""

import pytest

from survey_app.core.errors import InvalidAnswerError
from survey_app.core.services.score_calculator import (
    compute_average,
    parse_choice,
    parse_likert,
    round_average,
)


class TestComputeAverage:
    """Mean of numeric answers with "na" excluded."""

    def test_mean_of_numeric_answers(self):
        answers = ["5", "5", "5", "4", "5", "5", "5", "5", "4"]
        assert compute_average(answers) == pytest.approx(43 / 9)

    def test_na_excluded_from_sum_and_count(self):
        answers = ["5", "4", "5", "4", "4", "na", "5", "5", "4"]
        assert compute_average(answers) == pytest.approx(36 / 8)

    def test_all_na_returns_zero(self):
        result = compute_average(["na"] * 9)
        assert result == 0.0

    def test_na_is_case_insensitive(self):
        assert compute_average(["NA"] * 8 + ["3"]) == 3.0

    @pytest.mark.parametrize("bad", ["0", "6", "abc", "", "4.5"])
    def test_rejects_malformed_answer(self, bad):
        with pytest.raises(InvalidAnswerError):
            compute_average(["5"] * 8 + [bad])

    def test_rejects_wrong_length(self):
        with pytest.raises(InvalidAnswerError):
            compute_average(["5"] * 8)

    def test_rejects_non_string(self):
        with pytest.raises(InvalidAnswerError):
            parse_likert(5)


def test_round_average_uses_one_decimal():
    assert round_average(43 / 9) == 4.8


@pytest.mark.parametrize("numeral", ["+5", "05", "５", " 5x"])
def test_likert_accepts_only_plain_numerals(numeral):
    with pytest.raises(InvalidAnswerError):
        parse_likert(numeral)


class TestParseChoice:
    """CC answers are 1-based choice numbers."""

    def test_valid_index(self):
        assert parse_choice("3", choice_count=4) == 3

    def test_unbounded_when_count_unknown(self):
        assert parse_choice("7") == 7

    @pytest.mark.parametrize("bad", ["banana", "", "0", "01", "-1", "２", "2.0"])
    def test_rejects_non_choice_values(self, bad):
        with pytest.raises(InvalidAnswerError):
            parse_choice(bad, choice_count=4)

    def test_rejects_index_past_choices(self):
        with pytest.raises(InvalidAnswerError):
            parse_choice("99", choice_count=5)
