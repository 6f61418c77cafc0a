"""Tests for integer id allocation."""

from survey_app.core.services.id_allocator import next_id


def test_empty_set_starts_at_one():
    assert next_id(set()) == 1


def test_one_past_the_maximum():
    assert next_id({1, 3, 7}) == 8


def test_is_pure():
    ids = {2, 5}
    assert next_id(ids) == next_id(ids) == 6
    assert ids == {2, 5}


def test_accepts_generators():
    assert next_id(i for i in (4, 1)) == 5
