"""Shared fixtures for the survey core tests."""

from __future__ import annotations

import random

import pytest

from survey_app.core.kiosk_store import InMemoryKioskStore
from survey_app.core.survey_manager import SurveyManager


def _make_submission(**overrides):
    """A valid web-form submission with every SQD answer set to "5"."""
    submission = {
        "refId": "VZM-CSM-1760000000000-1234",
        "date": "2025-10-06",
        "clientType": "Citizen",
        "sex": "female",
        "age": "30",
        "region": "ncr",
        "service": "Business Permit",
        "serviceOther": "",
        "cc1": "1",
        "cc2": "1",
        "cc3": "1",
        "suggestions": "",
        "email": "",
    }
    submission.update({f"sqd{index}": "5" for index in range(9)})
    submission.update(overrides)
    return submission


@pytest.fixture
def make_submission():
    return _make_submission


@pytest.fixture
def kiosk_store():
    return InMemoryKioskStore()


@pytest.fixture
def manager(kiosk_store):
    survey_manager = SurveyManager.with_seed_data(kiosk_store=kiosk_store, rng=random.Random(7))
    yield survey_manager
    survey_manager.close()
