import pytest

from formlogic.engine import VisibilityEngine
from helpers.loader import load_fixture, load_fixture_form


@pytest.fixture
def raw_fixture():
    return load_fixture

@pytest.fixture(scope="session")
def feedback_form():
    return load_fixture_form("feedback.yaml")

@pytest.fixture(scope="session")
def signup_form():
    return load_fixture_form("event_signup.json")

@pytest.fixture
def engine():
    """Fresh VisibilityEngine for each test."""
    return VisibilityEngine()
