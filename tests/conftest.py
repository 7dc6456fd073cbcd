# =============================================================================
# CONFTEST - shared fixtures for the quiz state tests
# =============================================================================

import pytest

from quiz_state.config import Settings
from quiz_state.db import Database
from quiz_state.models.quiz import QuizDetails, RewardSettings
from quiz_state.services.quiz import QuizService


@pytest.fixture
def test_settings() -> Settings:
    return Settings(DATABASE_URL="sqlite:///:memory:", OUTPUT_DIR=None)


@pytest.fixture
def database(test_settings):
    """In-memory database with all tables created."""
    database = Database()
    database.init(test_settings.DATABASE_URL)
    yield database
    database.dispose()


@pytest.fixture
def service(database, test_settings) -> QuizService:
    return QuizService(database, test_settings)


@pytest.fixture
def details() -> QuizDetails:
    return QuizDetails(
        quiz_title="Capital Cities",
        description="Name the capital",
        category="geography",
        visibility=True,
    )


@pytest.fixture
def questions():
    return [
        {"text": "Capital of France?", "options": ["Paris", "Rome"], "answer": 0},
        {"text": "Capital of Italy?", "options": ["Paris", "Rome"], "answer": 1},
    ]


@pytest.fixture
def no_rewards() -> RewardSettings:
    return RewardSettings()
