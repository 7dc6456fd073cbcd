# =============================================================================
# TESTS - Request payloads and JSON output
# =============================================================================

import json

import pytest
from pydantic import ValidationError

from quiz_state.models.payload import CreateQuizPayload, RewardSettingsPayload
from quiz_state.models.quiz import Custom, SplitTopThree, WinnerTakesAll
from quiz_state.utils.json_encoder import DomainEncoder, quiz_to_dict
from tests.factories import ALICE, ctx


class TestRewardSettingsPayload:
    """Tests for the flat-to-tagged reward conversion."""

    def test_custom_keeps_percentages(self):
        payload = RewardSettingsPayload(
            has_rewards=True,
            reward_amount=5,
            distribution_type="Custom",
            prize_percentage=[60, 40],
            min_players=2,
        )

        settings = payload.to_domain()

        assert settings.distribution == Custom(prize_percentage=(60, 40))

    def test_non_custom_drops_percentages(self):
        payload = RewardSettingsPayload(distribution_type="SplitTopThree", prize_percentage=[1, 2])

        settings = payload.to_domain()

        assert settings.distribution == SplitTopThree()
        assert settings.prize_percentage == ()

    def test_defaults_to_disabled_winner_takes_all(self):
        settings = RewardSettingsPayload().to_domain()

        assert settings.has_rewards is False
        assert settings.distribution == WinnerTakesAll()

    def test_rejects_unknown_distribution(self):
        with pytest.raises(ValidationError):
            RewardSettingsPayload(distribution_type="Lottery")

    def test_rejects_negative_amount(self):
        with pytest.raises(ValidationError):
            RewardSettingsPayload(reward_amount=-1)


class TestCreateQuizPayload:
    """Tests for CreateQuizPayload parsing."""

    def test_minimal_payload(self):
        payload = CreateQuizPayload.model_validate({
            "quiz_details": {"quiz_title": "Trivia"},
            "questions": [{"text": "?"}],
            "creator": ALICE,
        })

        assert payload.quiz_details.to_domain().quiz_title == "Trivia"
        assert payload.reward_settings.has_rewards is False
        assert payload.default_duration == 30


class TestQuizToDict:
    """Tests for quiz JSON output."""

    def test_flattens_reward_distribution(self, service, details, questions):
        settings = RewardSettingsPayload(
            has_rewards=True,
            reward_amount=10,
            distribution_type="Custom",
            prize_percentage=[100],
            min_players=1,
        ).to_domain()
        quiz = service.create_quiz(ctx(), details, questions, settings, 20, 500, True, ALICE)

        data = quiz_to_dict(quiz)

        assert data["id"] == 1
        assert data["quiz_details"]["quiz_title"] == "Capital Cities"
        assert data["reward_settings"]["distribution_type"] == "Custom"
        assert data["reward_settings"]["prize_percentage"] == [100]
        assert "distribution" not in data["reward_settings"]
        assert json.loads(json.dumps(data)) == data

    def test_encoder_handles_stats(self, service):
        stats = service.update_creator_stats(ctx(), "quiz_created")

        data = json.loads(json.dumps(stats, cls=DomainEncoder))

        assert data["creator"] == ALICE
        assert data["total_quizzes_created"] == 1
