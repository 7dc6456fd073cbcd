# =============================================================================
# TESTS - Creator stats upsert
# =============================================================================

import pytest

from quiz_state.services.stats import CreatorAction, CreatorStatsUpdater
from quiz_state.services.storage import StateStore
from tests.factories import ALICE, BOB, ctx


class TestCreatorStatsUpdater:
    """Tests for CreatorStatsUpdater against a live session."""

    def test_first_action_creates_record(self, database):
        with database.session() as session:
            stats = CreatorStatsUpdater(StateStore(session)).update_creator_stats(
                ALICE, CreatorAction.QUIZ_CREATED, 10
            )

        assert stats.creator == ALICE
        assert stats.total_quizzes_created == 1
        assert stats.total_rewards_distributed == 0
        assert stats.average_game_size == 0
        assert stats.last_activity == 10

    def test_accepts_plain_string_actions(self, database):
        with database.session() as session:
            stats = CreatorStatsUpdater(StateStore(session)).update_creator_stats(ALICE, "game_hosted", 5)

        assert stats.total_games_hosted == 1
        assert stats.total_quizzes_created == 0


class TestUpdateCreatorStats:
    """Tests for QuizService.update_creator_stats."""

    @pytest.mark.parametrize("n", [1, 3, 10])
    def test_quiz_created_n_times(self, service, n):
        for i in range(n):
            service.update_creator_stats(ctx(ALICE, i), "quiz_created")

        stats = service.get_creator_stats(ALICE)

        assert stats.total_quizzes_created == n
        assert stats.total_games_hosted == 0

    def test_game_hosted(self, service):
        service.update_creator_stats(ctx(ALICE), CreatorAction.GAME_HOSTED)
        service.update_creator_stats(ctx(ALICE), CreatorAction.QUIZ_CREATED)

        stats = service.get_creator_stats(ALICE)

        assert stats.total_games_hosted == 1
        assert stats.total_quizzes_created == 1

    def test_unknown_action_only_refreshes_last_activity(self, service):
        service.update_creator_stats(ctx(ALICE, 1), CreatorAction.QUIZ_CREATED)
        stats = service.update_creator_stats(ctx(ALICE, 9), "rated_quiz")

        assert stats.total_quizzes_created == 1
        assert stats.total_games_hosted == 0
        assert stats.last_activity == 9
        assert service.get_creator_stats(ALICE) == stats

    def test_unknown_action_on_new_creator_creates_zero_record(self, service):
        stats = service.update_creator_stats(ctx(BOB, 3), "rated_quiz")

        assert stats.total_quizzes_created == 0
        assert stats.last_activity == 3
        assert service.get_creator_stats(BOB) is not None

    def test_creators_are_independent(self, service):
        service.update_creator_stats(ctx(ALICE), CreatorAction.QUIZ_CREATED)

        assert service.get_creator_stats(BOB) is None
