"""Per-creator aggregate stats bookkeeping"""
import logging
from enum import Enum
from typing import Union

from quiz_state.models.quiz import CreatorStats
from quiz_state.services.storage import StateStore

logger = logging.getLogger(__name__)

class CreatorAction(str, Enum):
    """Creator activity that moves a stats counter"""
    QUIZ_CREATED = "quiz_created"
    GAME_HOSTED = "game_hosted"

class CreatorStatsUpdater:
    """Creates or updates the stats record of a creator"""

    def __init__(self, store: StateStore):
        self.store = store

    def update_creator_stats(self, creator: str, action: Union[CreatorAction, str], now: int) -> CreatorStats:
        """
        Apply one action to a creator's stats and refresh last_activity.

        A creator without a record starts from all-zero counters. Actions other
        than quiz_created and game_hosted leave the counters alone.

        Args:
            creator: Actor identifier of the creator
            action: CreatorAction or its string value
            now: Logical timestamp of the action

        Returns:
            CreatorStats: The record as written
        """
        stats = self.store.get_creator_stats(creator, for_update=True)
        if stats is None:
            stats = CreatorStats(creator=creator, last_activity=now)

        if action == CreatorAction.QUIZ_CREATED:
            stats.total_quizzes_created += 1
        elif action == CreatorAction.GAME_HOSTED:
            stats.total_games_hosted += 1
        else:
            logger.debug(f"Unrecognized creator action {action!r} for {creator}")

        stats.last_activity = now
        self.store.put_creator_stats(stats)
        return stats
