"""Keyed state store over a database session"""
import logging
from typing import Optional
from sqlalchemy import select, update
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from quiz_state.models.db import (
    SINGLETON_ID,
    QuizCounterRecord,
    QuizRecord,
    CreatorStatsRecord,
    PlatformConfigRecord,
    PlatformStatsRecord,
)
from quiz_state.models.quiz import (
    Quiz,
    QuizDetails,
    RewardSettings,
    CreatorStats,
    PlatformConfig,
    PlatformStats,
    prize_distribution,
)

logger = logging.getLogger(__name__)

class StateStore:
    """
    Typed read/write access to every persistent quiz state record.

    A store wraps exactly one session, so everything written through it
    commits or rolls back together with the session's transaction. Writes
    always replace the whole record; new quizzes are inserted, never merged.
    """

    def __init__(self, session: Session):
        if session is None:
            raise ValueError("Database session is required")
        self.session = session

    def _write(self, record) -> None:
        try:
            self.session.merge(record)
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error writing {type(record).__name__}: {e}")
            raise

    def _insert(self, record) -> None:
        try:
            self.session.add(record)
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error inserting {type(record).__name__}: {e}")
            raise

    # Quiz counter

    def get_quiz_counter(self) -> int:
        """Last allocated quiz id, zero when nothing has been allocated yet"""
        record = self.session.get(QuizCounterRecord, SINGLETON_ID)
        return record.current_val if record else 0

    def increment_quiz_counter(self) -> int:
        """
        Atomically add one to the quiz counter and return the new value.

        The UPDATE takes the row's write lock before the value is read back,
        so no other transaction can observe the same result.
        """
        try:
            result = self.session.execute(
                update(QuizCounterRecord)
                .where(QuizCounterRecord.id == SINGLETON_ID)
                .values(current_val=QuizCounterRecord.current_val + 1)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                self.session.add(QuizCounterRecord(id=SINGLETON_ID, current_val=1))
                self.session.flush()
                return 1
            return self.session.execute(
                select(QuizCounterRecord.current_val).where(QuizCounterRecord.id == SINGLETON_ID)
            ).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Database error incrementing quiz counter: {e}")
            raise

    # Quizzes

    def get_quiz(self, quiz_id: int) -> Optional[Quiz]:
        record = self.session.get(QuizRecord, quiz_id)
        if record is None:
            return None
        return Quiz(
            id=record.id,
            quiz_details=QuizDetails(
                quiz_title=record.quiz_title,
                description=record.description,
                category=record.category,
                visibility=record.visibility
            ),
            questions=list(record.questions),
            default_duration=record.default_duration,
            default_max_points=record.default_max_points,
            custom_timing=record.custom_timing,
            creator=record.creator,
            reward_settings=RewardSettings(
                has_rewards=record.has_rewards,
                token_address=record.token_address,
                reward_amount=record.reward_amount,
                distribution=prize_distribution(record.distribution_type, record.prize_percentage),
                number_of_winners=record.number_of_winners,
                min_players=record.min_players
            ),
            created_at=record.created_at,
            game_sessions_created=record.game_sessions_created,
            total_rewards_distributed=record.total_rewards_distributed,
            platform_fees_generated=record.platform_fees_generated,
            is_active=record.is_active
        )

    def put_quiz(self, quiz: Quiz) -> None:
        """Insert a new quiz; an existing id raises IntegrityError"""
        details = quiz.quiz_details
        rewards = quiz.reward_settings
        self._insert(QuizRecord(
            id=quiz.id,
            quiz_title=details.quiz_title,
            description=details.description,
            category=details.category,
            visibility=details.visibility,
            questions=list(quiz.questions),
            default_duration=quiz.default_duration,
            default_max_points=quiz.default_max_points,
            custom_timing=quiz.custom_timing,
            creator=quiz.creator,
            has_rewards=rewards.has_rewards,
            token_address=rewards.token_address,
            reward_amount=rewards.reward_amount,
            distribution_type=rewards.distribution_type.value,
            number_of_winners=rewards.number_of_winners,
            prize_percentage=list(rewards.prize_percentage),
            min_players=rewards.min_players,
            created_at=quiz.created_at,
            game_sessions_created=quiz.game_sessions_created,
            total_rewards_distributed=quiz.total_rewards_distributed,
            platform_fees_generated=quiz.platform_fees_generated,
            is_active=quiz.is_active
        ))

    # Creator stats

    def get_creator_stats(self, creator: str, for_update: bool = False) -> Optional[CreatorStats]:
        """Stats for a creator, or None if the creator has never acted"""
        record = self.session.get(CreatorStatsRecord, creator, with_for_update=for_update)
        if record is None:
            return None
        return CreatorStats(
            creator=record.creator,
            total_quizzes_created=record.total_quizzes_created,
            total_games_hosted=record.total_games_hosted,
            total_rewards_distributed=record.total_rewards_distributed,
            total_platform_fees_paid=record.total_platform_fees_paid,
            average_game_size=record.average_game_size,
            last_activity=record.last_activity
        )

    def put_creator_stats(self, stats: CreatorStats) -> None:
        self._write(CreatorStatsRecord(
            creator=stats.creator,
            total_quizzes_created=stats.total_quizzes_created,
            total_games_hosted=stats.total_games_hosted,
            total_rewards_distributed=stats.total_rewards_distributed,
            total_platform_fees_paid=stats.total_platform_fees_paid,
            average_game_size=stats.average_game_size,
            last_activity=stats.last_activity
        ))

    # Platform singletons

    def get_platform_config(self) -> Optional[PlatformConfig]:
        record = self.session.get(PlatformConfigRecord, SINGLETON_ID)
        if record is None:
            return None
        return PlatformConfig(
            id=record.id,
            fee_percentage=record.fee_percentage,
            treasury_address=record.treasury_address,
            min_fee_threshold=record.min_fee_threshold,
            max_fee_cap=record.max_fee_cap,
            fees_enabled=record.fees_enabled
        )

    def put_platform_config(self, config: PlatformConfig) -> None:
        self._write(PlatformConfigRecord(
            id=config.id,
            fee_percentage=config.fee_percentage,
            treasury_address=config.treasury_address,
            min_fee_threshold=config.min_fee_threshold,
            max_fee_cap=config.max_fee_cap,
            fees_enabled=config.fees_enabled
        ))

    def get_platform_stats(self) -> Optional[PlatformStats]:
        record = self.session.get(PlatformStatsRecord, SINGLETON_ID)
        if record is None:
            return None
        return PlatformStats(
            id=record.id,
            total_quizzes_created=record.total_quizzes_created,
            total_games_hosted=record.total_games_hosted,
            total_rewards_distributed=record.total_rewards_distributed,
            total_platform_fees_collected=record.total_platform_fees_collected
        )

    def put_platform_stats(self, stats: PlatformStats) -> None:
        self._write(PlatformStatsRecord(
            id=stats.id,
            total_quizzes_created=stats.total_quizzes_created,
            total_games_hosted=stats.total_games_hosted,
            total_rewards_distributed=stats.total_rewards_distributed,
            total_platform_fees_collected=stats.total_platform_fees_collected
        ))
