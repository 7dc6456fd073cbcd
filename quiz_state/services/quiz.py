"""Quiz creation transaction and the other state entry points"""
import logging
import threading
from typing import List, Optional, Sequence, Union

from quiz_state.config import Settings, settings as default_settings
from quiz_state.db import Database
from quiz_state.errors import UnauthorizedCreatorError, InvalidQuestionCountError, QuizStateError
from quiz_state.models.events import QuizCreated
from quiz_state.models.quiz import (
    InvocationContext,
    Question,
    Quiz,
    QuizDetails,
    RewardSettings,
    CreatorStats,
    PlatformConfig,
    PlatformStats,
)
from quiz_state.services.allocator import IdentifierAllocator
from quiz_state.services.events import EventLog
from quiz_state.services.platform import initialize_platform_config
from quiz_state.services.stats import CreatorAction, CreatorStatsUpdater
from quiz_state.services.storage import StateStore
from quiz_state.validation import validate_reward_settings

logger = logging.getLogger(__name__)

class QuizService:
    """
    Entry points of the quiz state layer.

    Each public method runs as one serialized transaction: invocations on the
    same service never interleave, and every write of a method commits or
    rolls back as a unit.
    """

    def __init__(self, database: Database, settings: Optional[Settings] = None):
        if not database.is_initialized:
            raise RuntimeError("Database not initialized. Call init() first.")
        self.database = database
        self.settings = settings or default_settings
        self._lock = threading.RLock()

    def _check_question_count(self, questions: Sequence[Question]) -> None:
        count = len(questions)
        if count < self.settings.MIN_QUESTIONS or count > self.settings.MAX_QUESTIONS:
            raise InvalidQuestionCountError(
                f"Quiz must have between {self.settings.MIN_QUESTIONS} and "
                f"{self.settings.MAX_QUESTIONS} questions, got {count}"
            )

    def create_quiz(
            self,
            context: InvocationContext,
            details: QuizDetails,
            questions: Sequence[Question],
            reward_settings: RewardSettings,
            duration: int,
            max_points: int,
            custom_timing: bool,
            declared_creator: str
    ) -> Quiz:
        """
        Create a quiz on behalf of the invoking actor.

        Args:
            context: Invoking actor and logical time from the environment
            details: Title, description, category and visibility
            questions: Opaque question entries, stored as given
            reward_settings: Reward configuration to validate and embed
            duration: Default question duration
            max_points: Default maximum points per question
            custom_timing: Whether questions carry their own timing
            declared_creator: Creator named in the request payload

        Returns:
            Quiz: The created quiz with its allocated id

        Raises:
            UnauthorizedCreatorError: declared_creator is not the caller
            InvalidQuestionCountError: question count out of range
            InvalidRewardAmountError, InvalidMinPlayersError,
            InvalidPrizeDistributionError: reward settings rejected
        """
        caller = context.caller
        now = context.timestamp
        try:
            if declared_creator != caller:
                raise UnauthorizedCreatorError(
                    f"Declared creator {declared_creator} does not match caller {caller}"
                )
            self._check_question_count(questions)
            validate_reward_settings(reward_settings)
        except QuizStateError as e:
            logger.warning(f"Rejected quiz creation by {caller}: {e.kind}: {e.message}")
            raise

        with self._lock, self.database.session() as session:
            store = StateStore(session)
            quiz_id = IdentifierAllocator(store).allocate_next_id()

            quiz = Quiz(
                id=quiz_id,
                quiz_details=details,
                questions=list(questions),
                default_duration=duration,
                default_max_points=max_points,
                custom_timing=custom_timing,
                creator=caller,
                reward_settings=reward_settings,
                created_at=now
            )
            store.put_quiz(quiz)

            CreatorStatsUpdater(store).update_creator_stats(caller, CreatorAction.QUIZ_CREATED, now)

            EventLog(session).append(QuizCreated(
                title=details.quiz_title,
                creator=caller,
                timestamp=now,
                quiz_id=quiz_id
            ))

        logger.info(f"Created quiz {quiz_id} '{details.quiz_title}' for {caller}")
        return quiz

    def update_creator_stats(self, context: InvocationContext, action: Union[CreatorAction, str]) -> CreatorStats:
        """Record an action by the invoking actor in its own transaction"""
        with self._lock, self.database.session() as session:
            return CreatorStatsUpdater(StateStore(session)).update_creator_stats(
                context.caller, action, context.timestamp
            )

    def initialize_platform(self) -> bool:
        """Idempotently write the default platform config and stats"""
        with self._lock, self.database.session() as session:
            return initialize_platform_config(StateStore(session), self.settings)

    # Reads

    def get_quiz(self, quiz_id: int) -> Optional[Quiz]:
        with self.database.session() as session:
            return StateStore(session).get_quiz(quiz_id)

    def current_quiz_id(self) -> int:
        """Last allocated quiz id, zero before the first creation"""
        with self.database.session() as session:
            return StateStore(session).get_quiz_counter()

    def get_creator_stats(self, creator: str) -> Optional[CreatorStats]:
        with self.database.session() as session:
            return StateStore(session).get_creator_stats(creator)

    def get_platform_config(self) -> Optional[PlatformConfig]:
        with self.database.session() as session:
            return StateStore(session).get_platform_config()

    def get_platform_stats(self) -> Optional[PlatformStats]:
        with self.database.session() as session:
            return StateStore(session).get_platform_stats()

    def list_events(self) -> List[QuizCreated]:
        with self.database.session() as session:
            return EventLog(session).list()
