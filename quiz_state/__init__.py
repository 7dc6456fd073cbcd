"""Transactional state layer for quiz creation and aggregate stats"""
from quiz_state.errors import (
    QuizStateError,
    UnauthorizedCreatorError,
    InvalidQuestionCountError,
    InvalidRewardAmountError,
    InvalidMinPlayersError,
    InvalidPrizeDistributionError,
)
from quiz_state.models.quiz import (
    InvocationContext,
    QuizDetails,
    RewardSettings,
    WinnerTakesAll,
    SplitTopThree,
    Custom,
    Quiz,
    CreatorStats,
)
from quiz_state.services.quiz import QuizService
from quiz_state.services.stats import CreatorAction
from quiz_state.validation import validate_reward_settings

__all__ = [
    'QuizStateError',
    'UnauthorizedCreatorError',
    'InvalidQuestionCountError',
    'InvalidRewardAmountError',
    'InvalidMinPlayersError',
    'InvalidPrizeDistributionError',
    'InvocationContext',
    'QuizDetails',
    'RewardSettings',
    'WinnerTakesAll',
    'SplitTopThree',
    'Custom',
    'Quiz',
    'CreatorStats',
    'QuizService',
    'CreatorAction',
    'validate_reward_settings',
]
