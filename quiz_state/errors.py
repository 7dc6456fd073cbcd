"""Errors raised by the quiz creation transaction"""
from typing import Dict


class QuizStateError(Exception):
    """
    Base exception for rejected quiz state operations.

    Every subclass is raised before any state is touched, so catching one
    means the store is exactly as it was before the call.
    """
    kind = "QuizStateError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        """Structured failure value returned to callers"""
        return {'kind': self.kind, 'message': self.message}


class UnauthorizedCreatorError(QuizStateError):
    """Declared creator does not match the invoking actor"""
    kind = "UnauthorizedCreator"


class InvalidQuestionCountError(QuizStateError):
    """Question sequence length outside the allowed range"""
    kind = "InvalidQuestionCount"


class InvalidRewardAmountError(QuizStateError):
    """Rewards enabled with a zero reward amount"""
    kind = "InvalidRewardAmount"


class InvalidMinPlayersError(QuizStateError):
    """Rewards enabled with a zero minimum player count"""
    kind = "InvalidMinPlayers"


class InvalidPrizeDistributionError(QuizStateError):
    """Custom prize percentages do not add up to 100"""
    kind = "InvalidPrizeDistribution"
