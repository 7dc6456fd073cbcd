"""Domain models for quizzes, reward configuration and aggregate stats"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

# Questions are authored elsewhere and stored as-is
Question = Any

class DistributionType(str, Enum):
    """How a quiz reward pool is split between winners"""
    WINNER_TAKES_ALL = "WinnerTakesAll"
    SPLIT_TOP_THREE = "SplitTopThree"
    CUSTOM = "Custom"

@dataclass(frozen=True)
class WinnerTakesAll:
    """The whole pool goes to the first place"""
    distribution_type = DistributionType.WINNER_TAKES_ALL

@dataclass(frozen=True)
class SplitTopThree:
    """The pool is split between the top three places"""
    distribution_type = DistributionType.SPLIT_TOP_THREE

@dataclass(frozen=True)
class Custom:
    """Creator supplied percentages, one per winning place"""
    prize_percentage: Tuple[int, ...] = ()
    distribution_type = DistributionType.CUSTOM

PrizeDistribution = Union[WinnerTakesAll, SplitTopThree, Custom]

def prize_distribution(distribution_type: Union[DistributionType, str],
                       prize_percentage: Optional[List[int]] = None) -> PrizeDistribution:
    """
    Build a prize distribution from its flat representation.

    Percentages are only kept for Custom distributions; they carry no
    meaning for the other variants and are dropped.
    """
    distribution_type = DistributionType(distribution_type)
    if distribution_type == DistributionType.CUSTOM:
        return Custom(prize_percentage=tuple(prize_percentage or ()))
    if distribution_type == DistributionType.SPLIT_TOP_THREE:
        return SplitTopThree()
    return WinnerTakesAll()

@dataclass(frozen=True)
class RewardSettings:
    """Reward configuration embedded in a quiz"""
    has_rewards: bool = False
    token_address: str = "0x0"
    reward_amount: int = 0
    distribution: PrizeDistribution = field(default_factory=WinnerTakesAll)
    number_of_winners: int = 0
    min_players: int = 0

    @property
    def distribution_type(self) -> DistributionType:
        return self.distribution.distribution_type

    @property
    def prize_percentage(self) -> Tuple[int, ...]:
        if isinstance(self.distribution, Custom):
            return self.distribution.prize_percentage
        return ()

@dataclass(frozen=True)
class QuizDetails:
    """Descriptive quiz metadata"""
    quiz_title: str
    description: str
    category: str
    visibility: bool

@dataclass
class Quiz:
    """
    A created quiz.

    The counters start at zero and is_active starts False; they are
    advanced later by the session and reward subsystems.
    """
    id: int
    quiz_details: QuizDetails
    questions: List[Question]
    default_duration: int
    default_max_points: int
    custom_timing: bool
    creator: str
    reward_settings: RewardSettings
    created_at: int
    game_sessions_created: int = 0
    total_rewards_distributed: int = 0
    platform_fees_generated: int = 0
    is_active: bool = False

@dataclass
class CreatorStats:
    """Cumulative activity for a single quiz creator"""
    creator: str
    total_quizzes_created: int = 0
    total_games_hosted: int = 0
    total_rewards_distributed: int = 0
    total_platform_fees_paid: int = 0
    average_game_size: int = 0
    last_activity: int = 0

@dataclass
class PlatformConfig:
    """Platform wide fee configuration"""
    fee_percentage: int
    treasury_address: str
    min_fee_threshold: int
    max_fee_cap: Optional[int]
    fees_enabled: bool
    id: int = 1

@dataclass
class PlatformStats:
    """Platform wide aggregate counters"""
    total_quizzes_created: int = 0
    total_games_hosted: int = 0
    total_rewards_distributed: int = 0
    total_platform_fees_collected: int = 0
    id: int = 1

@dataclass(frozen=True)
class InvocationContext:
    """Identity and logical time supplied by the execution environment"""
    caller: str
    timestamp: int
