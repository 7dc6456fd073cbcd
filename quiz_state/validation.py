"""Reward settings validation"""
from quiz_state.errors import (
    InvalidRewardAmountError,
    InvalidMinPlayersError,
    InvalidPrizeDistributionError,
)
from quiz_state.models.quiz import RewardSettings, Custom

# Custom percentages are unsigned 8-bit values that must add up to this
PRIZE_PERCENTAGE_TOTAL = 100

# Upper bounds of the stored unsigned integer widths
MAX_UINT8 = 2 ** 8 - 1
MAX_UINT32 = 2 ** 32 - 1
MAX_UINT256 = 2 ** 256 - 1

def validate_reward_settings(settings: RewardSettings) -> None:
    """
    Check a reward configuration, raising on the first broken rule.

    Nothing is checked when rewards are disabled. Only Custom distributions
    carry percentages, so WinnerTakesAll and SplitTopThree skip the sum check.

    Raises:
        InvalidRewardAmountError: reward_amount is zero or above uint256
        InvalidMinPlayersError: min_players is zero or above uint32
        InvalidPrizeDistributionError: number_of_winners above uint8, or
            Custom percentages do not sum to 100
    """
    if not settings.has_rewards:
        return

    if settings.reward_amount <= 0:
        raise InvalidRewardAmountError("Reward amount must be greater than zero")
    if settings.reward_amount > MAX_UINT256:
        raise InvalidRewardAmountError("Reward amount exceeds the uint256 range")

    if settings.min_players <= 0:
        raise InvalidMinPlayersError("Minimum players must be greater than zero")
    if settings.min_players > MAX_UINT32:
        raise InvalidMinPlayersError("Minimum players exceeds the uint32 range")

    if settings.number_of_winners < 0 or settings.number_of_winners > MAX_UINT8:
        raise InvalidPrizeDistributionError(
            f"Number of winners {settings.number_of_winners} is outside 0-{MAX_UINT8}"
        )

    if isinstance(settings.distribution, Custom):
        percentages = settings.distribution.prize_percentage
        for percentage in percentages:
            if percentage < 0 or percentage > MAX_UINT8:
                raise InvalidPrizeDistributionError(
                    f"Prize percentage {percentage} is outside 0-{MAX_UINT8}"
                )
        total = sum(percentages)
        if total != PRIZE_PERCENTAGE_TOTAL:
            raise InvalidPrizeDistributionError(
                f"Prize percentages must sum to {PRIZE_PERCENTAGE_TOTAL}, got {total}"
            )
