"""Request payloads accepted by the CLI and other callers"""
from typing import Any, List
from pydantic import BaseModel, Field

from quiz_state.models.quiz import DistributionType, QuizDetails, RewardSettings, prize_distribution

class QuizDetailsPayload(BaseModel):
    """Quiz metadata as submitted"""
    quiz_title: str
    description: str = ""
    category: str = ""
    visibility: bool = True

    def to_domain(self) -> QuizDetails:
        return QuizDetails(
            quiz_title=self.quiz_title,
            description=self.description,
            category=self.category,
            visibility=self.visibility
        )

class RewardSettingsPayload(BaseModel):
    """
    Flat reward configuration as submitted.

    prize_percentage is only meaningful for Custom and is discarded for the
    other distribution types when converted.
    """
    has_rewards: bool = False
    token_address: str = "0x0"
    reward_amount: int = Field(0, ge=0, lt=2 ** 256)
    distribution_type: DistributionType = DistributionType.WINNER_TAKES_ALL
    number_of_winners: int = Field(0, ge=0, le=255)
    prize_percentage: List[int] = Field(default_factory=list)
    min_players: int = Field(0, ge=0, lt=2 ** 32)

    def to_domain(self) -> RewardSettings:
        return RewardSettings(
            has_rewards=self.has_rewards,
            token_address=self.token_address,
            reward_amount=self.reward_amount,
            distribution=prize_distribution(self.distribution_type, self.prize_percentage),
            number_of_winners=self.number_of_winners,
            min_players=self.min_players
        )

class CreateQuizPayload(BaseModel):
    """Everything needed for one create_quiz call, except the caller"""
    quiz_details: QuizDetailsPayload
    questions: List[Any]
    reward_settings: RewardSettingsPayload = Field(default_factory=RewardSettingsPayload)
    default_duration: int = Field(30, ge=0)
    default_max_points: int = Field(1000, ge=0)
    custom_timing: bool = False
    creator: str
