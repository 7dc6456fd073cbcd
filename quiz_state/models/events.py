"""Domain events consumed by external indexers"""
from typing import Optional
from pydantic import BaseModel, ConfigDict

class QuizCreated(BaseModel):
    """
    Emitted once per durably created quiz.

    Attributes:
        title: Quiz title at creation time
        creator: Actor identifier of the creator
        timestamp: Logical timestamp of the creation
        quiz_id: Identifier allocated to the quiz
        sequence: Position in the event log, assigned on append
    """
    model_config = ConfigDict(frozen=True)

    title: str
    creator: str
    timestamp: int
    quiz_id: Optional[int] = None
    sequence: Optional[int] = None
