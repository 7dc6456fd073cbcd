"""Append-only domain event log"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError

from quiz_state.models.db import QuizCreatedRecord
from quiz_state.models.events import QuizCreated

logger = logging.getLogger(__name__)

class EventLog:
    """Writes QuizCreated events inside the caller's transaction"""

    def __init__(self, session: Session):
        if session is None:
            raise ValueError("Database session is required")
        self.session = session

    def append(self, event: QuizCreated) -> QuizCreated:
        """Append an event and return it with its log sequence number"""
        record = QuizCreatedRecord(
            quiz_id=event.quiz_id,
            title=event.title,
            creator=event.creator,
            timestamp=event.timestamp
        )
        try:
            self.session.add(record)
            self.session.flush()
        except SQLAlchemyError as e:
            logger.error(f"Database error appending QuizCreated event: {e}")
            raise
        return event.model_copy(update={'sequence': record.sequence})

    def list(self) -> List[QuizCreated]:
        """All events in append order"""
        records = self.session.execute(
            select(QuizCreatedRecord).order_by(QuizCreatedRecord.sequence)
        ).scalars().all()
        return [
            QuizCreated(
                title=r.title,
                creator=r.creator,
                timestamp=r.timestamp,
                quiz_id=r.quiz_id,
                sequence=r.sequence
            )
            for r in records
        ]
