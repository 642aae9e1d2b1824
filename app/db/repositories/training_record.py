"""
Training record repository.

Handles database operations for :class:`TrainingRecord`, including the
lookback query that feeds the workload series.
"""

import datetime
from typing import Optional

from sqlmodel import Session, select

from app.models.training_record import TrainingRecord


class TrainingRecordRepository:
    """Repository for TrainingRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: TrainingRecord) -> TrainingRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[TrainingRecord]:
        return self.session.get(TrainingRecord, entry_id)

    def get_by_user_date_range(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingRecord]:
        statement = (select(TrainingRecord).where(TrainingRecord.user_id == user_id, TrainingRecord.date >= start,
                                                  TrainingRecord.date <= end, ).order_by(TrainingRecord.date,
                                                                                         TrainingRecord.id))
        return list(self.session.exec(statement).all())

    def get_by_user_since(self, user_id: int, start: datetime.date) -> list[TrainingRecord]:
        """All records of a user from *start* (inclusive), oldest first."""
        statement = (select(TrainingRecord).where(TrainingRecord.user_id == user_id, TrainingRecord.date >= start, )
                     .order_by(TrainingRecord.date, TrainingRecord.id))
        return list(self.session.exec(statement).all())

    def get_last_date(self, user_id: int) -> Optional[datetime.date]:
        """Most recent training day of a user, regardless of any lookback window."""
        statement = (select(TrainingRecord.date).where(TrainingRecord.user_id == user_id)
                     .order_by(TrainingRecord.date.desc()).limit(1))
        return self.session.exec(statement).first()

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
