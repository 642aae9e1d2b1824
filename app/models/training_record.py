"""
Training record database model.

One row per logged session.  ``load`` is optional: when it is not
stored, the session load is derived from ``rpe × duration_min``
(sRPE) by the workload engine.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class TrainingRecord(SQLModel, table=True):
    """A single training session logged by an athlete."""

    __tablename__ = "training_records"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.date = Field(nullable=False, index=True)

    rpe: Optional[float] = Field(default=None)
    duration_min: Optional[float] = Field(default=None)
    load: Optional[float] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
