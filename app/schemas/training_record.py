"""
Training record API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TrainingRecordCreate(BaseModel):
    """Schema for logging a training session."""

    date: datetime.date = Field(..., description="Calendar day of the session")
    rpe: Optional[float] = Field(None, ge=0, le=10, description="Session RPE (0-10)")
    duration_min: Optional[float] = Field(None, ge=0, le=1440, description="Duration in minutes")
    load: Optional[float] = Field(None, ge=0, description="Precomputed load (defaults to RPE x duration)")


class TrainingRecordResponse(BaseModel):
    """Schema for training record in API responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    date: datetime.date
    rpe: Optional[float]
    duration_min: Optional[float]
    load: Optional[float]
    created_at: datetime.datetime
