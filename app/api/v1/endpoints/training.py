"""
Training record endpoints.

Log, list and delete an athlete's training sessions.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.training_record import TrainingRecordCreate, TrainingRecordResponse
from app.services.training_record_service import TrainingRecordService

router = APIRouter()


@router.post("/{athlete_id}/training-records", summary="Log a training session.",
             response_model=TrainingRecordResponse, status_code=status.HTTP_201_CREATED, )
def create_record(athlete_id: int, data: TrainingRecordCreate, db: Session = Depends(get_db), ):
    service = TrainingRecordService(db)
    return service.create(athlete_id, data)


@router.get("/{athlete_id}/training-records", summary="List training sessions with optional date range.",
            response_model=list[TrainingRecordResponse], )
def list_records(athlete_id: int, start: Optional[datetime.date] = Query(None, description="Range start (inclusive)"),
                 end: Optional[datetime.date] = Query(None, description="Range end (inclusive)"),
                 db: Session = Depends(get_db), ):
    service = TrainingRecordService(db)
    if start and end:
        return service.get_range(athlete_id, start, end)
    # Default: last 30 days
    end_date = datetime.date.today()
    start_date = end_date - datetime.timedelta(days=30)
    return service.get_range(athlete_id, start_date, end_date)


@router.delete("/{athlete_id}/training-records/{record_id}", summary="Delete a training session.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_record(athlete_id: int, record_id: int, db: Session = Depends(get_db), ):
    service = TrainingRecordService(db)
    service.delete(athlete_id, record_id)
