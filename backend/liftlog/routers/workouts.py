from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from liftlog.db import get_db
from liftlog.deps.auth import get_current_owner_id
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.schemas.workout import (
    WorkoutCompletion,
    WorkoutCreate,
    WorkoutExercisesUpdate,
    WorkoutId,
    WorkoutRead,
    WorkoutUpdate,
)
from liftlog.settings import get_settings
from liftlog.timeutil import to_utc

router = APIRouter(prefix="/workouts", tags=["workouts"])

# Same answer for "no such workout" and "someone else's workout"
NOT_FOUND = "Workout not found"

def request_zone(tz: str | None = Query(None, description="IANA zone, e.g. Europe/London")) -> ZoneInfo:
    if tz is None:
        return get_settings().zone
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        # OSError: a zone directory such as "America" instead of a zone file
        raise HTTPException(status_code=422, detail="Unknown timezone")

def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)

def _out_of_range() -> HTTPException:
    return HTTPException(status_code=422, detail="Date out of range")

def _utc(value: datetime, zone: ZoneInfo) -> datetime:
    # first/last representable days cannot be shifted to UTC
    try:
        return to_utc(value, zone)
    except OverflowError:
        raise _out_of_range()

@router.get("", response_model=list[WorkoutRead])
def list_workouts_for_day(
    day: date | None = Query(None, alias="date"),
    zone: ZoneInfo = Depends(request_zone),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    if day is None:
        day = datetime.now(zone).date()
    try:
        return WorkoutRepository(db).find_by_date(owner_id, day, tz=zone)
    except OverflowError:
        raise _out_of_range()

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    workout = WorkoutRepository(db).find_by_id(owner_id, workout_id)
    if workout is None:
        raise _not_found()
    return workout

@router.post("", response_model=WorkoutId, status_code=status.HTTP_201_CREATED)
def create_workout(
    payload: WorkoutCreate,
    zone: ZoneInfo = Depends(request_zone),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    new_id = WorkoutRepository(db).create(
        owner_id, name=payload.name, started_at=_utc(payload.started_at, zone)
    )
    return WorkoutId(id=new_id)

@router.put("/{workout_id}", response_model=WorkoutId)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    zone: ZoneInfo = Depends(request_zone),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    updated = WorkoutRepository(db).update(
        owner_id, workout_id, name=payload.name, started_at=_utc(payload.started_at, zone)
    )
    if updated is None:
        raise _not_found()
    return WorkoutId(id=updated)

@router.put("/{workout_id}/completion", response_model=WorkoutId)
def set_completion(
    workout_id: int,
    payload: WorkoutCompletion,
    zone: ZoneInfo = Depends(request_zone),
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    completed_at = _utc(payload.completed_at, zone) if payload.completed_at else None
    updated = WorkoutRepository(db).complete(owner_id, workout_id, completed_at)
    if updated is None:
        raise _not_found()
    return WorkoutId(id=updated)

@router.put("/{workout_id}/exercises", response_model=WorkoutId)
def replace_exercises(
    workout_id: int,
    payload: WorkoutExercisesUpdate,
    db: Session = Depends(get_db),
    owner_id: str = Depends(get_current_owner_id),
):
    try:
        updated = WorkoutRepository(db).set_exercises(owner_id, workout_id, payload.exercise_ids)
    except IntegrityError:
        raise HTTPException(status_code=422, detail="Unknown exercise")
    if updated is None:
        raise _not_found()
    return WorkoutId(id=updated)
