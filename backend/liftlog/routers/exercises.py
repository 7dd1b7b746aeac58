from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from liftlog.db import get_db
from liftlog.schemas.exercise import ExerciseRead
from liftlog.repositories.exercise_repo import ExerciseRepository
from liftlog.deps.auth import get_current_owner_id

router = APIRouter(prefix="/exercises", tags=["exercises"])

# Catalog is shared, but only signed-in users get to browse it
@router.get("", response_model=list[ExerciseRead], dependencies=[Depends(get_current_owner_id)])
def list_exercises(db: Session = Depends(get_db)):
    return ExerciseRepository(db).list_all()
