from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from liftlog.models import Exercise, Workout, WorkoutExercise, WorkoutSet
from liftlog.repositories.workout_repo import WorkoutRepository
from conftest import owner, add_exercises

T = datetime(2025, 3, 10, 9, tzinfo=timezone.utc)


def _count(db, model):
    return db.execute(select(func.count()).select_from(model)).scalar_one()


def _workout_with_sets(db):
    wid = WorkoutRepository(db).create(owner(), name="Pull", started_at=T)
    (ex,) = add_exercises(db, (f"Chin-Up {wid}", "Back"))
    link = WorkoutExercise(workout_id=wid, exercise_id=ex.id, order=0)
    db.add(link)
    db.flush()
    db.add_all([
        WorkoutSet(workout_exercise_id=link.id, set_number=1, weight=Decimal("10.50"), reps=8),
        WorkoutSet(workout_exercise_id=link.id, set_number=2, weight=None, reps=6),
    ])
    db.commit()
    return wid, ex.id


def test_weight_keeps_two_decimals(db):
    _workout_with_sets(db)
    weights = db.execute(select(WorkoutSet.weight).order_by(WorkoutSet.set_number)).scalars().all()
    assert weights[0] == Decimal("10.50")
    assert weights[1] is None


def test_deleting_workout_cascades_in_database(db):
    wid, _ = _workout_with_sets(db)
    db.execute(delete(Workout).where(Workout.id == wid))
    db.commit()
    assert _count(db, WorkoutExercise) == 0
    assert _count(db, WorkoutSet) == 0


def test_deleting_workout_through_orm_cascades(db):
    wid, _ = _workout_with_sets(db)
    db.delete(db.get(Workout, wid))
    db.commit()
    assert _count(db, WorkoutExercise) == 0
    assert _count(db, WorkoutSet) == 0


def test_deleting_link_cascades_to_sets(db):
    _workout_with_sets(db)
    db.execute(delete(WorkoutExercise))
    db.commit()
    assert _count(db, WorkoutSet) == 0
    assert _count(db, Workout) == 1


def test_referenced_exercise_cannot_be_deleted(db):
    _, ex_id = _workout_with_sets(db)
    with pytest.raises(IntegrityError):
        db.execute(delete(Exercise).where(Exercise.id == ex_id))
        db.commit()
    db.rollback()
    assert db.get(Exercise, ex_id) is not None


def test_referenced_exercise_cannot_be_deleted_through_orm(db):
    _, ex_id = _workout_with_sets(db)
    db.delete(db.get(Exercise, ex_id))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()
    assert _count(db, WorkoutExercise) == 1


def test_unreferenced_exercise_can_be_deleted(db):
    (ex,) = add_exercises(db, ("Lonely", "Misc"))
    db.delete(ex)
    db.commit()
    assert _count(db, Exercise) == 0


def test_exercise_name_is_unique(db):
    add_exercises(db, ("Squat", "Legs"))
    with pytest.raises(IntegrityError):
        add_exercises(db, ("Squat", "Other"))
    db.rollback()


@pytest.mark.parametrize("name, category", [("", "Legs"), ("   ", "Legs"), ("Squat", ""), ("Squat", "  ")])
def test_exercise_name_and_category_must_not_be_blank(db, name, category):
    with pytest.raises(IntegrityError):
        add_exercises(db, (name, category))
    db.rollback()
    assert _count(db, Exercise) == 0
