"""
Owner-scoped workout data access.

Every statement here carries ``Workout.owner_id == owner_id`` next to whatever
else it filters on. A workout that exists but belongs to somebody else is
reported exactly like one that does not exist: ``None`` (or an empty list),
from the same single query, so callers cannot probe ids.

Nothing in this module logs, retries or catches storage errors.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import date, datetime, timezone, tzinfo
from typing import Iterable, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import IntegrityError

from liftlog.models import Exercise, Workout, WorkoutExercise
from liftlog.repositories.base import BaseRepository
from liftlog.settings import get_settings
from liftlog.timeutil import as_utc, local_day_window, to_utc


@dataclass(slots=True)
class WorkoutExerciseEntry:
    id: int  # catalog exercise id
    name: str
    order: int


@dataclass(slots=True)
class WorkoutWithExercises:
    id: int
    name: Optional[str]
    started_at: datetime
    completed_at: Optional[datetime]  # None while in progress
    exercises: list[WorkoutExerciseEntry] = field(default_factory=list)


def normalize_name(name: Optional[str]) -> Optional[str]:
    """Blank names are stored as NULL, never as ''. Other names are kept as given."""
    if name is None or not name.strip():
        return None
    return name


class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def _nested_stmt(self):
        # workout -> links -> catalog exercise in one SELECT; one row per link,
        # or a single row with NULL link columns for a workout without exercises
        return (
            select(
                Workout.id,
                Workout.name,
                Workout.started_at,
                Workout.completed_at,
                Exercise.id.label("exercise_id"),
                Exercise.name.label("exercise_name"),
                WorkoutExercise.order.label("exercise_order"),
            )
            .outerjoin(WorkoutExercise, WorkoutExercise.workout_id == Workout.id)
            .outerjoin(Exercise, Exercise.id == WorkoutExercise.exercise_id)
        )

    @staticmethod
    def _assemble(rows) -> list[WorkoutWithExercises]:
        out: dict[int, WorkoutWithExercises] = {}
        for row in rows:
            w = out.get(row.id)
            if w is None:
                w = out[row.id] = WorkoutWithExercises(
                    id=row.id,
                    name=row.name,
                    started_at=as_utc(row.started_at),
                    completed_at=as_utc(row.completed_at),
                )
            if row.exercise_id is not None:
                w.exercises.append(
                    WorkoutExerciseEntry(id=row.exercise_id, name=row.exercise_name, order=row.exercise_order)
                )
        return list(out.values())

    # READS
    def find_by_date(
        self, owner_id: str, day: date | datetime, *, tz: Optional[tzinfo] = None
    ) -> list[WorkoutWithExercises]:
        """Workouts of ``owner_id`` started on the local calendar day containing ``day``."""
        if tz is None and not (isinstance(day, datetime) and day.tzinfo is not None):
            tz = get_settings().zone
        start, end = local_day_window(day, tz)
        stmt = (
            self._nested_stmt()
            .where(
                Workout.owner_id == owner_id,
                Workout.started_at >= start,
                Workout.started_at < end,
            )
            .order_by(
                Workout.started_at.asc(),
                Workout.id.asc(),
                WorkoutExercise.order.asc(),
                WorkoutExercise.id.asc(),
            )
        )
        return self._assemble(self.db.execute(stmt))

    def find_by_id(self, owner_id: str, workout_id: int) -> Optional[WorkoutWithExercises]:
        stmt = (
            self._nested_stmt()
            .where(Workout.id == workout_id, Workout.owner_id == owner_id)
            .order_by(WorkoutExercise.order.asc(), WorkoutExercise.id.asc())
        )
        found = self._assemble(self.db.execute(stmt))
        return found[0] if found else None

    # WRITES
    def create(self, owner_id: str, *, name: Optional[str], started_at: datetime) -> int:
        w = Workout(owner_id=owner_id, name=normalize_name(name), started_at=to_utc(started_at))
        return self.add_and_commit(w).id

    def update(
        self, owner_id: str, workout_id: int, *, name: Optional[str], started_at: datetime
    ) -> Optional[int]:
        stmt = (
            update(Workout)
            .where(Workout.id == workout_id, Workout.owner_id == owner_id)
            .values(
                name=normalize_name(name),
                started_at=to_utc(started_at),
                updated_at=datetime.now(timezone.utc),
            )
            .returning(Workout.id)
        )
        return self.commit_returning_id(stmt)

    def complete(
        self, owner_id: str, workout_id: int, completed_at: Optional[datetime]
    ) -> Optional[int]:
        """Set (or clear, with None) the completion timestamp."""
        stmt = (
            update(Workout)
            .where(Workout.id == workout_id, Workout.owner_id == owner_id)
            .values(
                completed_at=to_utc(completed_at) if completed_at is not None else None,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(Workout.id)
        )
        return self.commit_returning_id(stmt)

    def set_exercises(self, owner_id: str, workout_id: int, exercise_ids: Iterable[int]) -> Optional[int]:
        """
        Replace the workout's exercise selection; list position becomes ``order``.

        Runs as one transaction. An unknown exercise id raises IntegrityError
        from the FK and leaves the previous selection in place.
        """
        owned = self.db.execute(
            select(Workout.id)
            .where(Workout.id == workout_id, Workout.owner_id == owner_id)
            .with_for_update()
        ).scalar_one_or_none()
        if owned is None:
            self.db.rollback()
            return None

        rows = [
            {"workout_id": owned, "exercise_id": ex_id, "order": pos}
            for pos, ex_id in enumerate(exercise_ids)
        ]
        try:
            self.db.execute(delete(WorkoutExercise).where(WorkoutExercise.workout_id == owned))
            if rows:
                self.db.execute(insert(WorkoutExercise), rows)
            self.db.execute(
                update(Workout).where(Workout.id == owned).values(updated_at=datetime.now(timezone.utc))
            )
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise
        return owned
