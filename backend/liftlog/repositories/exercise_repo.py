from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Mapping

from sqlalchemy import select

from liftlog.models import Exercise
from liftlog.repositories.base import BaseRepository

@dataclass(slots=True)
class ExerciseOption:
    id: int
    name: str
    category: str

class ExerciseRepository(BaseRepository[Exercise]):
    """Shared catalog; deliberately not scoped to any user."""
    model = Exercise

    # READS
    def list_all(self) -> list[ExerciseOption]:
        # category then name: pickers group by category and expect a stable order
        stmt = select(Exercise.id, Exercise.name, Exercise.category)\
            .order_by(Exercise.category.asc(), Exercise.name.asc())
        return [ExerciseOption(id=r.id, name=r.name, category=r.category) for r in self.db.execute(stmt)]

    # WRITES (admin seeding only)
    def upsert_many(self, entries: Iterable[Mapping[str, str]]) -> int:
        """Insert unknown names, refresh the category of known ones. Returns rows inserted."""
        existing = {e.name: e for e in self.db.execute(select(Exercise)).scalars()}
        inserted = 0
        for entry in entries:
            name, category = entry["name"].strip(), entry["category"].strip()
            current = existing.get(name)
            if current is None:
                current = existing[name] = Exercise(name=name, category=category)
                self.db.add(current)
                inserted += 1
            elif current.category != category:
                current.category = category
                current.updated_at = datetime.now(timezone.utc)
        self.db.commit()
        return inserted
