# liftlog/repositories/base.py
from __future__ import annotations
from typing import Generic, Optional, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    def __init__(self, db: Session):
        self.db = db

    def add_and_commit(self, entity: T) -> T:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def commit_returning_id(self, stmt) -> Optional[int]:
        """Run a single UPDATE ... RETURNING id; None when no row matched."""
        row_id = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        return row_id
