from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, String, DateTime, CheckConstraint, func
from liftlog.db import Base

class Exercise(Base):
    """Shared reference catalog entry; not owned by any user."""
    __tablename__ = "exercises"
    __table_args__ = (
        CheckConstraint("length(trim(name)) > 0", name="ck_exercises_name_not_blank"),
        CheckConstraint("length(trim(category)) > 0", name="ck_exercises_category_not_blank"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # DB-level RESTRICT decides whether a referenced exercise may go
    workout_exercises = relationship("WorkoutExercise", back_populates="exercise", passive_deletes="all")
