"""
Load the shared exercise catalog.

Run: cd backend && python seed_exercises.py [--file catalog.json]

The JSON file is a list of {"name": ..., "category": ...} objects. Without
--file the built-in starter catalog is loaded. Safe to re-run: existing names
are kept and only their category is refreshed.
"""
import argparse
import json
import logging
from pathlib import Path

from liftlog.db import SessionLocal
from liftlog.repositories.exercise_repo import ExerciseRepository

log = logging.getLogger("seed_exercises")

DEFAULT_EXERCISES = [
    {"name": "Bench Press", "category": "Chest"},
    {"name": "Incline Dumbbell Press", "category": "Chest"},
    {"name": "Push-Up", "category": "Chest"},
    {"name": "Deadlift", "category": "Back"},
    {"name": "Pull-Up", "category": "Back"},
    {"name": "Barbell Row", "category": "Back"},
    {"name": "Back Squat", "category": "Legs"},
    {"name": "Romanian Deadlift", "category": "Legs"},
    {"name": "Walking Lunge", "category": "Legs"},
    {"name": "Overhead Press", "category": "Shoulders"},
    {"name": "Lateral Raise", "category": "Shoulders"},
    {"name": "Barbell Curl", "category": "Arms"},
    {"name": "Triceps Pushdown", "category": "Arms"},
    {"name": "Plank", "category": "Core"},
    {"name": "Hanging Leg Raise", "category": "Core"},
]

def load_entries(path: Path | None) -> list[dict]:
    if path is None:
        return DEFAULT_EXERCISES
    entries = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(entries, list):
        raise ValueError(f"{path}: expected a JSON list")
    for i, e in enumerate(entries):
        if not isinstance(e, dict) or not all(
            isinstance(e.get(k), str) and e[k].strip() for k in ("name", "category")
        ):
            raise ValueError(f"{path}: entry {i} needs a non-empty string name and category")
    return entries

def seed(db, entries) -> int:
    inserted = ExerciseRepository(db).upsert_many(entries)
    log.info("catalog seeded: %d new, %d total in input", inserted, len(entries))
    return inserted

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Seed the exercise catalog")
    parser.add_argument("--file", type=Path, default=None, help="JSON list of {name, category}")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    entries = load_entries(args.file)
    with SessionLocal() as db:
        seed(db, entries)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
