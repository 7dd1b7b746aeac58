from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from liftlog.settings import Settings


def test_database_url_built_from_parts(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    s = Settings(_env_file=None, DB_HOST="pg", DB_PORT=6543, DB_USER="u", DB_PASSWORD="p", DB_NAME="lifts")
    assert s.DATABASE_URL == "postgresql+psycopg://u:p@pg:6543/lifts"


def test_database_url_env_override(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///./dev.db")
    assert Settings(_env_file=None).DATABASE_URL == "sqlite+pysqlite:///./dev.db"


def test_timezone_from_env(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Europe/Berlin")
    assert Settings(_env_file=None).zone == ZoneInfo("Europe/Berlin")


def test_unknown_timezone_rejected(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "Nowhere/Special")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_zone_directory_rejected(monkeypatch):
    monkeypatch.setenv("TIMEZONE", "America")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
