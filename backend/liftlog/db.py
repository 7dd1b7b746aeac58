from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from .settings import get_settings

settings = get_settings()

def make_engine(url: str, **kwargs) -> Engine:
    """Create an engine; SQLite connections get FK enforcement switched on."""
    if url.startswith("sqlite"):
        eng = create_engine(url, **kwargs)

        @event.listens_for(eng, "connect")
        def _fk_pragma(dbapi_conn, _record):
            # SQLite ignores ON DELETE CASCADE/RESTRICT without this
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON")
            cur.close()

        return eng
    return create_engine(url, pool_pre_ping=True, **kwargs)

# Create the SQLAlchemy engine
engine = make_engine(settings.DATABASE_URL)

# Define the base class that all models should inherit from
class Base(DeclarativeBase):
    pass

# Session factory
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

# Dependency for FastAPI routes
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
