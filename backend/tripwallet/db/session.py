"""
Database session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from tripwallet.core.config import settings
from tripwallet.db.base import Base

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    # Request handlers run in a threadpool
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
    connect_args=connect_args
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Session:
    """Dependency for getting database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None):
    """Initialize database tables."""
    # Import models so SQLAlchemy registers them on Base.metadata
    import tripwallet.models  # noqa: F401
    Base.metadata.create_all(bind=bind or engine)
