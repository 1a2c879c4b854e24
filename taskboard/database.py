from contextlib import contextmanager

from sqlalchemy import event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from sqlmodel import Session, SQLModel, create_engine

from .config import DATABASE_ECHO, DATABASE_URL

# Import all models to ensure they are registered with SQLModel metadata
from .models import Task  # noqa: F401


def _casefold(value):
    if isinstance(value, str):
        return value.casefold()
    return value


def register_sqlite_functions(dbapi_connection, connection_record):
    """Replace SQLite's ASCII-only lower() so case-insensitive search folds any script."""
    dbapi_connection.create_function("lower", 1, _casefold, deterministic=True)


def make_engine(url: str = DATABASE_URL, **kwargs):
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            echo=DATABASE_ECHO,
            connect_args={"check_same_thread": False},
            **kwargs,
        )
        event.listen(engine, "connect", register_sqlite_functions)
        return engine

    # Postgres and friends: disable pooling for serverless and enable pre-ping
    return create_engine(
        url,
        echo=DATABASE_ECHO,
        pool_pre_ping=True,
        poolclass=NullPool,
        **kwargs,
    )


engine = make_engine()

SessionLocal = sessionmaker(class_=Session, autocommit=False, autoflush=False, bind=engine)


def get_db():
    """Dependency to get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_session():
    """Get a database session outside of FastAPI dependencies.

        with get_session() as session:
            ...
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


def create_tables(bind=None):
    """Create all database tables."""
    SQLModel.metadata.create_all(bind=bind or engine)
