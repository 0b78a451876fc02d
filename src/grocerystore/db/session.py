"""Database engine and session management for GroceryStore."""
from contextlib import contextmanager
from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from grocerystore.config.settings import get_settings
from grocerystore.models import Base

MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine for the configured database.

    Args:
        url: Database URL (default: settings.DB_URL)
        echo: Echo SQL statements (default: settings.DB_ECHO)

    Returns:
        Engine: The SQLAlchemy engine
    """
    settings = get_settings()
    url = url or settings.DB_URL
    echo = settings.DB_ECHO if echo is None else echo

    kwargs = {}
    if url.startswith("sqlite"):
        # Streamlit reruns scripts on worker threads
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in MEMORY_URLS:
            # One shared connection, otherwise each session sees an empty db
            kwargs["poolclass"] = StaticPool

    return create_engine(url, echo=echo, **kwargs)


def init_db(engine: Engine) -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(engine)


def get_session_factory(engine: Engine) -> sessionmaker:
    """Create a session factory bound to the engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


@contextmanager
def session_scope(factory: sessionmaker) -> Generator[Session, None, None]:
    """Provide a transactional scope around a series of operations."""
    session = factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
