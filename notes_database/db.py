import os
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from dotenv import load_dotenv

DEFAULT_DATABASE_URL = "sqlite:///./notes.db"


# PUBLIC_INTERFACE
def get_database_url():
    """
    Retrieves the database URL from the environment variable DATABASE_URL,
    falling back to a local sqlite file.
    """
    load_dotenv()
    return os.getenv("DATABASE_URL") or DEFAULT_DATABASE_URL


# PUBLIC_INTERFACE
def make_engine(database_url: str):
    """
    Creates an engine for the given URL.

    sqlite connections are shared across the request threadpool, and an
    in-memory sqlite database must stay on a single connection to survive.
    """
    kwargs = {"future": True, "echo": False}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
    return create_engine(database_url, **kwargs)


# PUBLIC_INTERFACE
def make_session_factory(engine):
    """Returns a session factory bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
