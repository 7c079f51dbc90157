"""
Portfolio Backend — Database Engine & Declarative Base
========================================================

What:  Async SQLAlchemy engine construction and the ORM base class.
Why:   The store needs exactly one connection handle for the whole process;
       building it here keeps driver and pool details out of the data layer.
How:   create_engine() turns Settings into an AsyncEngine. For server
       databases the pool is capped at a single connection, so statements
       from concurrent requests queue on that one handle.
Who:   PortfolioStore (store.py) and the test fixtures.
When:  Once, from the application factory. Creating the engine does not
       connect; the first connection is made by the startup probe.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from portfolio_api.config import Settings


class Base(DeclarativeBase):
    """Base class for the skills, projects and messages models."""
    pass


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Build the async engine for the configured store.

    Pool configuration (server databases):
        pool_size=1, max_overflow=0: one persistent connection, no pooling
        pool_pre_ping=False:         no reconnection logic; a dropped
                                     connection surfaces as a query error

    SQLite (tests) keeps the dialect's default pool, which rejects the
    sizing arguments.
    """
    engine_kwargs = {
        # Echo SQL only in DEBUG; it is noisy otherwise
        "echo": settings.log_level == "DEBUG",
    }
    if not settings.is_sqlite:
        engine_kwargs.update(
            pool_size=1,
            max_overflow=0,
            pool_pre_ping=False,
        )
    return create_async_engine(settings.sqlalchemy_url, **engine_kwargs)
