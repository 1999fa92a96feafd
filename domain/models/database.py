"""
Database engine construction and schema management.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger("dietapi.database")

# Create SQLAlchemy Base
Base = declarative_base()


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Build the engine behind the query gate.

    SQLite URLs get a StaticPool and cross-thread access so that an in-memory
    database survives for the whole process and can be shared by worker threads.
    """
    if url.startswith("sqlite"):
        return create_engine(
            url,
            echo=echo,
            future=True,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
        )
    return create_engine(url, echo=echo, future=True, pool_pre_ping=True)


def create_schema(bind) -> None:
    """Create all tables known to Base.metadata (existing tables are left alone)"""
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables created successfully")
