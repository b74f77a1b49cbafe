"""
Database Configuration
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Generator, List, Optional
import logging
import sqlite3

from fastapi import Depends
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from mktrading.core.config import settings
from mktrading.core.exceptions import StoreError

logger = logging.getLogger(__name__)

# Get the properly formatted database URL
db_url = settings.database_url

# Create engine
engine = create_engine(
    db_url,
    connect_args={"check_same_thread": False} if "sqlite" in db_url else {},
    pool_pre_ping=True,
    echo=settings.DEBUG
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base model
Base = declarative_base()


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite ignores foreign keys unless asked per connection"""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def row_to_dict(row) -> dict:
    """Convert a result row into JSON friendly values"""
    result = {}
    for key, value in dict(row).items():
        if isinstance(value, Decimal):
            value = float(value)
        elif isinstance(value, (date, datetime)):
            value = value.isoformat()
        result[key] = value
    return result


class Store:
    """
    Persistence gateway handed to every service.

    Each call runs a single statement with bound parameters and commits it on
    its own, so every repository operation is atomic without explicit
    transactions. Failures are logged here and surface as StoreError.
    """

    def __init__(self, db: Session):
        self.db = db

    def execute(self, statement, params: Optional[dict] = None) -> List[dict]:
        if isinstance(statement, str):
            statement = text(statement)
        try:
            result = self.db.execute(statement, params)
            rows = [row_to_dict(row) for row in result.mappings().all()] if result.returns_rows else []
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error(f"Store error: {exc}", exc_info=True)
            raise StoreError() from exc
        return rows

    def first(self, statement, params: Optional[dict] = None) -> Optional[dict]:
        rows = self.execute(statement, params)
        return rows[0] if rows else None


def get_db() -> Generator[Session, None, None]:
    """
    Dependency that provides a database session.
    Ensures the session is closed after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_store(db: Session = Depends(get_db)) -> Store:
    """Dependency that wraps the request session in a Store"""
    return Store(db)


def init_db(bind: Engine = None):
    """Initialize database tables"""
    # Import all models to register them with Base
    from mktrading.models import (  # noqa: F401
        User, Party, Challan, Employee, Salary, OfficeExpense, Payment
    )
    Base.metadata.create_all(bind=bind or engine)
