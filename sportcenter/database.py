from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional
import logging

from alembic import command
from alembic.config import Config
from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"

Base = declarative_base()


class StorageError(Exception):
    """Raised when the store rejects a statement."""

    def __init__(self, message: str, is_duplicate: bool = False):
        super().__init__(message)
        self.is_duplicate = is_duplicate


@dataclass
class ExecuteResult:
    changes: int
    last_id: Optional[int]


def make_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases only exist on one connection
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(database_url, **kwargs)

        @event.listens_for(engine, "connect")
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

        return engine
    return create_engine(database_url)


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def _is_duplicate(exc: IntegrityError) -> bool:
    message = str(exc.orig).lower()
    return "unique constraint" in message or "duplicate key" in message


def commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        raise StorageError(str(exc.orig), is_duplicate=_is_duplicate(exc)) from exc


def execute(
    db: Session, sql: str, params: Optional[Mapping[str, Any]] = None
) -> ExecuteResult:
    """Run a write statement. The caller commits."""
    try:
        result = db.execute(text(sql), dict(params or {}))
    except IntegrityError as exc:
        db.rollback()
        raise StorageError(str(exc.orig), is_duplicate=_is_duplicate(exc)) from exc
    return ExecuteResult(
        changes=result.rowcount, last_id=getattr(result, "lastrowid", None)
    )


def fetch_one(
    db: Session, sql: str, params: Optional[Mapping[str, Any]] = None
) -> Optional[Dict[str, Any]]:
    row = db.execute(text(sql), dict(params or {})).mappings().first()
    return dict(row) if row is not None else None


def fetch_all(
    db: Session, sql: str, params: Optional[Mapping[str, Any]] = None
) -> List[Dict[str, Any]]:
    rows = db.execute(text(sql), dict(params or {})).mappings().all()
    return [dict(row) for row in rows]


def run_migrations(engine: Engine) -> None:
    """Bring the schema up to the latest revision."""
    config = Config()
    config.set_main_option("script_location", str(MIGRATIONS_DIR))
    config.set_main_option(
        "sqlalchemy.url",
        engine.url.render_as_string(hide_password=False).replace("%", "%%"),
    )
    with engine.begin() as connection:
        config.attributes["connection"] = connection
        command.upgrade(config, "head")
    logger.info("Database schema is up to date")
