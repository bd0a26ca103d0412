"""SQLAlchemy preference store adapter."""

from typing import Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ..preferences import THEME_KEY, flip_theme


class SQLAlchemyPreferenceStore:
    """Reads and writes UI preferences in a ``preferences`` key-value table.

    Every call runs in its own session and transaction, so a toggle reads and
    writes the theme atomically.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        with self.session_factory.begin() as db:
            db.execute(
                text(
                    """
                    CREATE TABLE IF NOT EXISTS preferences (
                        name VARCHAR(128) PRIMARY KEY,
                        value VARCHAR(256) NOT NULL
                    )
                    """
                )
            )

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        with self.session_factory() as db:
            value = _read(db, key)
        return value if value is not None else default

    def set(self, key: str, value: str) -> None:
        with self.session_factory.begin() as db:
            _write(db, key, value)

    def toggle_theme(self) -> str:
        with self.session_factory.begin() as db:
            theme = flip_theme(_read(db, THEME_KEY))
            _write(db, THEME_KEY, theme)
        return theme


def _read(db: Session, key: str) -> Optional[str]:
    row = db.execute(
        text("SELECT value FROM preferences WHERE name = :key"),
        {"key": key},
    ).fetchone()
    return row.value if row is not None else None


def _write(db: Session, key: str, value: str) -> None:
    updated = db.execute(
        text("UPDATE preferences SET value = :value WHERE name = :key"),
        {"key": key, "value": value},
    )
    if updated.rowcount == 0:
        db.execute(
            text("INSERT INTO preferences (name, value) VALUES (:key, :value)"),
            {"key": key, "value": value},
        )


def open_preference_store(url: str = "sqlite://") -> SQLAlchemyPreferenceStore:
    """Build a store from a database URL; the default is process-local SQLite."""
    if url.startswith("sqlite"):
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url)
    return SQLAlchemyPreferenceStore(sessionmaker(bind=engine))
