import sqlite3
from pathlib import Path
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from advocate_directory.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    # The directory is read-only from the service side
    cursor.execute("PRAGMA query_only=ON")
    cursor.close()


def get_engine(db_path: Path | None = None) -> AsyncEngine:
    path = db_path or settings.database_path
    # One connection per session so page and count queries can run side by side
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{path}",
        poolclass=NullPool,
    )
    event.listen(engine.sync_engine, "connect", _set_sqlite_pragmas)
    return engine


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


engine = get_engine()
SessionLocal = get_session_factory(engine)


SCHEMA_SQL = """\
-- ============================================================
-- ADVOCATES
-- ============================================================
CREATE TABLE IF NOT EXISTS advocates (
    id                  INTEGER PRIMARY KEY,
    first_name          TEXT NOT NULL,
    last_name           TEXT NOT NULL,
    city                TEXT NOT NULL,
    degree              TEXT NOT NULL,
    specialties         TEXT NOT NULL DEFAULT '[]'
                        CHECK(json_valid(specialties) AND json_type(specialties) = 'array'),
    years_of_experience INTEGER NOT NULL CHECK(years_of_experience >= 0),
    phone_number        INTEGER NOT NULL,
    created_at          TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_advocates_last_name ON advocates(last_name);
CREATE INDEX IF NOT EXISTS idx_advocates_city ON advocates(city);

-- ============================================================
-- FTS5
-- ============================================================
CREATE VIRTUAL TABLE IF NOT EXISTS advocates_fts USING fts5(
    first_name, last_name, city, degree, specialties,
    content='advocates', content_rowid='id',
    tokenize='porter unicode61'
);
"""

FTS_TRIGGERS_SQL = """\
CREATE TRIGGER IF NOT EXISTS advocates_ai AFTER INSERT ON advocates BEGIN
    INSERT INTO advocates_fts(rowid, first_name, last_name, city, degree, specialties)
    VALUES (new.id, new.first_name, new.last_name, new.city, new.degree, new.specialties);
END;

CREATE TRIGGER IF NOT EXISTS advocates_ad AFTER DELETE ON advocates BEGIN
    INSERT INTO advocates_fts(advocates_fts, rowid, first_name, last_name, city, degree, specialties)
    VALUES ('delete', old.id, old.first_name, old.last_name, old.city, old.degree, old.specialties);
END;

CREATE TRIGGER IF NOT EXISTS advocates_au AFTER UPDATE ON advocates BEGIN
    INSERT INTO advocates_fts(advocates_fts, rowid, first_name, last_name, city, degree, specialties)
    VALUES ('delete', old.id, old.first_name, old.last_name, old.city, old.degree, old.specialties);
    INSERT INTO advocates_fts(rowid, first_name, last_name, city, degree, specialties)
    VALUES (new.id, new.first_name, new.last_name, new.city, new.degree, new.specialties);
END;
"""


def init_db(db_path: Path | None = None):
    path = db_path or settings.database_path
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.execute("PRAGMA journal_mode=WAL")
    conn.executescript(SCHEMA_SQL)
    conn.executescript(FTS_TRIGGERS_SQL)
    conn.close()
