"""
SQLite schema DDL for the snapshot store.

All statements use ``IF NOT EXISTS`` so ``apply_schema()`` is **idempotent**:
safe to call on an already-initialized database (e.g. on every CLI run or
in tests).

Tables:
  1. input_snapshots     — latest full ``UserInputs`` per profile (JSON)
  2. assessment_history  — one summary row per profile per calendar day
"""

from __future__ import annotations

import logging
import sqlite3

logger = logging.getLogger(__name__)

# ── DDL statements ─────────────────────────────────────────────────────────────

_DDL_INPUT_SNAPSHOTS = """
CREATE TABLE IF NOT EXISTS input_snapshots (
    profile         TEXT    PRIMARY KEY,
    inputs_json     TEXT    NOT NULL,
    last_updated    TEXT    NOT NULL,
    created_at      TEXT    NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now'))
);
"""

_DDL_ASSESSMENT_HISTORY = """
CREATE TABLE IF NOT EXISTS assessment_history (
    history_id      INTEGER PRIMARY KEY AUTOINCREMENT,
    profile         TEXT    NOT NULL,
    assessed_on     TEXT    NOT NULL,
    monthly_total   REAL    NOT NULL CHECK (monthly_total >= 0),
    score           INTEGER NOT NULL CHECK (score BETWEEN 0 AND 100),
    level           TEXT    NOT NULL,
    recorded_at     TEXT    NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ', 'now')),
    UNIQUE (profile, assessed_on)
);
CREATE INDEX IF NOT EXISTS idx_history_profile_date
    ON assessment_history (profile, assessed_on);
"""

_ALL_DDL = [
    _DDL_INPUT_SNAPSHOTS,
    _DDL_ASSESSMENT_HISTORY,
]

# Table names for introspection / tests
ALL_TABLE_NAMES = [
    "input_snapshots",
    "assessment_history",
]


def apply_schema(conn: sqlite3.Connection) -> None:
    """Apply all DDL statements to ``conn``.

    Idempotent — safe to call on an already-initialized database.

    Args:
        conn: An open ``sqlite3.Connection``.
    """
    logger.debug("Applying schema to database...")

    for ddl in _ALL_DDL:
        # Each block may contain multiple semicolon-separated statements
        for statement in _split_ddl(ddl):
            conn.execute(statement)

    conn.commit()
    logger.debug("Schema applied: %d tables created/verified.", len(ALL_TABLE_NAMES))


def _split_ddl(ddl: str) -> list[str]:
    """Split a multi-statement DDL block on semicolons."""
    return [s.strip() for s in ddl.split(";") if s.strip()]


def get_existing_tables(conn: sqlite3.Connection) -> list[str]:
    """Return table names present in the database, sorted alphabetically."""
    rows = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' ORDER BY name;"
    ).fetchall()
    return [row["name"] for row in rows]
