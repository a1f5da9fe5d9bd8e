"""
Repositories for stored input snapshots and the per-day assessment history.

The snapshot is the persisted form of "the user's current inputs": the
full ``UserInputs`` record as JSON plus when it was saved. The history keeps
one summary row per profile per day; re-assessing on the same day replaces
that day's row.
"""

from __future__ import annotations

import logging
import sqlite3
from datetime import date, datetime
from typing import Optional

from ecobalance.db.repositories.base import BaseRepository
from ecobalance.models.inputs import UserInputs
from ecobalance.models.snapshot import HistoryEntry, InputSnapshot
from ecobalance.taxonomy.lifestyle import EmissionLevel

logger = logging.getLogger(__name__)


class SnapshotRepository(BaseRepository):
    """Read/write access to the ``input_snapshots`` table."""

    def save(self, snapshot: InputSnapshot) -> None:
        """Insert or replace the snapshot for ``snapshot.profile``."""
        self.execute(
            """
            INSERT INTO input_snapshots (profile, inputs_json, last_updated)
            VALUES (?, ?, ?)
            ON CONFLICT(profile) DO UPDATE SET
                inputs_json  = excluded.inputs_json,
                last_updated = excluded.last_updated;
            """,
            (
                snapshot.profile,
                snapshot.inputs.model_dump_json(),
                snapshot.last_updated.isoformat(),
            ),
        )
        logger.debug("Saved input snapshot for profile '%s'", snapshot.profile)

    def get(self, profile: str) -> Optional[InputSnapshot]:
        """Fetch the snapshot for a profile, or ``None`` if never saved."""
        row = self.fetchone(
            "SELECT * FROM input_snapshots WHERE profile = ?;", (profile,)
        )
        return _row_to_snapshot(row) if row else None

    def delete(self, profile: str) -> bool:
        """Delete a profile's snapshot. Returns True if a row was removed."""
        return self.rowcount(
            "DELETE FROM input_snapshots WHERE profile = ?;", (profile,)
        ) > 0

    def list_profiles(self) -> list[str]:
        rows = self.fetchall("SELECT profile FROM input_snapshots ORDER BY profile;")
        return [row["profile"] for row in rows]


class HistoryRepository(BaseRepository):
    """Read/write access to the ``assessment_history`` table."""

    def record(self, profile: str, entry: HistoryEntry) -> None:
        """Insert or replace the history row for ``(profile, entry.assessed_on)``."""
        self.execute(
            """
            INSERT INTO assessment_history (
                profile, assessed_on, monthly_total, score, level
            ) VALUES (?, ?, ?, ?, ?)
            ON CONFLICT(profile, assessed_on) DO UPDATE SET
                monthly_total = excluded.monthly_total,
                score         = excluded.score,
                level         = excluded.level,
                recorded_at   = strftime('%Y-%m-%dT%H:%M:%SZ', 'now');
            """,
            (
                profile,
                entry.assessed_on.isoformat(),
                entry.monthly_total,
                entry.score,
                entry.level.value,
            ),
        )

    def list_for_profile(
        self,
        profile: str,
        limit: Optional[int] = None,
    ) -> list[HistoryEntry]:
        """Fetch history oldest → newest.

        Args:
            profile: Profile key.
            limit:   If given, only the most recent ``limit`` days.

        Returns:
            List of ``HistoryEntry`` ordered by ``assessed_on`` ascending.
        """
        if limit is not None:
            rows = self.fetchall(
                """
                SELECT * FROM (
                    SELECT * FROM assessment_history
                    WHERE profile = ?
                    ORDER BY assessed_on DESC
                    LIMIT ?
                ) ORDER BY assessed_on ASC;
                """,
                (profile, limit),
            )
        else:
            rows = self.fetchall(
                """
                SELECT * FROM assessment_history
                WHERE profile = ?
                ORDER BY assessed_on ASC;
                """,
                (profile,),
            )
        return [_row_to_history(r) for r in rows]

    def delete_for_profile(self, profile: str) -> int:
        """Delete every history row for a profile; returns rows removed."""
        return self.rowcount(
            "DELETE FROM assessment_history WHERE profile = ?;", (profile,)
        )


# ── Private helpers ───────────────────────────────────────────────────────────

def _row_to_snapshot(row: sqlite3.Row) -> InputSnapshot:
    return InputSnapshot(
        profile=row["profile"],
        inputs=UserInputs.model_validate_json(row["inputs_json"]),
        last_updated=datetime.fromisoformat(row["last_updated"]),
    )


def _row_to_history(row: sqlite3.Row) -> HistoryEntry:
    return HistoryEntry(
        assessed_on=date.fromisoformat(row["assessed_on"]),
        monthly_total=row["monthly_total"],
        score=row["score"],
        level=EmissionLevel(row["level"]),
    )
