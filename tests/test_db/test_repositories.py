"""
Tests for ecobalance/db/repositories/snapshot_repo.py.

What we test
------------
SnapshotRepository:
  - save() then get() returns the same inputs.
  - save() on an existing profile replaces it (upsert).
  - get() on an unknown profile returns None.
  - delete() reports whether a row was removed.
  - list_profiles() is sorted.

HistoryRepository:
  - record() upserts by (profile, day).
  - list_for_profile() is oldest → newest; limit keeps the most recent days.
  - Profiles are isolated.
  - delete_for_profile() returns the number of rows removed.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from ecobalance.db.repositories.snapshot_repo import HistoryRepository, SnapshotRepository
from ecobalance.models.inputs import UserInputs, WasteHabits
from ecobalance.models.snapshot import HistoryEntry, InputSnapshot
from ecobalance.taxonomy.lifestyle import DietType, EmissionLevel


def _snapshot(profile: str = "home", **inputs) -> InputSnapshot:
    return InputSnapshot(
        profile=profile,
        inputs=UserInputs(**inputs),
        last_updated=datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc),
    )


def _entry(day: int, total: float = 200.0, score: int = 60) -> HistoryEntry:
    return HistoryEntry(
        assessed_on=date(2026, 4, day),
        monthly_total=total,
        score=score,
        level=EmissionLevel.GOOD,
    )


# ── SnapshotRepository ────────────────────────────────────────────────────────

class TestSnapshotRepository:
    def test_round_trip(self, in_memory_db):
        repo = SnapshotRepository(in_memory_db)
        repo.save(
            _snapshot(
                diet_type=DietType.VEGETARIAN,
                waste=WasteHabits(waste_per_week=3, composting=True),
            )
        )
        loaded = repo.get("home")
        assert loaded is not None
        assert loaded.inputs.diet_type == DietType.VEGETARIAN
        assert loaded.inputs.waste.composting is True
        assert loaded.last_updated == datetime(2026, 4, 1, 12, 0, tzinfo=timezone.utc)

    def test_upsert(self, in_memory_db):
        repo = SnapshotRepository(in_memory_db)
        repo.save(_snapshot(electricity=100))
        repo.save(_snapshot(electricity=300))
        assert repo.get("home").inputs.electricity == 300.0
        assert repo.list_profiles() == ["home"]

    def test_missing(self, in_memory_db):
        assert SnapshotRepository(in_memory_db).get("nobody") is None

    def test_delete(self, in_memory_db):
        repo = SnapshotRepository(in_memory_db)
        repo.save(_snapshot())
        assert repo.delete("home") is True
        assert repo.delete("home") is False
        assert repo.get("home") is None

    def test_list_profiles_sorted(self, in_memory_db):
        repo = SnapshotRepository(in_memory_db)
        for name in ("zeta", "alpha", "mid"):
            repo.save(_snapshot(profile=name))
        assert repo.list_profiles() == ["alpha", "mid", "zeta"]


# ── HistoryRepository ─────────────────────────────────────────────────────────

class TestHistoryRepository:
    def test_ordered_oldest_first(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        for day in (5, 1, 3):
            repo.record("home", _entry(day))
        days = [e.assessed_on.day for e in repo.list_for_profile("home")]
        assert days == [1, 3, 5]

    def test_same_day_replaced(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        repo.record("home", _entry(2, total=300.0, score=40))
        repo.record("home", _entry(2, total=150.0, score=70))
        entries = repo.list_for_profile("home")
        assert len(entries) == 1
        assert entries[0].monthly_total == 150.0
        assert entries[0].score == 70

    def test_limit_keeps_most_recent(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        for day in range(1, 8):
            repo.record("home", _entry(day))
        days = [e.assessed_on.day for e in repo.list_for_profile("home", limit=3)]
        assert days == [5, 6, 7]

    def test_profiles_isolated(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        repo.record("home", _entry(1))
        repo.record("cabin", _entry(1))
        repo.record("cabin", _entry(2))
        assert len(repo.list_for_profile("home")) == 1
        assert len(repo.list_for_profile("cabin")) == 2

    def test_delete_for_profile(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        repo.record("home", _entry(1))
        repo.record("home", _entry(2))
        repo.record("cabin", _entry(1))
        assert repo.delete_for_profile("home") == 2
        assert repo.list_for_profile("home") == []
        assert len(repo.list_for_profile("cabin")) == 1

    def test_level_round_trip(self, in_memory_db):
        repo = HistoryRepository(in_memory_db)
        repo.record("home", _entry(1))
        assert repo.list_for_profile("home")[0].level == EmissionLevel.GOOD
