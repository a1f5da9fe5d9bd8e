"""
Tests for ecobalance/progress/evaluator.py.

What we test
------------
calculate_progress():
  - Tier selection and within-tier progress at every band edge.
  - Badge list: six category badges, first-steps, week-streak, in that order.
  - Category badges use strict "<" and guarded progress.
  - history=None → placeholder streak (3), total saved (45), streak badge 30%.
  - history given → streak from consecutive days, savings vs first entry.
  - Outputs stay in range for any score.

consecutive_day_streak() / total_saved_since_first():
  - Gaps break the streak; order of entries does not matter.
  - Savings are never negative.
"""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from ecobalance.emissions.calculator import calculate_emissions
from ecobalance.models.snapshot import HistoryEntry
from ecobalance.progress.badges import badge_ids
from ecobalance.progress.evaluator import (
    PLACEHOLDER_STREAK,
    PLACEHOLDER_TOTAL_SAVED,
    calculate_progress,
    consecutive_day_streak,
    total_saved_since_first,
)
from ecobalance.taxonomy.lifestyle import EmissionLevel, ProgressLevel


# ── Helpers ────────────────────────────────────────────────────────────────────

_TODAY = date(2026, 3, 14)


def _entry(days_ago: int, monthly_total: float = 300.0) -> HistoryEntry:
    return HistoryEntry(
        assessed_on=_TODAY - timedelta(days=days_ago),
        monthly_total=monthly_total,
        score=40,
        level=EmissionLevel.AVERAGE,
    )


def _badge(progress, badge_id):
    return next(b for b in progress.badges if b.id == badge_id)


# ── Tiers ─────────────────────────────────────────────────────────────────────

class TestTiers:
    @pytest.mark.parametrize(
        "score, level, pct",
        [
            (0, ProgressLevel.BEGINNER, 0.0),
            (15, ProgressLevel.BEGINNER, 50.0),
            (29, ProgressLevel.BEGINNER, 29 / 30 * 100),
            (30, ProgressLevel.AWARE, 0.0),
            (54, ProgressLevel.AWARE, 96.0),
            (55, ProgressLevel.CONSCIOUS, 0.0),
            (79, ProgressLevel.CONSCIOUS, 96.0),
            (80, ProgressLevel.HERO, 0.0),
            (90, ProgressLevel.HERO, 50.0),
            (100, ProgressLevel.HERO, 100.0),
        ],
    )
    def test_band_edges(self, make_emissions, score, level, pct):
        progress = calculate_progress(make_emissions(score=score))
        assert progress.level == level
        assert progress.level_progress == pytest.approx(pct)

    def test_progress_in_range_for_every_score(self, make_emissions):
        for score in range(0, 101):
            progress = calculate_progress(make_emissions(score=score))
            assert 0.0 <= progress.level_progress <= 100.0


# ── Badges ────────────────────────────────────────────────────────────────────

class TestBadges:
    def test_catalog_order(self, make_emissions):
        progress = calculate_progress(make_emissions())
        assert [b.id for b in progress.badges] == badge_ids()
        assert len(progress.badges) == 8

    def test_first_steps_always_earned(self, make_emissions):
        progress = calculate_progress(make_emissions(score=0, energy=900.0))
        first = _badge(progress, "first-steps")
        assert first.earned
        assert first.progress == 100.0

    def test_threshold_is_strict(self, make_emissions):
        progress = calculate_progress(make_emissions(energy=50.0))
        saver = _badge(progress, "energy-saver")
        assert not saver.earned
        assert saver.progress == pytest.approx(100.0)

    def test_below_threshold_earned(self, make_emissions):
        progress = calculate_progress(make_emissions(energy=49.9))
        assert _badge(progress, "energy-saver").earned

    def test_partial_progress(self, make_emissions):
        progress = calculate_progress(make_emissions(energy=200.0))
        assert _badge(progress, "energy-saver").progress == pytest.approx(25.0)

    def test_zero_category_is_finite_and_earned(self, make_emissions):
        progress = calculate_progress(make_emissions(transport=0.0))
        commuter = _badge(progress, "eco-commuter")
        assert commuter.earned
        assert commuter.progress == 100.0

    def test_default_household(self, default_inputs):
        progress = calculate_progress(calculate_emissions(default_inputs))
        earned = {b.id for b in progress.earned_badges()}
        assert earned == {"appliance-ace", "mindful-shopper", "waste-warrior", "first-steps"}
        assert _badge(progress, "green-eater").progress == pytest.approx(40 / 98 * 100)

    def test_all_badge_progress_in_range(self, make_emissions):
        for value in (0.0, 0.5, 1.0, 10.0, 1000.0):
            progress = calculate_progress(
                make_emissions(
                    energy=value, transport=value, food=value,
                    appliances=value, shopping=value, waste=value,
                )
            )
            assert all(0.0 <= b.progress <= 100.0 for b in progress.badges)


# ── Placeholders ──────────────────────────────────────────────────────────────

class TestPlaceholders:
    def test_no_history_uses_placeholders(self, make_emissions):
        progress = calculate_progress(make_emissions())
        assert progress.streak == PLACEHOLDER_STREAK == 3
        assert progress.total_saved == PLACEHOLDER_TOTAL_SAVED == 45.0
        week = _badge(progress, "week-streak")
        assert not week.earned
        assert week.progress == pytest.approx(30.0)


# ── History ───────────────────────────────────────────────────────────────────

class TestHistory:
    def test_empty_history(self, make_emissions):
        progress = calculate_progress(make_emissions(), history=[])
        assert progress.streak == 0
        assert progress.total_saved == 0.0
        assert _badge(progress, "week-streak").progress == 0.0

    def test_streak_and_savings(self, make_emissions):
        history = [_entry(0, 250.0), _entry(1, 270.0), _entry(2, 300.0), _entry(5, 320.0)]
        # current monthly total is 265 (make_emissions defaults)
        progress = calculate_progress(make_emissions(), history=history)
        assert progress.streak == 3
        assert progress.total_saved == pytest.approx(55.0)

    def test_week_streak_earned(self, make_emissions):
        history = [_entry(d) for d in range(7)]
        progress = calculate_progress(make_emissions(), history=history)
        week = _badge(progress, "week-streak")
        assert progress.streak == 7
        assert week.earned
        assert week.progress == 100.0

    def test_partial_week(self, make_emissions):
        history = [_entry(d) for d in range(4)]
        week = _badge(calculate_progress(make_emissions(), history=history), "week-streak")
        assert not week.earned
        assert week.progress == pytest.approx(4 / 7 * 100)


class TestStreakHelpers:
    def test_unordered_entries(self):
        assert consecutive_day_streak([_entry(2), _entry(0), _entry(1)]) == 3

    def test_gap_at_latest_day(self):
        # latest entry stands alone
        assert consecutive_day_streak([_entry(0), _entry(2), _entry(3)]) == 1

    def test_empty(self):
        assert consecutive_day_streak([]) == 0

    def test_savings_never_negative(self):
        assert total_saved_since_first([_entry(3, 100.0)], 180.0) == 0.0

    def test_savings_against_earliest_entry(self):
        history = [_entry(0, 150.0), _entry(10, 400.0), _entry(4, 200.0)]
        assert total_saved_since_first(history, 150.0) == pytest.approx(250.0)
