"""
ASCII terminal formatters for CLI commands.

All formatters accept engine output records and return plain multi-line
strings suitable for ``typer.echo()``.

Column widths are fixed so the output lines up in a plain terminal and can be
asserted on in tests.

Example (``format_assessment``)::

  === Carbon Footprint Assessment ===
    Monthly total:  487.3 kg CO2e   (daily 16.2, weekly 121.8)
    Score:          3/100  [high]
    Tier:           Climate Beginner (10% through tier)

    Category        Monthly    Share
    --------------------------------
    energy            247.3    50.8%
    ...
"""

from __future__ import annotations

from ecobalance.assessment import Assessment
from ecobalance.models.emissions import CalculatedEmissions
from ecobalance.models.progress import Badge, UserProgress
from ecobalance.models.recommendation import Recommendation
from ecobalance.models.snapshot import HistoryEntry
from ecobalance.progress.levels import LEVEL_INFO


# ── Emissions ─────────────────────────────────────────────────────────────────


def format_emissions(emissions: CalculatedEmissions) -> str:
    """Headline numbers plus a per-category monthly table."""
    m = emissions.monthly
    lines: list[str] = []
    lines.append(
        f"  Monthly total:  {m.total:.1f} kg CO2e   "
        f"(daily {emissions.daily.total:.1f}, weekly {emissions.weekly.total:.1f})"
    )
    lines.append(f"  Score:          {emissions.score}/100  [{emissions.level}]")
    cost = emissions.cost_estimate
    lines.append(
        f"  Energy spend:   {cost.monthly_cost:,.0f}/month  "
        f"(save up to {cost.potential_savings:,.0f})"
    )
    lines.append("")
    header = f"  {'Category':<12}  {'Monthly':>9}  {'Share':>7}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for cat, value in m.by_category().items():
        share = value / m.total if m.total > 0 else 0.0
        lines.append(f"  {cat.value:<12}  {value:>9.1f}  {share:>7.1%}")
    return "\n".join(lines)


# ── Recommendations ───────────────────────────────────────────────────────────


def format_recommendations(recs: list[Recommendation]) -> str:
    """Numbered list, catalog order preserved."""
    if not recs:
        return "  (no recommendations)"
    lines: list[str] = []
    for i, rec in enumerate(recs, start=1):
        money = f", save ~{rec.savings_money:,.0f}/month" if rec.savings_money else ""
        lines.append(
            f"  {i}. [{rec.impact.upper():<6}] {rec.title} "
            f"(-{rec.savings_kg:.1f} kg/month{money})"
        )
        lines.append(f"     {rec.description}")
    return "\n".join(lines)


# ── Progress ──────────────────────────────────────────────────────────────────


def format_badges(badges: list[Badge]) -> str:
    lines: list[str] = []
    for b in badges:
        mark = "[x]" if b.earned else "[ ]"
        lines.append(f"  {mark} {b.icon} {b.name:<16} {b.progress:5.1f}%  {b.description}")
    return "\n".join(lines)


def format_progress(progress: UserProgress) -> str:
    info = LEVEL_INFO[progress.level]
    lines = [
        f"  Tier:           {info.name} ({progress.level_progress:.0f}% through tier)",
        f"                  {info.description}",
        f"  Streak:         {progress.streak} day(s)",
        f"  Total saved:    {progress.total_saved:.1f} kg CO2e/month",
        "",
        format_badges(progress.badges),
    ]
    return "\n".join(lines)


# ── Full report ───────────────────────────────────────────────────────────────


def format_assessment(assessment: Assessment, profile: str | None = None) -> str:
    """Complete terminal report for one assessment."""
    lines: list[str] = []
    lines.append("")
    lines.append("=== Carbon Footprint Assessment ===")
    if profile:
        lines.append(f"  Profile:        {profile}")
    lines.append(format_emissions(assessment.emissions))
    lines.append("")
    lines.append("=== Recommendations ===")
    lines.append(format_recommendations(assessment.recommendations))
    lines.append("")
    lines.append("=== Progress ===")
    lines.append(format_progress(assessment.progress))
    lines.append("")
    return "\n".join(lines)


# ── History ───────────────────────────────────────────────────────────────────


def format_history_table(entries: list[HistoryEntry], profile: str) -> str:
    """ASCII table of stored assessments, oldest first."""
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== Assessment History ({profile}) ===")
    if not entries:
        lines.append("  (no history; run 'ecobalance assess --save' first)")
        lines.append("")
        return "\n".join(lines)

    header = f"  {'Date':<10}  {'Monthly kg':>10}  {'Score':>5}  {'Level':<9}"
    lines.append(header)
    lines.append("  " + "-" * (len(header) - 2))
    for e in entries:
        lines.append(
            f"  {e.assessed_on.isoformat():<10}  {e.monthly_total:>10.1f}  "
            f"{e.score:>5}  {e.level.value:<9}"
        )
    lines.append("")
    return "\n".join(lines)
