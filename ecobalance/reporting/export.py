"""
Export helpers for sharing an assessment outside the CLI.

All writer functions write to disk and return the written ``Path``. They
accept generic ``list[dict]`` / ``dict`` data; the adapter functions below
turn an ``Assessment`` into those shapes.

CSV exports are flat (no nested dicts) so they load directly in a
spreadsheet without any pre-processing step.
"""

from __future__ import annotations

import csv
import json
from pathlib import Path
from typing import Any

from ecobalance.assessment import Assessment
from ecobalance.models.emissions import CalculatedEmissions, EmissionsBreakdown
from ecobalance.taxonomy.lifestyle import EmissionCategory

HORIZONS = ("daily", "weekly", "monthly")


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    return path


def export_to_json(
    data: dict | list,
    path: Path,
) -> Path:
    """Write ``data`` to a pretty-printed JSON file.

    Args:
        data: Dict or list to serialise.
        path: Destination file path (parent dirs created if missing).

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, default=str, ensure_ascii=False),
        encoding="utf-8",
    )
    return path


def assessment_to_dict(assessment: Assessment) -> dict[str, Any]:
    """Serialise an ``Assessment`` to plain JSON-compatible data.

    Keys: ``inputs``, ``emissions``, ``recommendations``, ``progress``.
    """
    return {
        "inputs": assessment.inputs.model_dump(mode="json"),
        "emissions": assessment.emissions.model_dump(mode="json"),
        "recommendations": [r.model_dump(mode="json") for r in assessment.recommendations],
        "progress": assessment.progress.model_dump(mode="json"),
    }


def flatten_breakdown_for_export(emissions: CalculatedEmissions) -> list[dict]:
    """One row per horizon with every category as its own column.

    Columns: ``horizon``, the six categories, ``total``; values in kg CO2e
    rounded to 3 decimals.
    """
    rows: list[dict] = []
    for horizon in HORIZONS:
        breakdown: EmissionsBreakdown = getattr(emissions, horizon)
        row: dict[str, Any] = {"horizon": horizon}
        for cat, value in breakdown.by_category().items():
            row[cat.value] = round(value, 3)
        row["total"] = round(breakdown.total, 3)
        rows.append(row)
    return rows


BREAKDOWN_FIELDNAMES = ["horizon", *(c.value for c in EmissionCategory), "total"]
