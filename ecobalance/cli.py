"""
EcoBalance — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Validate inputs.
  4. Execute action (assessment, snapshot update, export, etc.).
  5. Report result to stdout.

Install and run::

    pip install -e .
    ecobalance --help
    ecobalance init-db
    ecobalance assess --inputs household.json --save
    ecobalance update --set transport_mode=public_transit --set waste.composting=true
    ecobalance history
    ecobalance export --format csv
    ecobalance reset --yes
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Optional

import typer

app = typer.Typer(
    name="ecobalance",
    help="EcoBalance — household carbon footprint assessment CLI.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from ecobalance.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from ecobalance.utils.logging import configure_logging
    configure_logging(config.logging)


def _open_db(config):
    from ecobalance.db.connection import get_connection

    return get_connection(
        config.database.db_path,
        wal_mode=config.database.wal_mode,
        busy_timeout_ms=config.database.busy_timeout_ms,
    )


def _read_inputs_file(path: Path):
    """Parse a JSON inputs file, exiting with code 1 on any error."""
    from pydantic import ValidationError

    from ecobalance.models.inputs import UserInputs

    if not path.exists():
        typer.echo(f"[ERROR] Inputs file not found: {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return UserInputs.model_validate_json(path.read_text(encoding="utf-8"))
    except (ValidationError, OSError) as exc:
        typer.echo(f"[ERROR] Invalid inputs file {path}:\n{exc}", err=True)
        raise typer.Exit(code=1)


def parse_assignments(assignments: list[str]) -> dict[str, Any]:
    """Turn ``["a=1", "waste.composting=true"]`` into a nested update dict.

    Values are coerced: ``true``/``false`` → bool, numeric strings → float,
    anything else stays a string (enum values such as ``public_transit``).

    Raises:
        ValueError: If an assignment has no ``=`` or an empty key.
    """
    updates: dict[str, Any] = {}
    for item in assignments:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got '{item}'.")
        target = updates
        *parents, leaf = key.split(".")
        for part in parents:
            target = target.setdefault(part, {})
            if not isinstance(target, dict):
                raise ValueError(f"'{part}' is assigned both a value and sub-fields.")
        target[leaf] = _coerce(raw.strip())
    return updates


def _coerce(raw: str) -> Any:
    lowered = raw.lower()
    if lowered in ("true", "yes"):
        return True
    if lowered in ("false", "no"):
        return False
    try:
        return float(raw)
    except ValueError:
        return raw


def _assess_profile(conn, config, profile: str, inputs, save: bool):
    """Run an assessment for ``profile``, persisting it when ``save`` is set."""
    from ecobalance.assessment import run_assessment, summarize
    from ecobalance.db.repositories.snapshot_repo import HistoryRepository, SnapshotRepository
    from ecobalance.emissions.calculator import calculate_emissions
    from ecobalance.models.snapshot import InputSnapshot
    from ecobalance.utils.time_utils import utc_today, utcnow

    history_repo = HistoryRepository(conn)

    if save:
        emissions = calculate_emissions(inputs)
        SnapshotRepository(conn).save(
            InputSnapshot(profile=profile, inputs=inputs, last_updated=utcnow())
        )
        history_repo.record(profile, summarize(emissions, utc_today()))

    history = history_repo.list_for_profile(profile)
    return run_assessment(
        inputs,
        history=history or None,
        max_recommendations=config.engine.max_recommendations,
    )


def _echo_assessment(assessment, profile: str, as_json: bool) -> None:
    if as_json:
        from ecobalance.reporting.export import assessment_to_dict

        typer.echo(json.dumps(assessment_to_dict(assessment), indent=2, ensure_ascii=False))
    else:
        from ecobalance.reporting.formatters import format_assessment

        typer.echo(format_assessment(assessment, profile=profile))


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("init-db")
def init_db(
    db_path: Optional[str] = typer.Option(
        None,
        "--db-path",
        help="Override DB path from config (e.g. data/db/test.db).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Initialize the SQLite snapshot store.

    Safe to run multiple times — all DDL uses IF NOT EXISTS.
    """
    from ecobalance.db.connection import get_connection
    from ecobalance.db.schema import ALL_TABLE_NAMES, apply_schema

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    target_path = db_path or config.database.db_path
    typer.echo(f"Initializing database at: {target_path}")

    with get_connection(
        target_path,
        wal_mode=config.database.wal_mode,
        busy_timeout_ms=config.database.busy_timeout_ms,
    ) as conn:
        apply_schema(conn)

    typer.echo(f"  Tables: {len(ALL_TABLE_NAMES)} created/verified.")
    typer.echo("[OK] Database ready.")


@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Database path:       {config.database.db_path}")
    typer.echo(f"  Default profile:     {config.engine.default_profile}")
    typer.echo(f"  Max recommendations: {config.engine.max_recommendations}")
    typer.echo(f"  Export directory:    {config.export.output_dir}")
    typer.echo(f"  Log level:           {config.logging.level}")
    typer.echo(f"  Debug mode:          {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("assess")
def assess(
    inputs_file: Optional[str] = typer.Option(
        None,
        "--inputs",
        "-i",
        help=(
            "JSON file with a full UserInputs record. "
            "Defaults to the profile's stored snapshot, then built-in defaults."
        ),
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile key (default: config.engine.default_profile).",
    ),
    save: bool = typer.Option(
        False,
        "--save/--no-save",
        help="Persist the inputs snapshot and today's history entry.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the assessment as JSON instead of the ASCII report.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Calculate emissions, recommendations and progress for one household."""
    from ecobalance.db.repositories.snapshot_repo import SnapshotRepository
    from ecobalance.db.schema import apply_schema
    from ecobalance.models.inputs import UserInputs

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profile = profile or config.engine.default_profile

    explicit_inputs = _read_inputs_file(Path(inputs_file)) if inputs_file else None

    with _open_db(config) as conn:
        apply_schema(conn)
        if explicit_inputs is not None:
            inputs = explicit_inputs
        else:
            snapshot = SnapshotRepository(conn).get(profile)
            inputs = snapshot.inputs if snapshot else UserInputs()
        assessment = _assess_profile(conn, config, profile, inputs, save=save)

    _echo_assessment(assessment, profile, as_json)
    if save:
        typer.echo(f"[OK] Snapshot saved for profile '{profile}'.", err=as_json)


@app.command("update")
def update(
    assignments: List[str] = typer.Option(
        ...,
        "--set",
        "-s",
        help="Field assignment key=value; dotted keys for sections (waste.composting=true).",
    ),
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile key (default: config.engine.default_profile).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Apply a partial update to the stored inputs, then re-assess and save.

    Starts from the stored snapshot (or built-in defaults when none exists).
    """
    from pydantic import ValidationError

    from ecobalance.db.repositories.snapshot_repo import SnapshotRepository
    from ecobalance.db.schema import apply_schema
    from ecobalance.models.inputs import UserInputs, merge_inputs
    from ecobalance.reporting.formatters import format_assessment

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profile = profile or config.engine.default_profile

    try:
        updates = parse_assignments(assignments)
    except ValueError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)

    with _open_db(config) as conn:
        apply_schema(conn)
        snapshot = SnapshotRepository(conn).get(profile)
        current = snapshot.inputs if snapshot else UserInputs()
        try:
            inputs = merge_inputs(current, updates)
        except (ValueError, ValidationError) as exc:
            typer.echo(f"[ERROR] Update rejected: {exc}", err=True)
            raise typer.Exit(code=1)
        assessment = _assess_profile(conn, config, profile, inputs, save=True)

    typer.echo(format_assessment(assessment, profile=profile))
    typer.echo(f"[OK] Updated {len(assignments)} field(s) for profile '{profile}'.")


@app.command("history")
def history(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile key (default: config.engine.default_profile).",
    ),
    limit: Optional[int] = typer.Option(
        None,
        "--limit",
        "-n",
        min=1,
        help="Show only the most recent N days.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Print the stored per-day assessment history."""
    from ecobalance.db.repositories.snapshot_repo import HistoryRepository
    from ecobalance.db.schema import apply_schema
    from ecobalance.reporting.formatters import format_history_table

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profile = profile or config.engine.default_profile

    with _open_db(config) as conn:
        apply_schema(conn)
        entries = HistoryRepository(conn).list_for_profile(profile, limit=limit)

    typer.echo(format_history_table(entries, profile))


@app.command("export")
def export(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile key (default: config.engine.default_profile).",
    ),
    fmt: str = typer.Option(
        "json",
        "--format",
        "-f",
        help="Output format: json (full assessment) or csv (breakdown per horizon).",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Destination file. Defaults to <export.output_dir>/assessment_<profile>.<fmt>.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Write the profile's current assessment to a JSON or CSV file."""
    from ecobalance.db.repositories.snapshot_repo import SnapshotRepository
    from ecobalance.db.schema import apply_schema
    from ecobalance.reporting.export import (
        BREAKDOWN_FIELDNAMES,
        assessment_to_dict,
        export_to_csv,
        export_to_json,
        flatten_breakdown_for_export,
    )

    fmt = fmt.lower()
    if fmt not in ("json", "csv"):
        typer.echo(f"[ERROR] Unsupported format '{fmt}'. Use json or csv.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profile = profile or config.engine.default_profile

    with _open_db(config) as conn:
        apply_schema(conn)
        snapshot = SnapshotRepository(conn).get(profile)
        if snapshot is None:
            typer.echo(
                f"[ERROR] No stored inputs for profile '{profile}'. "
                "Run 'ecobalance assess --save' first.",
                err=True,
            )
            raise typer.Exit(code=1)
        assessment = _assess_profile(conn, config, profile, snapshot.inputs, save=False)

    out_path = Path(output) if output else (
        Path(config.export.output_dir) / f"assessment_{profile}.{fmt}"
    )
    if fmt == "json":
        payload = assessment_to_dict(assessment)
        payload["profile"] = profile
        payload["last_updated"] = snapshot.last_updated.isoformat()
        written = export_to_json(payload, out_path)
    else:
        written = export_to_csv(
            flatten_breakdown_for_export(assessment.emissions),
            out_path,
            fieldnames=BREAKDOWN_FIELDNAMES,
        )

    typer.echo(f"[OK] Wrote {written}")


@app.command("reset")
def reset(
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile key (default: config.engine.default_profile).",
    ),
    yes: bool = typer.Option(
        False,
        "--yes",
        "-y",
        help="Skip the confirmation prompt.",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Delete the stored snapshot and history for a profile."""
    from ecobalance.db.repositories.snapshot_repo import HistoryRepository, SnapshotRepository
    from ecobalance.db.schema import apply_schema

    config = _load_config_or_exit(config_path)
    _configure_logging(config)
    profile = profile or config.engine.default_profile

    if not yes:
        typer.confirm(f"Delete all stored data for profile '{profile}'?", abort=True)

    with _open_db(config) as conn:
        apply_schema(conn)
        had_snapshot = SnapshotRepository(conn).delete(profile)
        removed = HistoryRepository(conn).delete_for_profile(profile)

    typer.echo(
        f"  Snapshot removed: {'yes' if had_snapshot else 'no'} | "
        f"history rows removed: {removed}"
    )
    typer.echo(f"[OK] Profile '{profile}' reset.")


if __name__ == "__main__":
    app()
