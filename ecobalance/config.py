"""
Application configuration management.

Load order (each layer overrides the previous):
  1. ``config/default.toml``      — committed static defaults
  2. ``config/local.toml``        — optional local overrides (gitignored)
  3. ``.env``                     — local secrets and env overrides (gitignored)
  4. Environment variables        — ``ECOBALANCE_*`` prefix

Entry point: ``load_config(config_path=None) -> AppConfig``

The footprint engine itself takes no configuration; ``AppConfig`` is read by
the CLI and passed down explicitly (DB path, recommendation cap, logging).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, field_validator

# ── Sub-config models ─────────────────────────────────────────────────────────


class DatabaseConfig(BaseModel):
    """SQLite snapshot store settings."""

    model_config = ConfigDict(frozen=True)

    db_path: str = "data/db/ecobalance.db"
    wal_mode: bool = True
    busy_timeout_ms: int = 5000


class LoggingConfig(BaseModel):
    """Logging output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = "INFO"
    log_file: str = "data/logs/ecobalance.log"
    json_format: bool = False

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Log level must be one of {sorted(valid)}, got '{v}'.")
        return v.upper()


class EngineConfig(BaseModel):
    """Assessment settings."""

    model_config = ConfigDict(frozen=True)

    max_recommendations: int = 5
    default_profile: str = "default"

    @field_validator("max_recommendations")
    @classmethod
    def validate_max_recommendations(cls, v: int) -> int:
        if not 1 <= v <= 12:
            raise ValueError(f"max_recommendations must be in [1, 12], got {v}.")
        return v

    @field_validator("default_profile")
    @classmethod
    def validate_profile(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_profile must not be empty.")
        return v.strip()


class ExportConfig(BaseModel):
    """Report export settings."""

    model_config = ConfigDict(frozen=True)

    output_dir: str = "data/outputs"


class AppConfig(BaseModel):
    """Complete application configuration — the single source of truth.

    Constructed by ``load_config()`` which merges TOML + .env + environment.
    """

    model_config = ConfigDict(frozen=True)

    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()
    engine: EngineConfig = EngineConfig()
    export: ExportConfig = ExportConfig()
    debug: bool = False


# ── Loader ────────────────────────────────────────────────────────────────────

def _find_project_root() -> Path:
    """Walk up from this file to find the project root (contains pyproject.toml)."""
    candidate = Path(__file__).parent
    for _ in range(5):
        if (candidate / "pyproject.toml").exists():
            return candidate
        candidate = candidate.parent
    return Path(__file__).parent.parent


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load and merge application configuration.

    Args:
        config_path: Explicit path to a TOML config file. Defaults to
            ``<project_root>/config/default.toml``. When no explicit path is
            given and the default file is absent, built-in defaults are used.

    Returns:
        Fully validated ``AppConfig`` instance.

    Raises:
        FileNotFoundError: If the explicitly given ``config_path`` does not exist.
        pydantic.ValidationError: If merged config values fail validation.
    """
    root = _find_project_root()

    # 1. Load .env file (silently skip if missing)
    load_dotenv(dotenv_path=root / ".env", override=False)

    # 2. Load TOML config
    raw: dict[str, Any] = {}
    if config_path is None:
        default_path = root / "config" / "default.toml"
        if default_path.exists():
            raw = _read_toml_with_local(default_path)
    else:
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                "Pass an existing TOML file or omit --config to use defaults."
            )
        raw = _read_toml_with_local(config_path)

    # 3. Apply ECOBALANCE_* environment variable overrides
    raw = _apply_env_overrides(raw)

    # 4. Build and validate AppConfig
    return _build_app_config(raw)


def _read_toml_with_local(config_path: Path) -> dict[str, Any]:
    with open(config_path, "rb") as f:
        raw: dict[str, Any] = tomllib.load(f)

    # Also merge local.toml if present (gitignored local overrides)
    local_config_path = config_path.parent / "local.toml"
    if local_config_path.exists():
        with open(local_config_path, "rb") as f:
            local_raw: dict[str, Any] = tomllib.load(f)
        raw = _deep_merge(raw, local_raw)
    return raw


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into ``base``."""
    result = dict(base)
    for key, val in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(val, dict):
            result[key] = _deep_merge(result[key], val)
        else:
            result[key] = val
    return result


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    """Apply ECOBALANCE_* env vars to the raw config dict.

    Supported overrides:
      ECOBALANCE_DB_PATH    → raw["database"]["db_path"]
      ECOBALANCE_LOG_LEVEL  → raw["logging"]["level"]
      ECOBALANCE_PROFILE    → raw["engine"]["default_profile"]
      ECOBALANCE_DEBUG      → raw["debug"]
    """
    if db_path := os.environ.get("ECOBALANCE_DB_PATH"):
        raw.setdefault("database", {})["db_path"] = db_path

    if log_level := os.environ.get("ECOBALANCE_LOG_LEVEL"):
        raw.setdefault("logging", {})["level"] = log_level

    if profile := os.environ.get("ECOBALANCE_PROFILE"):
        raw.setdefault("engine", {})["default_profile"] = profile

    if debug := os.environ.get("ECOBALANCE_DEBUG"):
        raw["debug"] = debug.lower() in ("1", "true", "yes")

    return raw


def _build_app_config(raw: dict[str, Any]) -> AppConfig:
    """Map raw TOML dict to ``AppConfig`` model structure."""
    return AppConfig(
        database=DatabaseConfig(**raw.get("database", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
        engine=EngineConfig(**raw.get("engine", {})),
        export=ExportConfig(**raw.get("export", {})),
        debug=raw.get("debug", False),
    )
