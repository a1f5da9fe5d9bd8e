"""
Fixtures for CLI tests: an isolated config file pointing at a temp database.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

_ENV_OVERRIDES = (
    "ECOBALANCE_DB_PATH",
    "ECOBALANCE_LOG_LEVEL",
    "ECOBALANCE_PROFILE",
    "ECOBALANCE_DEBUG",
)


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "db" / "eco.db"


@pytest.fixture
def config_file(tmp_path: Path, db_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Write a TOML config whose DB, exports and logs all live under tmp_path.

    Logging is kept at WARNING so INFO lines never mix into JSON output.
    """
    for var in _ENV_OVERRIDES:
        monkeypatch.delenv(var, raising=False)

    path = tmp_path / "config.toml"
    path.write_text(
        "\n".join(
            [
                "[database]",
                f'db_path = "{db_path.as_posix()}"',
                "wal_mode = false",
                "",
                "[logging]",
                'level = "WARNING"',
                'log_file = ""',
                "",
                "[engine]",
                "max_recommendations = 5",
                'default_profile = "home"',
                "",
                "[export]",
                f'output_dir = "{(tmp_path / "out").as_posix()}"',
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path
