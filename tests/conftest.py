"""Shared pytest fixtures for CLI and module-entry tests.

Fixtures read as plain English and are discovered implicitly by pytest.
"""

from __future__ import annotations

import contextlib
import os
import re
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import fields, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

if TYPE_CHECKING:
    from pkg_b.composition import AppServices

_COVERAGE_BASENAME = ".coverage.pkg_b"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Point ``COVERAGE_FILE`` at the temp directory before pytest-cov starts."""
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load the project's .env file when present."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()

ANSI_ESCAPE_PATTERN = re.compile(r"\x1B\[[0-?]*[ -/]*[@-~]")
CONFIG_FIELDS: tuple[str, ...] = tuple(field.name for field in fields(type(lib_cli_exit_tools.config)))

#: Values lib_log_rich and a layered-config loader would refuse or misroute.
HOSTILE_ENVIRONMENT: dict[str, str] = {
    "LOG_CONSOLE_LEVEL": "nonsense",
    "LOG_RING_BUFFER_SIZE": "many",
    "PKG_B___LIB_LOG_RICH__CONSOLE_LEVEL": "nonsense",
}


def _snapshot_cli_config() -> dict[str, object]:
    return {name: getattr(lib_cli_exit_tools.config, name) for name in CONFIG_FIELDS}


def _restore_cli_config(snapshot: dict[str, object]) -> None:
    for name, value in snapshot.items():
        setattr(lib_cli_exit_tools.config, name, value)


def _services_with(**replacements: Any) -> Callable[[], AppServices]:
    """Return a factory for production services with some ports swapped out."""
    from pkg_b.composition import build_production

    services = replace(build_production(), **replacements)
    return lambda: services


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a fresh CliRunner per test.

    ``result.stdout`` holds command output only; log lines go to
    ``result.stderr``.
    """
    return CliRunner()


@pytest.fixture
def production_factory() -> Callable[[], AppServices]:
    """Provide the ``build_production`` services factory."""
    from pkg_b.composition import build_production

    return build_production


@pytest.fixture
def logging_refused_factory() -> Callable[[], AppServices]:
    """Production services whose logging port reports a refused runtime."""
    return _services_with(start_logging=lambda: False)


@pytest.fixture
def recorded_lines() -> list[str]:
    return []


@pytest.fixture
def recording_factory(recorded_lines: list[str]) -> Callable[[], AppServices]:
    """Production services that collect banner lines instead of echoing them."""
    return _services_with(write_line=recorded_lines.append, start_logging=lambda: False)


@pytest.fixture
def strip_ansi() -> Callable[[str], str]:
    """Return a helper that strips ANSI escape sequences from a string."""

    def _strip(value: str) -> str:
        return ANSI_ESCAPE_PATTERN.sub("", value)

    return _strip


@pytest.fixture
def managed_traceback_state() -> Iterator[None]:
    """Reset ``lib_cli_exit_tools.config`` to a clean baseline and restore it afterwards."""
    lib_cli_exit_tools.reset_config()
    lib_cli_exit_tools.config.traceback = False
    lib_cli_exit_tools.config.traceback_force_color = False
    snapshot = _snapshot_cli_config()
    try:
        yield
    finally:
        _restore_cli_config(snapshot)


@pytest.fixture
def hostile_home(tmp_path: Path) -> Path:
    """A home directory whose user config file and ``.env`` are unreadable garbage."""
    config_dir = tmp_path / ".config" / "pkg-b"
    config_dir.mkdir(parents=True)
    (config_dir / "config.toml").write_text("[lib_log_rich\nconsole_level = = 'nonsense'\n", encoding="utf-8")
    (tmp_path / ".env").write_text("LOG_CONSOLE_LEVEL=nonsense\nthis is not an assignment\n", encoding="utf-8")
    return tmp_path


@pytest.fixture
def hostile_environment(hostile_home: Path, monkeypatch: pytest.MonkeyPatch) -> dict[str, str]:
    """Apply :data:`HOSTILE_ENVIRONMENT` plus the broken home to this process.

    Returns the full environment so subprocess tests can pass it on.
    """
    overrides = {
        **HOSTILE_ENVIRONMENT,
        "HOME": str(hostile_home),
        "XDG_CONFIG_HOME": str(hostile_home / ".config"),
    }
    for key, value in overrides.items():
        monkeypatch.setenv(key, value)
    monkeypatch.chdir(hostile_home)
    return {**os.environ, **overrides}


@pytest.fixture
def broken_output_factory() -> Callable[[], AppServices]:
    """Production services whose stdout port raises, to exercise the exit-code boundary."""

    def _refuse(line: str) -> None:
        raise RuntimeError(f"stdout refused {line!r}")

    return _services_with(write_line=_refuse, start_logging=lambda: False)
