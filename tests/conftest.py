"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from mdlinks.api.config.MdlinksConfig import MdlinksConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no desktop side effects")
    config.addinivalue_line("markers", "ref: reference scanning and lookup")
    config.addinivalue_line("markers", "target: target classification and opening")
    config.addinivalue_line("markers", "config: configuration loading and commands")
    config.addinivalue_line("markers", "cli: typer command wiring")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True, scope="session")
def _session_log_home(tmp_path_factory):
    """Keep the process-wide logfile out of the real home directory."""
    with pytest.MonkeyPatch.context() as mp:
        mp.setenv("MDLINKS_HOME", str(tmp_path_factory.mktemp("mdlinks-log-home")))
        yield


# =============================================================================
# Configuration Helpers
# =============================================================================


def opener_config_dict(
    fail_providers: list[str] | None = None, fail_show: bool = False, record_file: str = ""
) -> dict:
    """Opener section using the recording test backend."""
    return {
        "type": "test",
        "data": {
            "fail_providers": list(fail_providers or []),
            "fail_show": fail_show,
            "record_file": record_file,
        },
    }


def minimal_config_dict() -> dict:
    """Minimal valid mdlinks configuration dict for testing.

    Uses the test opener backend so nothing is ever launched on the desktop.
    """
    return {
        "scan": {"extensions": [".md", ".markdown"]},
        "opener": opener_config_dict(),
        "log": {"level": "DEBUG", "max_bytes": 1024 * 1024, "backup_count": 1},
    }


def minimal_mdlinks_config() -> MdlinksConfig:
    """Build an MdlinksConfig from the minimal config dict."""
    return MdlinksConfig(**minimal_config_dict())


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def mdlinks_home(tmp_path: Path, monkeypatch, minimal_config_dict: dict) -> Path:
    """Set up MDLINKS_HOME with a minimal config file.

    Returns:
        Path to the mdlinks home directory
    """
    home = tmp_path / ".mdlinks"
    home.mkdir()
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict), encoding="utf-8")
    return home


@pytest.fixture
def record_file(tmp_path: Path, monkeypatch) -> Path:
    """Set up MDLINKS_HOME with a test opener that records actions to a JSON-lines file.

    Returns:
        Path to the (not yet created) record file
    """
    home = tmp_path / ".mdlinks"
    home.mkdir()
    record = tmp_path / "actions.jsonl"
    config = minimal_config_dict()
    config["opener"] = opener_config_dict(record_file=str(record))
    monkeypatch.setenv("MDLINKS_HOME", str(home))
    (home / "config.json").write_text(json.dumps(config), encoding="utf-8")
    return record


def read_actions(record: Path) -> list[dict]:
    """Actions recorded by the test opener backend, oldest first."""
    if not record.exists():
        return []
    return [json.loads(line) for line in record.read_text(encoding="utf-8").splitlines() if line]


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
