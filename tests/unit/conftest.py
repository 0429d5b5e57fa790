"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for mocking/patching.
"""

from pathlib import Path

import pytest

from mdlinks.api.config.MdlinksConfig import MdlinksConfig
from mdlinks.api.target.Opener import Opener
from mdlinks.api.target.OpenerConfig import OpenerConfig
from tests.conftest import (
    minimal_config_dict,
    minimal_mdlinks_config,
    opener_config_dict,
    read_actions,
    run_cmd,
)

__all__ = [
    "TrackedConfig",
    "create_patched_config",
    "minimal_config_dict",
    "minimal_mdlinks_config",
    "opener_config_dict",
    "patch_mdlinks_config",
    "read_actions",
    "run_cmd",
]


class TrackedConfig:
    """Wrapper around MdlinksConfig that tracks save() calls.

    Delegates attribute access to the underlying config.
    """

    def __init__(self, config: MdlinksConfig):
        object.__setattr__(self, "_config", config)
        object.__setattr__(self, "save_calls", 0)

    def __getattr__(self, name: str):
        return getattr(self._config, name)

    def __setattr__(self, name: str, value):
        if name in ("_config", "save_calls"):
            object.__setattr__(self, name, value)
        else:
            setattr(self._config, name, value)

    def save(self) -> None:
        self.save_calls += 1


def create_patched_config(monkeypatch, opener_data: dict | None = None) -> TrackedConfig:
    """Patch MdlinksConfig.load to return a TrackedConfig instance.

    Args:
        monkeypatch: pytest monkeypatch fixture
        opener_data: Optional keyword arguments for opener_config_dict().
    """
    base_config = minimal_config_dict()
    if opener_data:
        base_config["opener"] = opener_config_dict(**opener_data)

    tracked = TrackedConfig(MdlinksConfig(**base_config))
    monkeypatch.setattr(MdlinksConfig, "load", lambda: tracked)
    return tracked


@pytest.fixture
def patch_mdlinks_config(monkeypatch) -> TrackedConfig:
    """Fixture that patches MdlinksConfig with default settings."""
    return create_patched_config(monkeypatch)


@pytest.fixture
def make_opener():
    """Entered Opener on the recording test backend; factory takes opener_config_dict() kwargs."""
    openers: list[Opener] = []

    def factory(**kwargs) -> Opener:
        opener = Opener(OpenerConfig(**opener_config_dict(**kwargs))).__enter__()
        openers.append(opener)
        return opener

    yield factory

    for opener in openers:
        opener.__exit__(None, None, None)


@pytest.fixture
def docs(tmp_path: Path) -> Path:
    """Empty directory that plays the role of a document's parent."""
    root = tmp_path / "docs"
    root.mkdir()
    return root
