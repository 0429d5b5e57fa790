"""Unit tests for mdlinks.api.target.cmd_open."""

import pytest

from mdlinks.api.target.cmd_open import cmd_open
from mdlinks.api.validate_output import validate_output
from tests.unit.conftest import create_patched_config, read_actions, run_cmd

pytestmark = pytest.mark.target


def test_missing_target_is_created_and_shown(tmp_path, record_file):
    target = tmp_path / "notes" / "todo.md"

    result = run_cmd(cmd_open, str(target))

    assert result.success
    assert result.output["action"] == "created"
    assert result.output["kind"] == "missing"
    assert result.output["created"] is True
    assert target.is_file()
    assert read_actions(record_file) == [{"action": "show", "path": str(target), "text": ""}]
    assert result.result == f"Created and opened {target}"
    assert validate_output(cmd_open, result.output) == result.output


def test_existing_file_is_opened(tmp_path, record_file):
    target = tmp_path / "a.md"
    target.write_text("body", encoding="utf-8")

    result = run_cmd(cmd_open, str(target))

    assert result.output["action"] == "opened"
    assert result.output["created"] is False
    assert read_actions(record_file)[0]["text"] == "body"


def test_directory_is_revealed(tmp_path, record_file):
    result = run_cmd(cmd_open, str(tmp_path))

    assert result.success
    assert result.output["action"] == "revealed"
    assert result.output["revealed_by"] == "file_browser"
    assert [a["action"] for a in read_actions(record_file)] == ["reveal"]


def test_reveal_exhaustion_warns(tmp_path, monkeypatch):
    create_patched_config(monkeypatch, {"fail_providers": ["file_browser", "os"]})

    result = run_cmd(cmd_open, str(tmp_path))

    assert result.success
    assert result.output["action"] == "none"
    assert result.output["warnings"] == [f"No reveal action available for: {tmp_path}"]


def test_show_failure(tmp_path, monkeypatch):
    create_patched_config(monkeypatch, {"fail_show": True})
    target = tmp_path / "a.md"

    result = run_cmd(cmd_open, str(target))

    assert result.success is False
    assert result.output["action"] == "failed"
    assert result.output["errors"] == [f"Failed to open: {target}"]
    assert result.output["created"] is True
    assert result.result == f"Failed to open: {target}"


def test_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("MDLINKS_HOME", str(tmp_path / "empty-home"))

    result = run_cmd(cmd_open, str(tmp_path / "a.md"))

    assert result.success is False
    assert "not found" in result.output["errors"][0]
    assert result.output["action"] == "failed"
    assert not (tmp_path / "a.md").exists()


def test_config_that_is_not_an_object(tmp_path, monkeypatch):
    monkeypatch.setenv("MDLINKS_HOME", str(tmp_path))
    (tmp_path / "config.json").write_text('"linux"')

    result = run_cmd(cmd_open, str(tmp_path / "a.md"))

    assert result.success is False
    assert result.result.startswith("Error loading configuration")
    assert "must be an object" in result.output["errors"][0]
    assert not (tmp_path / "a.md").exists()
