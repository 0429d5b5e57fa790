"""Unit tests for mdlinks.api.validate_output and the schema registry."""

import pytest
from pydantic import BaseModel

from mdlinks.api.schema_registry import SchemaRegistry
from mdlinks.api.target.cmd_show import cmd_show
from mdlinks.api.validate_output import validate_output


def cmd_local():
    """Command-shaped function outside the API package."""


def test_fills_defaults_for_registered_schema():
    output = validate_output(cmd_show, {"target": "/x", "kind": "file"})
    assert output == {"target": "/x", "kind": "file", "errors": [], "warnings": []}


def test_rejects_unknown_fields():
    with pytest.raises(ValueError, match="Output validation failed for target.show"):
        validate_output(cmd_show, {"target": "/x", "kind": "file", "extra": 1})


def test_rejects_missing_fields():
    with pytest.raises(ValueError, match="target.show"):
        validate_output(cmd_show, {"target": "/x"})


def test_non_api_function_is_not_validated():
    assert validate_output(cmd_local, {"anything": 1}) == {"anything": 1}


def test_registry_rejects_duplicates():
    class _Schema(BaseModel):
        pass

    registry = SchemaRegistry()
    registry.register_output_schema("d", "c", _Schema)
    assert registry.get_output_schema("d", "c") is _Schema
    assert registry.get_output_schema("d", "other") is None
    with pytest.raises(ValueError, match="already registered"):
        registry.register_output_schema("d", "c", _Schema)
