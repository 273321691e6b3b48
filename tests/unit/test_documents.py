"""Unit tests for document loading and value parsing."""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
  from pathlib import Path

from nested_navigator.documents import dump_value, load_document, parse_document, parse_value


class TestParseDocument:
  """Test JSON/YAML parsing."""

  def test_json(self):
    """Test JSON text."""
    assert parse_document('{"a": [1, 2]}', ".json") == {"a": [1, 2]}

  def test_yaml(self):
    """Test YAML text."""
    assert parse_document("a:\n  - 1\n  - 2\n", ".yml") == {"a": [1, 2]}

  def test_unknown_suffix_falls_back_to_yaml(self):
    """Test non-JSON text with an unknown suffix is read as YAML."""
    assert parse_document("a: b\n", ".txt") == {"a": "b"}

  def test_invalid_json(self):
    """Test broken JSON with a .json suffix."""
    with pytest.raises(ValueError, match="Invalid JSON"):
      parse_document("{", ".json")

  def test_invalid_yaml(self):
    """Test broken YAML."""
    with pytest.raises(ValueError, match="Invalid YAML"):
      parse_document("a: [b", ".yaml")


class TestLoadDocument:
  """Test loading from disk."""

  def test_load(self, tmp_path: Path):
    """Test reading a JSON file."""
    path = tmp_path / "data.json"
    path.write_text('{"user": {"name": "Ada"}}', encoding="utf-8")
    assert load_document(path) == {"user": {"name": "Ada"}}

  def test_missing_file(self, tmp_path: Path):
    """Test a missing file."""
    with pytest.raises(FileNotFoundError, match="Document not found"):
      load_document(tmp_path / "nope.json")


class TestParseValue:
  """Test command-line value parsing."""

  @pytest.mark.parametrize(
    ("text", "expected"),
    [("90", 90), ("1.5", 1.5), ("true", True), ("null", None), ('"90"', "90"), ("coding", "coding")],
  )
  def test_values(self, text, expected):
    """Test JSON scalars and raw text."""
    assert parse_value(text) == expected
    assert type(parse_value(text)) is type(expected)


class TestDumpValue:
  """Test result rendering."""

  def test_compact_and_indented(self):
    """Test the indent setting."""
    assert dump_value({"a": 1}, indent=0) == '{"a": 1}'
    assert dump_value([1], indent=2) == "[\n  1\n]"

  def test_non_json_types(self):
    """Test non-JSON values fall back to str."""
    assert dump_value({"d": Decimal("1.5")}, indent=0) == '{"d": "1.5"}'
