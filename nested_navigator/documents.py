"""Loading documents to navigate and parsing values typed on the command line."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

JSON_SUFFIXES = {".json"}
YAML_SUFFIXES = {".yaml", ".yml"}


def parse_document(text: str, suffix: str = "") -> Any:
  """Parse JSON or YAML text.

  JSON is tried first for unknown suffixes, then YAML.

  Raises:
      ValueError: If the text cannot be parsed
  """
  suffix = suffix.lower()
  if suffix in JSON_SUFFIXES:
    try:
      return json.loads(text)
    except json.JSONDecodeError as e:
      raise ValueError(f"Invalid JSON: {e}") from e

  if suffix not in YAML_SUFFIXES:
    try:
      return json.loads(text)
    except json.JSONDecodeError:
      pass

  try:
    return yaml.safe_load(text)
  except yaml.YAMLError as e:
    raise ValueError(f"Invalid YAML syntax: {e}") from e


def load_document(path: Path | str) -> Any:
  """Load a JSON or YAML document from disk.

  Raises:
      FileNotFoundError: If file doesn't exist
      ValueError: If the content cannot be parsed
  """
  path = Path(path)
  if not path.exists():
    raise FileNotFoundError(f"Document not found: {path}")
  return parse_document(path.read_text(encoding="utf-8"), path.suffix)


def parse_value(text: str) -> Any:
  """Interpret a command-line value as a JSON scalar when it is one.

  ``90`` becomes an int, ``true`` a bool, ``null`` None and ``"90"`` the
  string "90". Anything that is not valid JSON is kept as the raw string.
  """
  try:
    return json.loads(text)
  except json.JSONDecodeError:
    return text


def dump_value(value: Any, indent: int = 2) -> str:
  """Render a navigated value as JSON text (non-JSON types via ``str``)."""
  return json.dumps(value, indent=indent or None, ensure_ascii=False, default=str)
