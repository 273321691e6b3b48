"""Absent marker and tagged lookup results.

Navigation distinguishes three outcomes that callers see flattened at the
public boundary:

- Found(value): a value is present (``None`` included)
- Absent: a key, attribute or index does not exist
- NotASequence: a sequence-only query was applied to something else
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final


class _Missing:
  """Singleton type of the absent marker."""

  _instance: _Missing | None = None

  def __new__(cls) -> _Missing:
    if cls._instance is None:
      cls._instance = super().__new__(cls)
    return cls._instance

  def __repr__(self) -> str:
    return "MISSING"

  def __bool__(self) -> bool:
    return False

  def __copy__(self) -> _Missing:
    return self

  def __deepcopy__(self, memo: dict[int, Any]) -> _Missing:
    return self

  def __reduce__(self) -> str:
    return "MISSING"


MISSING: Final = _Missing()


def is_missing(value: Any) -> bool:
  """Return True if value is the absent marker (``None`` is not)."""
  return value is MISSING


@dataclass(frozen=True, slots=True)
class Found:
  value: Any


@dataclass(frozen=True, slots=True)
class Absent:
  pass


@dataclass(frozen=True, slots=True)
class NotASequence:
  pass


Lookup = Found | Absent | NotASequence

ABSENT: Final = Absent()
NOT_A_SEQUENCE: Final = NotASequence()


def unwrap(result: Lookup) -> Any:
  """Flatten a tagged result into a plain value or MISSING."""
  if isinstance(result, Found):
    return result.value
  return MISSING


def wrap(value: Any) -> Lookup:
  """Lift a plain value (possibly MISSING) into a tagged result."""
  if value is MISSING:
    return ABSENT
  return Found(value)
