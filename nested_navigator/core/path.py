"""Dot-path splitting and segment-by-segment traversal."""

from __future__ import annotations

from collections.abc import Collection, Mapping, Sequence
from decimal import Decimal
from typing import Any

from nested_navigator.core.missing import MISSING

PATH_DELIMITER = "."

# Values that never expose readable properties
_PRIMITIVES = (str, bytes, bytearray, bool, int, float, complex, Decimal)


def split_path(path: str) -> list[str]:
  """Split a dot-delimited path into its segments.

  An empty path is a single segment naming the empty key.

  Raises:
      TypeError: If path is not a string
  """
  if not isinstance(path, str):
    raise TypeError(f"Path must be a string, got {type(path).__name__}")
  return path.split(PATH_DELIMITER)


def is_sequence(value: Any) -> bool:
  """Return True for ordered, integer-indexed containers (not text)."""
  return isinstance(value, Sequence) and not isinstance(
    value, (str, bytes, bytearray)
  )


def is_index_segment(segment: str) -> bool:
  """Return True if segment is made only of ASCII decimal digits."""
  return segment.isascii() and segment.isdigit()


def read_property(container: Any, name: str) -> Any:
  """Read a named property off a container.

  Mappings are read by key, other records by public non-callable attribute.
  Primitives, None and non-mapping collections have no named properties.

  Returns:
      The property value, or MISSING when it does not exist
  """
  if container is None or container is MISSING:
    return MISSING
  if isinstance(container, Mapping):
    if name in container:
      return container[name]
    return MISSING
  if isinstance(container, (Collection, *_PRIMITIVES)):
    return MISSING
  if not name or name.startswith("_"):
    return MISSING
  value = getattr(container, name, MISSING)
  if callable(value):
    return MISSING
  return value


def step(accumulator: Any, segment: str) -> Any:
  """Descend one segment from accumulator."""
  if accumulator is MISSING:
    return MISSING
  if is_sequence(accumulator) and is_index_segment(segment):
    digits = segment.lstrip("0") or "0"
    # More digits than any in-range index
    if len(digits) > len(str(len(accumulator))):
      return MISSING
    index = int(digits)
    if index < len(accumulator):
      return accumulator[index]
    return MISSING
  return read_property(accumulator, segment)


def resolve(value: Any, path: str) -> Any:
  """Walk path through value.

  Args:
      value: Starting value (may be MISSING)
      path: Dot-delimited path

  Returns:
      Value at the end of the path, or MISSING if any segment did not resolve
  """
  accumulator = value
  for segment in split_path(path):
    accumulator = step(accumulator, segment)
    if accumulator is MISSING:
      break
  return accumulator
