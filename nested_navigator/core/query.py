"""Comparison-driven searches over sequences.

Each function returns a tagged result so callers can tell an empty match
apart from a container that was never a sequence.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any

from nested_navigator.core.comparison import ComparisonOperation, compare
from nested_navigator.core.missing import (
  ABSENT,
  MISSING,
  NOT_A_SEQUENCE,
  Found,
  Lookup,
)
from nested_navigator.core.path import is_sequence, step

Key = str | Callable[[Any], Any]
Operation = ComparisonOperation | str


def read_key(element: Any, key: Key) -> Any:
  """Read key off a single element.

  Args:
      element: Sequence element (usually a mapping or record)
      key: Property name, or an accessor called with the element

  Returns:
      The keyed value, or MISSING if the element does not have it
  """
  if callable(key):
    return key(element)
  if isinstance(key, str):
    return step(element, key)
  # Non-string keys address mapping keys or sequence positions directly
  if isinstance(element, Mapping) and isinstance(key, Hashable):
    return element[key] if key in element else MISSING
  if is_sequence(element) and isinstance(key, int) and not isinstance(key, bool):
    return element[key] if 0 <= key < len(element) else MISSING
  return MISSING


def _matcher(key: Key, match_value: Any, operation: Operation) -> Callable[[Any], bool]:
  return lambda element: compare(read_key(element, key), match_value, operation)


def find_first(
  items: Any,
  key: Key,
  match_value: Any,
  operation: Operation = ComparisonOperation.EQUALS,
) -> Lookup:
  """Find the first element whose key satisfies the comparison.

  Returns:
      Found(element), ABSENT when nothing matches or match_value is MISSING,
      NOT_A_SEQUENCE when items is not a sequence
  """
  if not is_sequence(items):
    return NOT_A_SEQUENCE
  if match_value is MISSING:
    return ABSENT

  matches = _matcher(key, match_value, operation)
  for element in items:
    if matches(element):
      return Found(element)
  return ABSENT


def filter_all(
  items: Any,
  key: Key,
  match_value: Any,
  operation: Operation = ComparisonOperation.EQUALS,
) -> Lookup:
  """Collect every element whose key satisfies the comparison, in order."""
  if not is_sequence(items):
    return NOT_A_SEQUENCE
  if match_value is MISSING:
    return Found([])

  matches = _matcher(key, match_value, operation)
  return Found([element for element in items if matches(element)])


def index_of(
  items: Any,
  key_or_value: Any,
  match_value: Any = MISSING,
  operation: Operation = ComparisonOperation.EQUALS,
) -> Lookup:
  """Position of the first matching element.

  With match_value omitted and a non-mapping key_or_value, elements are
  compared directly against key_or_value. Otherwise key_or_value names the
  key read off each element and match_value is the comparison target.

  Returns:
      Found(index), Found(-1) when nothing matches, NOT_A_SEQUENCE when items
      is not a sequence
  """
  if not is_sequence(items):
    return NOT_A_SEQUENCE

  if match_value is MISSING and not isinstance(key_or_value, Mapping):
    def matches(element: Any) -> bool:
      return compare(element, key_or_value, operation)
  else:
    matches = _matcher(key_or_value, match_value, operation)

  for position, element in enumerate(items):
    if matches(element):
      return Found(position)
  return Found(-1)


def length_of(items: Any) -> Lookup:
  """Element count of a sequence."""
  if not is_sequence(items):
    return NOT_A_SEQUENCE
  return Found(len(items))
