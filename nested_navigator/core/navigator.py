"""Fluent navigator over nested data.

Usage:

    result = (
      navigator(data)
      .navigate_to("settings.preferences")
      .find("key", "currency")
      .navigate_to("value")
      .value()
    )

Any step that leads nowhere yields MISSING, and every later step keeps
yielding MISSING instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from nested_navigator.core import query
from nested_navigator.core.comparison import ComparisonOperation
from nested_navigator.core.missing import MISSING, Lookup, unwrap
from nested_navigator.core.path import resolve
from nested_navigator.core.paths import DEFAULT_MAX_DEPTH, iter_paths

if TYPE_CHECKING:
  from nested_navigator.core.query import Key, Operation


@dataclass(frozen=True, slots=True)
class NestedNavigator:
  """Immutable cursor into a nested value.

  Attributes:
      root: The value navigation started from, shared by derived navigators
      current: The value reached by the navigation so far
  """

  root: Any
  current: Any

  def _derive(self, value: Any) -> NestedNavigator:
    return NestedNavigator(self.root, value)

  def _derive_lookup(self, result: Lookup) -> NestedNavigator:
    return self._derive(unwrap(result))

  def navigate_to(self, path: str) -> NestedNavigator:
    """Navigate to a nested property by dot-delimited path.

    Digit-only segments index into sequences; any other segment reads a
    mapping key or record attribute.

    Args:
        path: Dot-delimited path, e.g. ``"user.hobbies.1.value"``

    Returns:
        A navigator at the resolved location (MISSING if it does not exist)
    """
    return self._derive(resolve(self.current, path))

  def find(
    self,
    key: Key,
    value: Any,
    operation: Operation = ComparisonOperation.EQUALS,
  ) -> NestedNavigator:
    """Find the first element of the current sequence matching a key/value.

    Args:
        key: Property to compare on each element, or an accessor callable
        value: Value to compare against
        operation: Comparison operation (default: equals)

    Returns:
        A navigator at the first matching element, or at MISSING when nothing
        matches, value is MISSING, or the current value is not a sequence
    """
    return self._derive_lookup(query.find_first(self.current, key, value, operation))

  def filter(
    self,
    key: Key,
    value: Any,
    operation: Operation = ComparisonOperation.EQUALS,
  ) -> NestedNavigator:
    """Keep the elements of the current sequence matching a key/value.

    Returns:
        A navigator at a new list of matches in original order (empty when
        nothing matches), or at MISSING if the current value is not a sequence
    """
    return self._derive_lookup(query.filter_all(self.current, key, value, operation))

  def get_index(
    self,
    key_or_value: Any,
    value: Any = MISSING,
    operation: Operation = ComparisonOperation.EQUALS,
  ) -> int | Any:
    """Index of the first matching element of the current sequence.

    Called with one argument on a sequence of primitives, compares each
    element to key_or_value. Called with a key and a value, compares that key
    of each element to value.

    Args:
        key_or_value: Key to compare on, or the value to search for
        value: Value to compare against in key mode
        operation: Comparison operation (default: equals)

    Returns:
        The index, -1 if no element matches, or MISSING if the current value
        is not a sequence
    """
    return unwrap(query.index_of(self.current, key_or_value, value, operation))

  def get_length(self) -> int | Any:
    """Length of the current sequence, or MISSING if it is not one."""
    return unwrap(query.length_of(self.current))

  def value(self) -> Any:
    """Return the current value (MISSING if navigation failed)."""
    return self.current

  def reset(self) -> NestedNavigator:
    """Return a navigator back at the root value."""
    return NestedNavigator(self.root, self.root)

  def paths(self, max_depth: int = DEFAULT_MAX_DEPTH) -> list[str]:
    """List the dot-paths reachable from the current value."""
    return list(iter_paths(self.current, max_depth=max_depth))

  def __repr__(self) -> str:
    return f"NestedNavigator(current={self.current!r})"


def navigator(root: Any) -> NestedNavigator:
  """Create a navigator over root, positioned at root itself."""
  return NestedNavigator(root, root)
