"""Core navigation: path traversal, comparison and sequence queries."""

from nested_navigator.core.comparison import ComparisonOperation, compare
from nested_navigator.core.missing import MISSING, is_missing
from nested_navigator.core.navigator import NestedNavigator, navigator
from nested_navigator.core.paths import iter_paths, model_paths

__all__ = [
  "MISSING",
  "ComparisonOperation",
  "NestedNavigator",
  "compare",
  "is_missing",
  "iter_paths",
  "model_paths",
  "navigator",
]
