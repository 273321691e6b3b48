"""Fluent navigation and querying of nested data by dot-delimited paths."""

from nested_navigator.core import (
  MISSING,
  ComparisonOperation,
  NestedNavigator,
  compare,
  is_missing,
  iter_paths,
  model_paths,
  navigator,
)
from nested_navigator.core.query_plan import QueryPlan

__all__ = [
  "MISSING",
  "ComparisonOperation",
  "NestedNavigator",
  "QueryPlan",
  "compare",
  "is_missing",
  "iter_paths",
  "model_paths",
  "navigator",
]
