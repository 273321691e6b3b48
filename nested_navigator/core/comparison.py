"""Comparison operations used by sequence queries."""

from __future__ import annotations

import numbers
import operator
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
  from collections.abc import Callable

logger = structlog.get_logger()


class ComparisonOperation(str, Enum):
  """Closed set of predicates a query can match with.

  - EQUALS / NOT_EQUALS: strict value-and-type equality and its negation
  - GREATER_THAN, LESS_THAN, GREATER_THAN_OR_EQUAL, LESS_THAN_OR_EQUAL:
    numeric ordering, false unless both operands are numbers
  """

  EQUALS = "equals"
  NOT_EQUALS = "not_equals"
  GREATER_THAN = "greater_than"
  LESS_THAN = "less_than"
  GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
  LESS_THAN_OR_EQUAL = "less_than_or_equal"

  @classmethod
  def parse(cls, value: ComparisonOperation | str) -> ComparisonOperation | None:
    """Look up an operation by its token.

    Args:
        value: Operation member or its string value

    Returns:
        The matching operation, or None for tokens outside the set
    """
    try:
      return cls(value)
    except ValueError:
      return None

  @property
  def is_ordering(self) -> bool:
    """Whether the operation needs numeric operands."""
    return self in _ORDERING


_ORDERING: dict[ComparisonOperation, Callable[[Any, Any], bool]] = {
  ComparisonOperation.GREATER_THAN: operator.gt,
  ComparisonOperation.LESS_THAN: operator.lt,
  ComparisonOperation.GREATER_THAN_OR_EQUAL: operator.ge,
  ComparisonOperation.LESS_THAN_OR_EQUAL: operator.le,
}


def is_numeric(value: Any) -> bool:
  """Return True for real numbers and decimals, excluding booleans."""
  if isinstance(value, bool):
    return False
  return isinstance(value, (numbers.Real, Decimal))


def strict_equals(left: Any, right: Any) -> bool:
  """Equality without cross-type coercion.

  Numbers compare by value regardless of int/float, booleans only equal
  booleans, and anything else must share a type before ``==`` is consulted.
  """
  if is_numeric(left) and is_numeric(right):
    return bool(left == right)
  if isinstance(left, bool) or isinstance(right, bool):
    return isinstance(left, bool) and isinstance(right, bool) and left is right
  if not (isinstance(left, type(right)) or isinstance(right, type(left))):
    return False
  return bool(left == right)


def compare(
  left: Any,
  right: Any,
  operation: ComparisonOperation | str = ComparisonOperation.EQUALS,
) -> bool:
  """Evaluate ``left <operation> right``.

  Total over any operands: an unknown operation token, or an ordering
  operation with a non-numeric operand, evaluates to False.

  Args:
      left: Value read from the collection
      right: Value supplied by the caller
      operation: Comparison to apply (default: equals)

  Returns:
      Result of the comparison
  """
  op = ComparisonOperation.parse(operation)
  if op is None:
    logger.debug("unknown_comparison_operation", operation=str(operation))
    return False

  if op is ComparisonOperation.EQUALS:
    return strict_equals(left, right)
  if op is ComparisonOperation.NOT_EQUALS:
    return not strict_equals(left, right)

  if not (is_numeric(left) and is_numeric(right)):
    return False
  return bool(_ORDERING[op](left, right))
