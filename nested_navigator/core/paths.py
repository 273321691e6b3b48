"""Discovery of the dot-paths a value or model exposes.

Runtime counterpart of a typed "nested key" listing: given data, or a
pydantic model class, enumerate every path ``navigate_to`` can resolve.
"""

from __future__ import annotations

import dataclasses
import types
import typing
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

from nested_navigator.core.path import PATH_DELIMITER, is_sequence

DEFAULT_MAX_DEPTH = 5


def _check_depth(max_depth: int) -> None:
  if max_depth < 0:
    raise ValueError(f"max_depth must be >= 0, got {max_depth}")


def _children(value: Any) -> Iterator[tuple[str, Any]]:
  if isinstance(value, Mapping):
    for key, child in value.items():
      yield str(key), child
  elif is_sequence(value):
    for index, child in enumerate(value):
      yield str(index), child
  elif isinstance(value, BaseModel):
    for name in type(value).model_fields:
      yield name, getattr(value, name)
  elif dataclasses.is_dataclass(value) and not isinstance(value, type):
    for field in dataclasses.fields(value):
      yield field.name, getattr(value, field.name)


def iter_paths(value: Any, max_depth: int = DEFAULT_MAX_DEPTH) -> Iterator[str]:
  """Yield every dot-path reachable in value, parents before children.

  Args:
      value: Data to walk (mappings, sequences, dataclasses, pydantic models)
      max_depth: Maximum number of segments in a yielded path

  Raises:
      ValueError: If max_depth is negative
  """
  _check_depth(max_depth)
  yield from _walk(value, "", max_depth)


def _walk(value: Any, prefix: str, remaining: int) -> Iterator[str]:
  if remaining == 0:
    return
  for segment, child in _children(value):
    path = f"{prefix}{PATH_DELIMITER}{segment}" if prefix else segment
    yield path
    yield from _walk(child, path, remaining - 1)


def _model_type(annotation: Any) -> type[BaseModel] | None:
  """Extract the model class from ``Model`` or ``Model | None``."""
  if isinstance(annotation, type) and issubclass(annotation, BaseModel):
    return annotation
  if typing.get_origin(annotation) in (typing.Union, types.UnionType):
    members = [a for a in typing.get_args(annotation) if a is not type(None)]
    if len(members) == 1:
      return _model_type(members[0])
  return None


def model_paths(
  model: type[BaseModel], max_depth: int = DEFAULT_MAX_DEPTH
) -> list[str]:
  """List the dot-paths declared by a pydantic model class.

  Nested model fields are descended; sequence fields are listed but not
  descended since their indices only exist at runtime.

  Args:
      model: Pydantic model class
      max_depth: Maximum number of segments in a listed path

  Returns:
      Paths in field declaration order, parents before children
  """
  _check_depth(max_depth)
  paths: list[str] = []

  def visit(cls: type[BaseModel], prefix: str, remaining: int) -> None:
    if remaining == 0:
      return
    for name, field in cls.model_fields.items():
      path = f"{prefix}{PATH_DELIMITER}{name}" if prefix else name
      paths.append(path)
      nested = _model_type(field.annotation)
      if nested is not None:
        visit(nested, path, remaining - 1)

  visit(model, "", max_depth)
  return paths
