"""Query plan models for chained navigation.

This module provides Pydantic models for validating and loading YAML
"query plans": ordered lists of navigator steps applied to a document.
The ``steps:`` wrapper is optional; a bare YAML list is read as the steps.

Example:

    steps:
      - navigate: settings.preferences
      - find: {key: key, value: currency}
      - navigate: value
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, model_validator

from nested_navigator.core.comparison import ComparisonOperation
from nested_navigator.core.missing import MISSING
from nested_navigator.core.navigator import NestedNavigator, navigator


class MatchSpec(BaseModel):
  """Key/value comparison shared by find and filter steps."""

  model_config = ConfigDict(extra="forbid")

  key: Annotated[str, Field(description="Property compared on each element")]
  value: Annotated[Any, Field(description="Value compared against")]
  operation: ComparisonOperation = ComparisonOperation.EQUALS


class IndexSpec(BaseModel):
  """Index lookup; without a key, elements are compared directly."""

  model_config = ConfigDict(extra="forbid")

  value: Annotated[Any, Field(description="Value searched for")]
  key: Annotated[
    str | None, Field(default=None, description="Property compared on each element")
  ] = None
  operation: ComparisonOperation = ComparisonOperation.EQUALS


class NavigateStep(BaseModel):
  model_config = ConfigDict(extra="forbid")

  navigate: Annotated[str, Field(description="Dot-delimited path")]

  def apply(self, nav: NestedNavigator) -> NestedNavigator:
    return nav.navigate_to(self.navigate)


class FindStep(BaseModel):
  model_config = ConfigDict(extra="forbid")

  find: MatchSpec

  def apply(self, nav: NestedNavigator) -> NestedNavigator:
    return nav.find(self.find.key, self.find.value, self.find.operation)


class FilterStep(BaseModel):
  model_config = ConfigDict(extra="forbid")

  filter: MatchSpec

  def apply(self, nav: NestedNavigator) -> NestedNavigator:
    return nav.filter(self.filter.key, self.filter.value, self.filter.operation)


class IndexStep(BaseModel):
  model_config = ConfigDict(extra="forbid")

  index: IndexSpec

  def apply(self, nav: NestedNavigator) -> Any:
    spec = self.index
    if spec.key is None:
      return nav.get_index(spec.value, MISSING, spec.operation)
    return nav.get_index(spec.key, spec.value, spec.operation)


class LengthStep(BaseModel):
  model_config = ConfigDict(extra="forbid")

  length: Literal[True]

  def apply(self, nav: NestedNavigator) -> Any:
    return nav.get_length()


Step = NavigateStep | FindStep | FilterStep | IndexStep | LengthStep
TERMINAL_STEPS = (IndexStep, LengthStep)


class QueryPlan(BaseModel):
  """Ordered navigator steps.

  Index and length steps produce plain values and may only appear last.
  """

  model_config = ConfigDict(extra="forbid")

  steps: list[Step] = Field(default_factory=list, description="Steps in order")

  @model_validator(mode="after")
  def check_terminal_last(self) -> QueryPlan:
    """Validate that terminal steps only end the plan."""
    for step in self.steps[:-1]:
      if isinstance(step, TERMINAL_STEPS):
        raise ValueError("'index' and 'length' steps must be the last step")
    return self

  @classmethod
  def from_yaml(cls, yaml_content: str) -> QueryPlan:
    """Parse and validate a query plan from YAML string.

    Raises:
        ValueError: If YAML is invalid or doesn't match schema
    """
    try:
      data = yaml.safe_load(yaml_content)
    except yaml.YAMLError as e:
      raise ValueError(f"Invalid YAML syntax: {e}") from e

    if data is None:
      data = {}
    elif isinstance(data, list):
      # Bare list of steps
      data = {"steps": data}

    return cls.model_validate(data)

  @classmethod
  def from_yaml_file(cls, path: Path | str) -> QueryPlan:
    """Load and validate a query plan from a YAML file.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If YAML is invalid or doesn't match schema
    """
    path = Path(path)
    if not path.exists():
      raise FileNotFoundError(f"Query plan not found: {path}")

    return cls.from_yaml(path.read_text(encoding="utf-8"))

  def run(self, data: Any) -> Any:
    """Apply the steps to ``navigator(data)`` and return the plain result."""
    nav = navigator(data)
    for step in self.steps:
      result = step.apply(nav)
      if not isinstance(result, NestedNavigator):
        return result
      nav = result
    return nav.value()

  def to_yaml(self) -> str:
    """Serialize the plan to YAML string."""
    data = self.model_dump(mode="json", exclude_defaults=True)
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)


def format_validation_errors(errors: list[Any]) -> str:
  """Format Pydantic validation errors for user-friendly display."""
  lines = ["Invalid query plan:", ""]
  for error in errors:
    loc = ".".join(str(x) for x in error["loc"])
    lines.append(f"  - {loc}: {error['msg']}")
  return "\n".join(lines)
