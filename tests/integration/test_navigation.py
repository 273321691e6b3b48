"""Integration tests for navigating realistic documents end to end."""

from __future__ import annotations

from textwrap import dedent
from typing import TYPE_CHECKING

import pytest
from pydantic import BaseModel

from nested_navigator import MISSING, QueryPlan, iter_paths, model_paths, navigator
from nested_navigator.documents import load_document

if TYPE_CHECKING:
  from pathlib import Path


class Notifications(BaseModel):
  email: bool
  push: bool
  frequency: str


class Preference(BaseModel):
  key: str
  value: str | int | bool


class Settings(BaseModel):
  theme: str
  notifications: Notifications
  preferences: list[Preference]


class Document(BaseModel):
  settings: Settings


@pytest.fixture
def document_file(tmp_path: Path) -> Path:
  """Write a YAML document resembling an application config."""
  path = tmp_path / "config.yaml"
  path.write_text(
    dedent("""
      settings:
        theme: dark
        notifications:
          email: true
          push: false
          frequency: weekly
        preferences:
          - key: language
            value: en
          - key: currency
            value: USD
          - key: autoSave
            value: true
          - key: fontSize
            value: 14
    """),
    encoding="utf-8",
  )
  return path


class TestDocumentNavigation:
  """Navigate a document loaded from disk."""

  def test_fluent_queries(self, document_file: Path):
    """Test the full set of operations on one document."""
    nav = navigator(load_document(document_file))
    prefs = nav.navigate_to("settings.preferences")

    assert prefs.get_length() == 4
    assert prefs.find("key", "currency").navigate_to("value").value() == "USD"
    assert prefs.get_index("value", 14, "greater_than_or_equal") == 3
    assert prefs.filter("value", True).navigate_to("0.key").value() == "autoSave"
    assert prefs.filter("value", 1).value() == []
    assert nav.navigate_to("settings.notifications.frequency").value() == "weekly"
    assert nav.navigate_to("settings.notifications.sms").value() is MISSING

  def test_plan_matches_chain(self, document_file: Path):
    """Test a plan and the equivalent chain agree."""
    data = load_document(document_file)
    plan = QueryPlan.from_yaml(dedent("""
      - navigate: settings.preferences
      - filter: {key: value, value: en, operation: not_equals}
      - index: {key: key, value: fontSize}
    """))
    chained = (
      navigator(data)
      .navigate_to("settings.preferences")
      .filter("value", "en", "not_equals")
      .get_index("key", "fontSize")
    )
    assert plan.run(data) == chained == 2

  def test_model_paths_resolve(self, document_file: Path):
    """Test every declared model path resolves in the loaded data."""
    data = load_document(document_file)
    Document.model_validate(data)
    nav = navigator(data)
    for path in model_paths(Document):
      assert nav.navigate_to(path).value() is not MISSING, path

  def test_discovered_paths_cover_model_paths(self, document_file: Path):
    """Test data discovery finds at least the declared paths."""
    data = load_document(document_file)
    discovered = set(iter_paths(data))
    assert set(model_paths(Document)) <= discovered
    assert "settings.preferences.3.value" in discovered

  def test_navigating_a_model_instance(self, document_file: Path):
    """Test models navigate like the raw data."""
    model = Document.model_validate(load_document(document_file))
    prefs = navigator(model).navigate_to("settings.preferences")
    assert prefs.find("key", "language").navigate_to("value").value() == "en"
    assert navigator(model).navigate_to("settings.theme").value() == "dark"
