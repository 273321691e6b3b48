"""Unit tests for dot-path discovery."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from pydantic import BaseModel

from nested_navigator import MISSING, navigator
from nested_navigator.core.paths import iter_paths, model_paths


class Address(BaseModel):
  city: str
  country: str


class Hobby(BaseModel):
  value: str
  since: int | None = None


class User(BaseModel):
  name: str
  address: Address
  previous_address: Address | None = None
  hobbies: list[Hobby] = []


class Account(BaseModel):
  user: User
  active: bool = True


class TestIterPaths:
  """Test path discovery over data."""

  def test_basic(self):
    """Test mappings and sequences, parents before children."""
    assert list(iter_paths({"a": {"b": 1}, "c": [1]})) == ["a", "a.b", "c", "c.0"]

  def test_scalar(self):
    """Test scalars expose no paths."""
    assert list(iter_paths(5)) == []
    assert list(iter_paths("text")) == []

  def test_depth_limit(self):
    """Test the depth cap."""
    data = {"a": {"b": {"c": {"d": 1}}}}
    assert list(iter_paths(data, max_depth=2)) == ["a", "a.b"]
    assert list(iter_paths(data, max_depth=0)) == []

  def test_default_depth_is_five(self):
    """Test the default depth."""
    data = {"a": {"b": {"c": {"d": {"e": {"f": 1}}}}}}
    assert list(iter_paths(data))[-1] == "a.b.c.d.e"

  def test_negative_depth(self):
    """Test negative depths are rejected."""
    with pytest.raises(ValueError, match="max_depth must be >= 0"):
      list(iter_paths({}, max_depth=-1))

  def test_records(self):
    """Test dataclass and model instances."""

    @dataclass
    class Point:
      x: int
      y: int

    assert list(iter_paths({"p": Point(1, 2)})) == ["p", "p.x", "p.y"]
    address = Address(city="Oslo", country="NO")
    assert list(iter_paths(address)) == ["city", "country"]

  def test_paths_resolve(self):
    """Test every discovered path navigates to a value."""
    data = {"user": {"pets": ["dog", "cat"], "address": {"city": "NY"}}, "n": None}
    nav = navigator(data)
    for path in iter_paths(data):
      assert nav.navigate_to(path).value() is not MISSING


class TestModelPaths:
  """Test path discovery over model classes."""

  def test_nested_models(self):
    """Test nested and optional models are descended."""
    assert model_paths(Account) == [
      "user",
      "user.name",
      "user.address",
      "user.address.city",
      "user.address.country",
      "user.previous_address",
      "user.previous_address.city",
      "user.previous_address.country",
      "user.hobbies",
      "active",
    ]

  def test_depth_limit(self):
    """Test the depth cap."""
    assert model_paths(Account, max_depth=1) == ["user", "active"]

  def test_negative_depth(self):
    """Test negative depths are rejected."""
    with pytest.raises(ValueError):
      model_paths(Account, max_depth=-2)
