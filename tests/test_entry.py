"""Tests for routefinder.entry — RouteEntry and RouteMatch."""

import re

import pytest

from routefinder.entry import RouteEntry, RouteMatch


def _entry(name: str = "/users", suffix: str = "") -> RouteEntry:
    return RouteEntry(
        name=name,
        matcher=re.compile(re.escape(name)),
        literal_prefix=name,
        is_literal=not suffix,
        suffix=suffix,
    )


class TestRouteEntry:
    def test_base_without_suffix(self) -> None:
        assert _entry("/users").base == "/users"

    def test_base_strips_suffix(self) -> None:
        assert _entry("/bar/...", "/...").base == "/bar"
        assert _entry("/bar/???", "/???").base == "/bar"

    def test_flags(self) -> None:
        assert _entry("/bar/...", "/...").is_open is True
        assert _entry("/bar/...", "/...").is_discard is False
        assert _entry("/bar/???", "/???").is_discard is True

    def test_frozen(self) -> None:
        entry = _entry()
        with pytest.raises(AttributeError):
            entry.name = "/other"  # type: ignore[misc]


class TestRouteMatch:
    def test_creation(self) -> None:
        entry = _entry()
        match = RouteMatch(entry=entry, template="/users", params={})
        assert match.entry is entry
        assert match.params == {}

    def test_frozen(self) -> None:
        match = RouteMatch(entry=_entry(), template="/users", params={})
        with pytest.raises(AttributeError):
            match.template = "/other"  # type: ignore[misc]
