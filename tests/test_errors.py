"""Tests for routefinder.errors — exception hierarchy and messages."""

import pytest

from routefinder.errors import CompilationError, ConfigurationError, RoutefinderError


class TestHierarchy:
    def test_compilation_error_is_routefinder_error(self) -> None:
        assert issubclass(CompilationError, RoutefinderError)

    def test_configuration_error_is_routefinder_error(self) -> None:
        assert issubclass(ConfigurationError, RoutefinderError)


class TestCompilationError:
    def test_message_with_detail(self) -> None:
        err = CompilationError("/:id/:id", "redefinition of group name")
        assert str(err) == "Invalid route template '/:id/:id': redefinition of group name"

    def test_message_without_detail(self) -> None:
        assert str(CompilationError("/x")) == "Invalid route template '/x'"

    def test_can_be_raised_and_caught(self) -> None:
        with pytest.raises(RoutefinderError):
            raise CompilationError("/x", "boom")
