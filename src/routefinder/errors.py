"""Routefinder exception hierarchy.

Shared across the compiler and the route table so callers catch one
family of types.
"""

from dataclasses import dataclass


class RoutefinderError(Exception):
    """Base for all routefinder-specific errors."""


class ConfigurationError(RoutefinderError):
    """Raised when a ``FinderConfig`` is invalid.

    Checked once, when a route table is constructed.
    """


@dataclass(frozen=True, slots=True)
class CompilationError(RoutefinderError):
    """A template produced a pattern that does not compile.

    Raised by ``compile_template`` and by every table operation that
    compiles templates (construction, ``add``, ``set``).
    """

    template: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"Invalid route template {self.template!r}: {self.detail}"
        return f"Invalid route template {self.template!r}"
