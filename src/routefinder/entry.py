"""RouteEntry and RouteMatch frozen dataclasses."""

import re
from dataclasses import dataclass

# Trailing markers recognised by the compiler
OPEN_SUFFIX = "/..."
DISCARD_SUFFIX = "/???"


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """One compiled template.

    Created by ``compile_template`` and stored, in insertion order, by
    the route table. ``literal_prefix`` and ``is_literal`` only let the
    table skip work; ``matcher`` alone decides whether a path matches.
    """

    name: str
    matcher: re.Pattern[str]
    literal_prefix: str
    is_literal: bool
    suffix: str = ""
    variables: tuple[str, ...] = ()

    @property
    def base(self) -> str:
        """The template without its ``/...`` or ``/???`` marker."""
        if self.suffix:
            return self.name[: -len(self.suffix)]
        return self.name

    @property
    def is_open(self) -> bool:
        return self.suffix == OPEN_SUFFIX

    @property
    def is_discard(self) -> bool:
        return self.suffix == DISCARD_SUFFIX


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful lookup.

    ``template`` is the effective template: the entry's name, with the
    matched tail spliced in for ``/...`` entries.
    """

    entry: RouteEntry
    template: str
    params: dict[str, str]
