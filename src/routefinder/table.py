"""Ordered route table with first-match-wins lookup.

Templates are compiled as they are added and scanned in insertion order;
the first entry that matches a path wins. There is no locking: a table
belongs to whoever built it. Use ``copy()`` to hand an independent
snapshot to another thread.
"""

import logging
from collections.abc import Iterable, Iterator

from routefinder.compiler import compile_template
from routefinder.config import FinderConfig
from routefinder.entry import RouteEntry, RouteMatch

logger = logging.getLogger("routefinder.table")


class Routefinder:
    """Append-only table of compiled route templates.

    Usage::

        routes = Routefinder("/", "/pay/:card", "/shop/:item/...")
        routes.lookup("/shop/gopher/thumbnail")
        # -> ("/shop/:item/thumbnail", {"item": "gopher"})

        routes.lookup("/nowhere")
        # -> ("", {})
    """

    __slots__ = ("_config", "_entries")

    def __init__(self, *templates: str, config: FinderConfig | None = None) -> None:
        self._config = config or FinderConfig()
        self._config.validate()
        self._entries: list[RouteEntry] = []
        for template in templates:
            self.add(template)

    @classmethod
    def from_templates(
        cls, templates: Iterable[str], config: FinderConfig | None = None
    ) -> "Routefinder":
        """Build a table from any iterable of templates.

        Raises ``CompilationError`` on the first template that fails; no
        table is returned in that case.
        """
        return cls(*templates, config=config)

    # -- Mutation -----------------------------------------------------------

    def add(self, template: str) -> None:
        """Compile *template* and append it. Empty templates are ignored."""
        if not template:
            logger.debug("Ignoring empty route template")
            return
        self._entries.append(compile_template(template))

    def set(self, value: str) -> None:
        """Add every template in a separator-joined string.

        Not transactional: templates before a failing one stay added.
        """
        for template in value.split(self._config.separator):
            self.add(template)

    # -- Lookup -------------------------------------------------------------

    def match(self, path: str) -> RouteMatch | None:
        """Resolve *path* to the first matching entry, or ``None``."""
        if self._config.strip_query:
            path = path.split("?", 1)[0]

        for entry in self._entries:
            if not path.startswith(entry.literal_prefix):
                continue

            if entry.is_literal:
                if path == entry.name:
                    return RouteMatch(entry=entry, template=entry.name, params={})
                continue

            found = entry.matcher.fullmatch(path)
            if found is None:
                continue

            params = {name: found.group(name) for name in entry.variables}
            template = entry.name
            if entry.is_open:
                tail = found.group(entry.matcher.groups)
                template = entry.base if tail is None else f"{entry.base}/{tail}"
            return RouteMatch(entry=entry, template=template, params=params)

        logger.debug("No route matches %r", path)
        return None

    def lookup(self, path: str) -> tuple[str, dict[str, str]]:
        """Return ``(template, params)`` for *path*.

        An empty template name means nothing matched; empty templates can
        never be added, so it is never a real result.
        """
        result = self.match(path)
        if result is None:
            return "", {}
        return result.template, result.params

    # -- Introspection ------------------------------------------------------

    @property
    def config(self) -> FinderConfig:
        return self._config

    @property
    def entries(self) -> tuple[RouteEntry, ...]:
        return tuple(self._entries)

    @property
    def templates(self) -> tuple[str, ...]:
        """Template names in insertion order."""
        return tuple(entry.name for entry in self._entries)

    def copy(self) -> "Routefinder":
        """Return an independent table sharing the (immutable) entries."""
        clone = type(self)(config=self._config)
        clone._entries = list(self._entries)
        return clone

    def to_string(self) -> str:
        """Join template names with the configured separator."""
        return self._config.separator.join(self.templates)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(map(repr, self.templates))})"

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[RouteEntry]:
        return iter(self._entries)
