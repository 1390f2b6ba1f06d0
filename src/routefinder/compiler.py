"""Template compilation.

Turns a path template such as ``/shop/:item/...`` into a ``RouteEntry``
holding an anchored regular expression and the metadata the route table
uses to short-circuit its scan.

Template syntax:

- ``:name`` runs from the colon to the next ``/`` (or the end) and binds
  exactly one non-empty path segment.
- A trailing ``/...`` also matches any remaining path; the tail is
  spliced into the template returned by lookup.
- A trailing ``/???`` matches like ``/...`` but the tail is dropped.
- Everything else matches literally.
"""

import logging
import re

from routefinder.entry import DISCARD_SUFFIX, OPEN_SUFFIX, RouteEntry
from routefinder.errors import CompilationError

logger = logging.getLogger("routefinder.compiler")

# A variable: colon up to the next slash
VARIABLE_PATTERN = re.compile(r":[^/]+")

# Regex fragment bound to each variable
SEGMENT_PATTERN = r"[^/]+"

# Optional "/<tail>" after the base. The tail group is unnamed, so it can
# never clash with a ``:name`` variable; it is always the last group.
TAIL_PATTERN = r"(?:/(.*))?"

# Tail for a bare "/..." or "/???": the slash is required, so the empty
# path never matches
ROOT_TAIL_PATTERN = r"/(.*)"


def split_suffix(template: str) -> tuple[str, str]:
    """Split *template* into ``(base, suffix)``.

    Examples::

        "/shop/:item/..."  -> ("/shop/:item", "/...")
        "/static/???"      -> ("/static", "/???")
        "/users"           -> ("/users", "")
    """
    for suffix in (OPEN_SUFFIX, DISCARD_SUFFIX):
        if template.endswith(suffix):
            return template[: -len(suffix)], suffix
    return template, ""


def literal_prefix(base: str) -> str:
    """Return the fixed text before the first variable in *base*."""
    found = VARIABLE_PATTERN.search(base)
    if found is None:
        return base
    return base[: found.start()]


def translate(template: str, base: str) -> tuple[str, tuple[str, ...]]:
    """Translate a suffix-free *base* into regex source.

    Returns the (unanchored) pattern and the variable names in order.
    Raises ``CompilationError`` for a variable name that cannot be a
    capture group name.
    """
    parts: list[str] = []
    variables: list[str] = []
    pos = 0
    for found in VARIABLE_PATTERN.finditer(base):
        name = found.group()[1:]
        if not name.isidentifier():
            msg = f"variable name {name!r} is not a valid identifier"
            raise CompilationError(template, msg)
        parts.append(re.escape(base[pos : found.start()]))
        parts.append(f"(?P<{name}>{SEGMENT_PATTERN})")
        variables.append(name)
        pos = found.end()
    parts.append(re.escape(base[pos:]))
    return "".join(parts), tuple(variables)


def compile_template(template: str) -> RouteEntry:
    """Compile one template into a ``RouteEntry``.

    Raises ``CompilationError`` for an empty template, a variable name that
    is not an identifier, or a pattern that does not compile (the same
    variable twice in one template, chained to the ``re.error``).
    """
    if not template:
        raise CompilationError(template, "template must not be empty")

    base, suffix = split_suffix(template)
    source, variables = translate(template, base)
    if suffix:
        source += TAIL_PATTERN if base else ROOT_TAIL_PATTERN

    try:
        matcher = re.compile(source)
    except re.error as exc:
        raise CompilationError(template, str(exc)) from exc

    entry = RouteEntry(
        name=template,
        matcher=matcher,
        literal_prefix=literal_prefix(base),
        is_literal=not variables and not suffix,
        suffix=suffix,
        variables=variables,
    )
    logger.debug("Compiled route %r -> %r", template, source)
    return entry
