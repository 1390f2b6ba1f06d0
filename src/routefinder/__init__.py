"""Routefinder — decompose concrete URL paths back into route templates.

Templates use ``:name`` for a single path segment, a trailing ``/...`` to
match (and report) anything below a prefix, and a trailing ``/???`` to
match anything below a prefix while reporting the template unchanged.

Basic usage::

    from routefinder import Routefinder

    routes = Routefinder("/", "/pay/:card", "/shop/:item/...", "/static/???")

    routes.lookup("/pay/visa")              # ("/pay/:card", {"card": "visa"})
    routes.lookup("/shop/gopher/thumbnail") # ("/shop/:item/thumbnail", {"item": "gopher"})
    routes.lookup("/static/app.css")        # ("/static/???", {})
    routes.lookup("/missing")               # ("", {})
"""

__version__ = "0.1.0"
__all__ = [
    "CompilationError",
    "ConfigurationError",
    "FinderConfig",
    "RouteEntry",
    "RouteMatch",
    "Routefinder",
    "RoutefinderError",
    "compile_template",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routefinder`` cheap while providing a flat top-level API.
    """
    if name == "Routefinder":
        from routefinder.table import Routefinder

        return Routefinder

    if name == "FinderConfig":
        from routefinder.config import FinderConfig

        return FinderConfig

    if name in ("RouteEntry", "RouteMatch"):
        from routefinder import entry as _entry

        return getattr(_entry, name)

    if name == "compile_template":
        from routefinder.compiler import compile_template

        return compile_template

    if name in ("RoutefinderError", "CompilationError", "ConfigurationError"):
        from routefinder import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
