"""Route table configuration.

FinderConfig is a frozen dataclass: immutable after creation, validated
once when a table is built.
"""

from dataclasses import dataclass

from routefinder.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class FinderConfig:
    """Route table configuration. Immutable after creation.

    Override what you need::

        config = FinderConfig(separator=";")
    """

    # Joins templates in ``str(table)`` and splits them in ``table.set()``
    separator: str = ","

    # Drop everything after the first "?" before matching
    strip_query: bool = True

    def validate(self) -> None:
        """Raise ``ConfigurationError`` if the settings cannot work together."""
        if not self.separator:
            msg = "FinderConfig.separator must not be empty."
            raise ConfigurationError(msg)
        if "/" in self.separator or ":" in self.separator:
            msg = (
                f"FinderConfig.separator {self.separator!r} clashes with template "
                "syntax; '/' and ':' are reserved."
            )
            raise ConfigurationError(msg)
