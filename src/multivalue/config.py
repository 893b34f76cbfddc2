"""Display configuration for the multivalue CLI.

DisplayConfig is a frozen dataclass — immutable after creation, validated
once in ``__post_init__``, no string-key dict lookups.
"""

import logging
from dataclasses import dataclass

from multivalue.errors import ConfigurationError

LAYOUTS = ("pairs", "grouped")


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    """How the CLI reads and prints pairs. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = DisplayConfig(separator=":", layout="grouped", sort_keys=True)
    """

    # Input
    separator: str = "="
    strip: bool = True  # Strip whitespace around keys and values

    # Output
    layout: str = "pairs"  # "pairs" (one line per pair) or "grouped" (one line per key)
    sort_keys: bool = False

    # Logging
    log_level: str = "warning"

    def __post_init__(self) -> None:
        if not self.separator:
            msg = "separator must be a non-empty string"
            raise ConfigurationError(msg)
        if self.layout not in LAYOUTS:
            msg = f"Unknown layout {self.layout!r}. Expected one of: {', '.join(LAYOUTS)}"
            raise ConfigurationError(msg)
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            msg = f"Unknown log level {self.log_level!r}"
            raise ConfigurationError(msg)

    @property
    def level(self) -> int:
        """Numeric ``logging`` level for ``log_level``."""
        return logging.getLevelName(self.log_level.upper())
