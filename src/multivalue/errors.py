"""multivalue exception hierarchy.

The container reports missing keys and values through ``None``/``False``
results and never raises these. They belong to the configuration and
CLI layers, which raise and catch the same types.
"""

from dataclasses import dataclass


class MultiValueError(Exception):
    """Base for all multivalue-specific errors."""


class ConfigurationError(MultiValueError):
    """Raised when a ``DisplayConfig`` is built with invalid values."""


@dataclass(frozen=True, slots=True)
class PairFormatError(MultiValueError):
    """An input line that is not ``key<separator>value``.

    Raised by the CLI parser. ``line`` is the 1-based line number when
    the text came from a file or stdin.
    """

    text: str
    detail: str = "Malformed pair"
    line: int | None = None

    def __str__(self) -> str:
        if self.line is not None:
            return f"line {self.line}: {self.detail}: {self.text!r}"
        return f"{self.detail}: {self.text!r}"
