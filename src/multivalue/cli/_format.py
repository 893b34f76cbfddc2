"""Pair parsing and text rendering for the CLI."""

from collections.abc import Iterable, Iterator

from multivalue._internal.multimap import MultiValueDictionaryProtocol
from multivalue._internal.types import TextPair
from multivalue.config import DisplayConfig
from multivalue.errors import PairFormatError


def parse_pair(text: str, config: DisplayConfig, line: int | None = None) -> TextPair:
    """Split ``key<separator>value`` on the first separator.

    The value may itself contain the separator. An empty key is an error;
    an empty value is allowed.
    """
    key, sep, value = text.partition(config.separator)
    if not sep:
        raise PairFormatError(text, f"Missing separator {config.separator!r}", line)
    if config.strip:
        key, value = key.strip(), value.strip()
    if not key:
        raise PairFormatError(text, "Empty key", line)
    return key, value


def read_pairs(lines: Iterable[str], config: DisplayConfig) -> Iterator[TextPair]:
    """Parse pairs from *lines*, skipping blanks and ``#`` comments."""
    for number, raw in enumerate(lines, start=1):
        text = raw.rstrip("\r\n")
        stripped = text.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield parse_pair(text, config, number)


def render(
    dictionary: MultiValueDictionaryProtocol[str, str], config: DisplayConfig
) -> list[str]:
    """Render *dictionary* as output lines according to ``config.layout``."""
    if config.layout == "grouped":
        return _render_grouped(dictionary, config)
    return _render_pairs(dictionary, config)


def _render_pairs(
    dictionary: MultiValueDictionaryProtocol[str, str], config: DisplayConfig
) -> list[str]:
    pairs = list(dictionary)
    if config.sort_keys:
        # Stable: values keep their order within a key.
        pairs.sort(key=lambda pair: pair[0])
    return [f"{key}{config.separator}{value}" for key, value in pairs]


def _render_grouped(
    dictionary: MultiValueDictionaryProtocol[str, str], config: DisplayConfig
) -> list[str]:
    keys: list[str] = []
    for key, _ in dictionary:
        if not keys or keys[-1] != key:
            keys.append(key)
    if config.sort_keys:
        keys.sort()
    return [f"{key}: {', '.join(dictionary.get_values(key) or ())}" for key in keys]
