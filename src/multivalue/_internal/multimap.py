"""MultiValueDictionaryProtocol — shared interface for multi-value containers.

A structural protocol so utilities (and the CLI) can accept any
key-to-set-of-values container without coupling to the concrete type.
"""

from collections.abc import Hashable, Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class MultiValueDictionaryProtocol[K: Hashable, V: Hashable](Protocol):
    """A mutable mapping where each key holds a set of distinct values.

    ``add_element`` returns whether the container changed.
    ``get_values`` and ``remove_values`` return ``None`` for an unknown key.
    ``remove_element`` returns the removed pair or ``None``.

    Iterating yields every ``(key, value)`` pair exactly once; ``len()``
    counts pairs, not keys.
    """

    def add_element(self, key: K, value: V) -> bool: ...
    def get_values(self, key: K) -> tuple[V, ...] | None: ...
    def remove_element(self, key: K, value: V) -> tuple[K, V] | None: ...
    def remove_values(self, key: K) -> tuple[V, ...] | None: ...
    def __contains__(self, key: object) -> bool: ...
    def __iter__(self) -> Iterator[tuple[K, V]]: ...
    def __len__(self) -> int: ...
