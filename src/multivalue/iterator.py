"""Flattening traversal over a multi-value dictionary.

``PairIterator`` walks the bucket store in two levels: an outer cursor
over keys and an inner cursor over the current key's values. It yields
one ``(key, value)`` tuple per stored pair and then stays exhausted.

The outer cursor runs over a snapshot of the ``(key, bucket)`` entries
taken at creation; the inner cursor runs over a snapshot of a bucket
taken when the traversal reaches that key. Mutating the container while
a traversal is in progress is unsupported; the snapshots only keep the
result well-defined (a bucket emptied before the cursor reaches it is
skipped, a bucket added later is not seen).
"""

from collections.abc import Hashable, Iterable, Iterator

from multivalue._internal.types import Bucket

_EXHAUSTED = object()


class PairIterator[K: Hashable, V: Hashable](Iterator[tuple[K, V]]):
    """Two-level iterator producing ``(key, value)`` pairs.

    State:
        _keys: Outer cursor over ``(key, bucket)`` entries, or ``None``
            once every key has been visited.
        _key: Key the inner cursor belongs to.
        _values: Inner cursor over the current bucket, or ``None`` when
            the next call must advance the outer cursor.
    """

    __slots__ = ("_key", "_keys", "_values")

    _keys: Iterator[tuple[K, Bucket[V]]] | None
    _key: K | None
    _values: Iterator[V] | None

    def __init__(self, buckets: Iterable[tuple[K, Bucket[V]]]) -> None:
        self._keys = iter(tuple(buckets))
        self._key = None
        self._values = None

    def __iter__(self) -> "PairIterator[K, V]":
        return self

    def __next__(self) -> tuple[K, V]:
        while self._keys is not None:
            if self._values is None:
                entry = next(self._keys, None)
                if entry is None:
                    self._keys = None
                    break
                self._key, bucket = entry
                self._values = iter(tuple(bucket))

            value = next(self._values, _EXHAUSTED)
            if value is not _EXHAUSTED:
                return self._key, value  # type: ignore[return-value]

            # Inner cursor exhausted: advance to the next key.
            self._values = None
        raise StopIteration

    @property
    def exhausted(self) -> bool:
        """True once the traversal has reported completion."""
        return self._keys is None
