"""Multi-value dictionary — each key maps to a set of distinct values.

Implements the ``MultiValueDictionaryProtocol``. Buckets are plain dicts
used as insertion-ordered sets, so enumeration is deterministic: keys in
first-insertion order, values in insertion order within a key.

Usage::

    from multivalue import MultiValueDictionary

    tags = MultiValueDictionary[str, str]()
    tags.add_element("post-1", "python")   # True
    tags.add_element("post-1", "python")   # False, already present
    tags.get_values("post-1")              # ("python",)
    list(tags)                             # [("post-1", "python")]

Absent keys and values are normal outcomes reported as ``None`` or
``False``; no operation raises for them.

Not thread-safe. Callers sharing an instance must serialize access.
"""

import logging
from collections.abc import Hashable, Iterable

from multivalue._internal.types import Bucket
from multivalue.iterator import PairIterator

logger = logging.getLogger("multivalue.dictionary")


class MultiValueDictionary[K: Hashable, V: Hashable]:
    """Mutable key to set-of-values container.

    Attributes:
        _buckets: Key -> insertion-ordered set of values. Never holds an
            empty bucket; a key disappears with its last value.
        _size: Total number of ``(key, value)`` pairs.

    ``len()`` counts pairs. ``in`` tests key membership.
    """

    __slots__ = ("_buckets", "_size")

    _buckets: dict[K, Bucket[V]]
    _size: int

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, pairs: Iterable[tuple[K, V]] = ()) -> None:
        self._buckets = {}
        self._size = 0
        for key, value in pairs:
            self.add_element(key, value)

    # -- Bucket store ------------------------------------------------------

    def add_element(self, key: K, value: V) -> bool:
        """Add *value* under *key*.

        Returns ``True`` if the container changed, ``False`` if the pair
        was already present.
        """
        bucket = self._buckets.get(key)
        if bucket is None:
            self._buckets[key] = {value: None}
            self._size += 1
            logger.debug("Created bucket for key %r", key)
            return True
        if value in bucket:
            return False
        bucket[value] = None
        self._size += 1
        return True

    def get_values(self, key: K) -> tuple[V, ...] | None:
        """Return a snapshot of the values under *key*, or ``None`` if unknown."""
        bucket = self._buckets.get(key)
        if bucket is None:
            return None
        return tuple(bucket)

    def remove_element(self, key: K, value: V) -> tuple[K, V] | None:
        """Remove one pair and return it, or ``None`` if it was not present.

        Removing the last value of a key deletes the key.
        """
        bucket = self._buckets.get(key)
        if bucket is None or value not in bucket:
            return None
        del bucket[value]
        self._size -= 1
        if not bucket:
            del self._buckets[key]
            logger.debug("Dropped key %r (last value removed)", key)
        return key, value

    def remove_values(self, key: K) -> tuple[V, ...] | None:
        """Remove *key* with all of its values and return them.

        Returns ``None`` (and changes nothing) if *key* is unknown.
        """
        bucket = self._buckets.pop(key, None)
        if bucket is None:
            return None
        values = tuple(bucket)
        # Detach from any traversal still holding the bucket.
        bucket.clear()
        self._size -= len(values)
        logger.debug("Dropped key %r with %d value(s)", key, len(values))
        return values

    def contains_element(self, key: K, value: V) -> bool:
        """Return whether the pair ``(key, value)`` is present."""
        bucket = self._buckets.get(key)
        return bucket is not None and value in bucket

    # -- Views ---------------------------------------------------------------

    def keys(self) -> tuple[K, ...]:
        """Snapshot of keys in enumeration order."""
        return tuple(self._buckets)

    def items(self) -> tuple[tuple[K, tuple[V, ...]], ...]:
        """Snapshot of ``(key, values)`` buckets in enumeration order."""
        return tuple((key, tuple(bucket)) for key, bucket in self._buckets.items())

    @property
    def key_count(self) -> int:
        """Number of keys (distinct from ``len()``, which counts pairs)."""
        return len(self._buckets)

    def copy(self) -> "MultiValueDictionary[K, V]":
        """Return an independent container with the same pairs and order."""
        clone: MultiValueDictionary[K, V] = MultiValueDictionary()
        clone._buckets = {key: dict(bucket) for key, bucket in self._buckets.items()}
        clone._size = self._size
        return clone

    def clear(self) -> None:
        """Remove every key and value."""
        for bucket in self._buckets.values():
            bucket.clear()
        self._buckets = {}
        self._size = 0

    # -- Protocols -----------------------------------------------------------

    def __iter__(self) -> PairIterator[K, V]:
        return PairIterator(self._buckets.items())

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        try:
            return key in self._buckets
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiValueDictionary):
            return NotImplemented
        if self._size != other._size or self._buckets.keys() != other._buckets.keys():
            return False
        return all(
            bucket.keys() == other._buckets[key].keys() for key, bucket in self._buckets.items()
        )

    def __repr__(self) -> str:
        items = ", ".join(
            f"{key!r}: {{{', '.join(repr(v) for v in bucket)}}}"
            for key, bucket in self._buckets.items()
        )
        return f"MultiValueDictionary({{{items}}})"
