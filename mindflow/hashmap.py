"""Hash map with separate chaining and pluggable equality and hash functions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from mindflow.linkedlist import LinkedList

INITIAL_CAPACITY = 103
_MASK32 = 0xFFFFFFFF


@dataclass
class MapPair:
    """A key and the value stored under it."""

    key: Any
    value: Any


def string_equal(a: str, b: str) -> bool:
    """Return whether two strings are equal."""
    return a == b


def int_equal(a: int, b: int) -> bool:
    """Return whether two integers are equal."""
    return a == b


def string_hash(key: str) -> int:
    """djb2 hash of ``key`` as a 32-bit unsigned value (bytes taken as signed)."""
    result = 5381
    for byte in key.encode("utf-8"):
        signed = byte - 256 if byte > 127 else byte
        result = (result * 33 + signed) & _MASK32
    return result


def int_hash(key: int) -> int:
    """The integer itself, reinterpreted as 32-bit unsigned."""
    return key & _MASK32


class HashMap:
    """Map of keys to values, with buckets walked in index order."""

    def __init__(
        self,
        is_equal: Callable[[Any, Any], Any],
        hash_func: Callable[[Any], int],
    ) -> None:
        self.capacity = INITIAL_CAPACITY
        self._is_equal = is_equal
        self._hash = hash_func
        self._buckets = [LinkedList() for _ in range(self.capacity)]
        self._size = 0
        self._current_bucket: Optional[int] = None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[MapPair]:
        for bucket in self._buckets:
            yield from bucket

    def __contains__(self, key: Any) -> bool:
        return self.search(key) is not None

    def _bucket_for(self, key: Any) -> LinkedList:
        return self._buckets[self._hash(key) % self.capacity]

    def search(self, key: Any) -> Optional[MapPair]:
        """Return the pair stored under ``key``, or None."""
        return next(
            (pair for pair in self._bucket_for(key) if self._is_equal(pair.key, key)),
            None,
        )

    def insert(self, key: Any, value: Any) -> None:
        """Store ``value`` under ``key``; an existing key keeps its value."""
        if self.search(key) is not None:
            return
        self._bucket_for(key).push_back(MapPair(key, value))
        self._size += 1

    def get(self, key: Any) -> Any:
        """Return the value stored under ``key``, or None."""
        pair = self.search(key)
        return pair.value if pair is not None else None

    def remove(self, key: Any) -> Optional[MapPair]:
        """Remove and return the pair stored under ``key``, or None."""
        bucket = self._bucket_for(key)
        pair = bucket.first()
        while pair is not None:
            if self._is_equal(pair.key, key):
                bucket.pop_current()
                self._size -= 1
                return pair
            pair = bucket.next()
        return None

    def clean(self) -> None:
        """Remove every pair."""
        for bucket in self._buckets:
            bucket.clean()
        self._size = 0
        self._current_bucket = None

    def _first_from(self, start: int) -> Optional[MapPair]:
        for index in range(start, self.capacity):
            pair = self._buckets[index].first()
            if pair is not None:
                self._current_bucket = index
                return pair
        return None

    def first(self) -> Optional[MapPair]:
        """Start a traversal and return the first pair, or None if empty."""
        return self._first_from(0)

    def next(self) -> Optional[MapPair]:
        """Return the next pair of the traversal, or None at the end."""
        if self._current_bucket is None:
            return None
        pair = self._buckets[self._current_bucket].next()
        if pair is not None:
            return pair
        return self._first_from(self._current_bucket + 1)

    def destroy(self, free_value: Optional[Callable[[Any], Any]]) -> None:
        """Hand every value to ``free_value`` (if given) and empty the map."""
        if free_value is not None:
            for pair in self:
                free_value(pair.value)
        self.clean()