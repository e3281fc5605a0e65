"""A sequence with a movable cursor, used as the bucket and collection type."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional


class LinkedList:
    """Ordered collection with a cursor for step-by-step traversal.

    ``first`` and ``next`` move the cursor. ``push_current`` and ``pop_current``
    work at the cursor's position. Plain iteration does not touch the cursor.
    """

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._cursor: Optional[int] = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items))

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"

    def first(self) -> Any:
        """Move the cursor to the first element and return it, or None if empty."""
        if not self._items:
            return None
        self._cursor = 0
        return self._items[0]

    def next(self) -> Any:
        """Advance the cursor and return the element there, or None at the end."""
        if self._cursor is None or self._cursor + 1 >= len(self._items):
            return None
        self._cursor += 1
        return self._items[self._cursor]

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the start."""
        self._items.insert(0, data)
        if self._cursor is not None:
            self._cursor += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the end."""
        self._items.append(data)

    def push_current(self, data: Any) -> None:
        """Insert ``data`` right after the cursor's element."""
        if self._cursor is None:
            raise IndexError("no current element")
        self._items.insert(self._cursor + 1, data)

    def sorted_insert(self, data: Any, lower_than: Callable[[Any, Any], Any]) -> None:
        """Insert ``data`` before the first element it is lower than.

        Elements that compare equal keep their insertion order.
        """
        position = next(
            (i for i, item in enumerate(self._items) if lower_than(data, item)),
            len(self._items),
        )
        if position == 0:
            self.push_front(data)
            return
        self._items.insert(position, data)
        self._cursor = position - 1

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise IndexError("pop from empty list")
        data = self._items.pop(0)
        if self._cursor is not None:
            self._cursor = None if self._cursor == 0 else self._cursor - 1
        return data

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise IndexError("pop from empty list")
        data = self._items.pop()
        if self._cursor is not None and self._cursor >= len(self._items):
            self._cursor = None
        return data

    def pop_current(self) -> Any:
        """Remove and return the cursor's element; the cursor moves to the one after."""
        if self._cursor is None:
            raise IndexError("no current element")
        data = self._items.pop(self._cursor)
        if self._cursor >= len(self._items):
            self._cursor = None
        return data

    def clean(self) -> None:
        """Remove every element and reset the cursor."""
        self._items.clear()
        self._cursor = None