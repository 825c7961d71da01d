"""Circular selection cursor over an ordered sequence."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, Sequence, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """An ordered sequence with one highlighted index.

    The cursor is None exactly when the sequence is empty, otherwise it is a
    valid index. Moving past either end wraps around.
    """

    def __init__(self, items: Sequence[T] = ()):
        self._items: list[T] = []
        self._cursor: Optional[int] = None
        self.replace(items)

    @property
    def cursor(self) -> Optional[int]:
        return self._cursor

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def replace(self, items: Sequence[T]) -> None:
        """Swap in a new sequence. The previous selection is not preserved."""
        self._items = list(items)
        self._cursor = 0 if self._items else None

    def select_next(self) -> None:
        if self._cursor is None:
            return
        self._cursor = (self._cursor + 1) % len(self._items)

    def select_previous(self) -> None:
        if self._cursor is None:
            return
        self._cursor = (self._cursor - 1) % len(self._items)

    def current(self) -> Optional[T]:
        if self._cursor is None:
            return None
        return self._items[self._cursor]
