"""Growable fixed-buffer sequence with strict index checks."""

from __future__ import annotations

import logging
from typing import Any, Generic, Iterator, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class OutOfRangeError(IndexError):
    """Raised when an index falls outside [0, size)."""


class ResizableSequence(Generic[T]):
    """Ordered buffer that doubles its capacity when full.

    Unlike a plain list, negative indices are rejected instead of wrapping,
    and removal of a bad index raises rather than doing nothing. The sequence
    cannot be copied: duplication is the job of whoever owns the elements.
    """

    def __init__(self, initial_capacity: int = 5) -> None:
        if initial_capacity < 1:
            raise ValueError(f"initial_capacity must be >= 1, got {initial_capacity}")
        self._items: List[Optional[T]] = [None] * initial_capacity
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def size(self) -> int:
        return self._size

    def __len__(self) -> int:
        return self._size

    def _check_index(self, index: int, operation: str) -> None:
        if index < 0 or index >= self._size:
            raise OutOfRangeError(
                f"ResizableSequence.{operation}: index {index} out of range for size {self._size}"
            )

    def _grow(self) -> None:
        new_capacity = self.capacity * 2
        items: List[Optional[T]] = [None] * new_capacity
        for position in range(self._size):
            items[position] = self._items[position]
        logger.debug("Sequence grew from %d to %d slots", self.capacity, new_capacity)
        self._items = items

    def append(self, value: T) -> None:
        if self._size == self.capacity:
            self._grow()
        self._items[self._size] = value
        self._size += 1

    def remove_at(self, index: int) -> T:
        """Remove and return the element at index, shifting the tail left."""
        self._check_index(index, "remove_at")
        removed = self._items[index]
        for position in range(index, self._size - 1):
            self._items[position] = self._items[position + 1]
        self._size -= 1
        self._items[self._size] = None
        return removed  # type: ignore[return-value]

    def clear(self) -> None:
        for position in range(self._size):
            self._items[position] = None
        self._size = 0

    def __getitem__(self, index: int) -> T:
        self._check_index(index, "__getitem__")
        return self._items[index]  # type: ignore[return-value]

    def __setitem__(self, index: int, value: T) -> None:
        self._check_index(index, "__setitem__")
        self._items[index] = value

    def __iter__(self) -> Iterator[T]:
        for position in range(self._size):
            yield self._items[position]  # type: ignore[misc]

    def __copy__(self) -> Any:
        raise TypeError("ResizableSequence cannot be copied; duplicate through its owner")

    def __deepcopy__(self, memo: Any) -> Any:
        raise TypeError("ResizableSequence cannot be copied; duplicate through its owner")

    def __repr__(self) -> str:
        return f"ResizableSequence(size={self._size}, capacity={self.capacity})"
