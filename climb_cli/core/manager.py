"""Owning collection of activity records."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, TextIO

from climb_cli.core.activities import Activity
from climb_cli.core.constants import ACTIVITY_DIVIDER
from climb_cli.core.sequence import ResizableSequence

logger = logging.getLogger(__name__)


class ActivityManager:
    """Owns every activity added to it.

    Callers hand over an activity with ``add`` (or ``+=``) and must not keep
    mutating it afterwards. Copying a manager clones each activity, so two
    managers never share records.

    Index access and removal are strict and raise ``OutOfRangeError``;
    ``get`` is the lenient lookup and returns ``None`` for a bad index.
    """

    def __init__(self, initial_capacity: int = 5) -> None:
        self._initial_capacity = initial_capacity
        self._items: ResizableSequence[Activity] = ResizableSequence(initial_capacity)

    def add(self, activity: Activity) -> None:
        self._items.append(activity)
        logger.debug("Added %s '%s' at index %d", activity.type_name(), activity.name, len(self._items) - 1)

    def remove_at(self, index: int) -> None:
        removed = self._items.remove_at(index)
        logger.debug("Removed %s '%s' from index %d", removed.type_name(), removed.name, index)

    def get(self, index: int) -> Optional[Activity]:
        if index < 0 or index >= len(self._items):
            return None
        return self._items[index]

    def size(self) -> int:
        return len(self._items)

    def clear(self) -> None:
        if len(self._items):
            logger.debug("Clearing %d activities", len(self._items))
        self._items.clear()

    def duplicate(self) -> "ActivityManager":
        """Return a manager holding independent clones of every activity."""
        copy_ = ActivityManager(max(self._initial_capacity, self._items.capacity))
        for activity in self._items:
            copy_.add(activity.clone())
        return copy_

    def display_all(self, sink: TextIO) -> None:
        for activity in self._items:
            sink.write(ACTIVITY_DIVIDER + "\n")
            activity.describe(sink)

    def __getitem__(self, index: int) -> Activity:
        return self._items[index]

    def __iadd__(self, activity: Activity) -> "ActivityManager":
        self.add(activity)
        return self

    def __isub__(self, index: int) -> "ActivityManager":
        self.remove_at(index)
        return self

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self._items)

    def __copy__(self) -> "ActivityManager":
        return self.duplicate()

    def __deepcopy__(self, memo: Any) -> "ActivityManager":
        return self.duplicate()

    def __repr__(self) -> str:
        return f"ActivityManager(size={len(self._items)})"
