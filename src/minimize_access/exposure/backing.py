"""Backing sequence — the privately owned, fixed-length integer storage.

Contents may be mutated in place by the owning code. The length is fixed
at construction. Writes and snapshots hold a ``threading.RLock`` so that
copies are point-in-time consistent and a single read never observes a
half-applied write.
"""

from __future__ import annotations

import operator
import threading
from collections.abc import Iterable, Iterator, Sequence
from typing import overload

from minimize_access.core.errors import FixedLengthError


def check_int(value: object) -> int:
    """Return *value* if it is a plain ``int``; ``bool`` is rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"BackingSequence holds int values, got {type(value).__name__}"
        )
    return value


class BackingSequence(Sequence[int]):
    """Fixed-length, in-place mutable sequence of ints.

    Never hand an instance of this class to external callers. Publish it
    through :class:`~minimize_access.exposure.view.UnmodifiableView` or a
    copy from :meth:`snapshot` instead.
    """

    __slots__ = ("_items", "_lock")

    def __init__(self, values: Iterable[int]) -> None:
        self._items: list[int] = [check_int(v) for v in values]
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        with self._lock:
            # Slicing a list already yields a new list
            return self._items[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self.snapshot())

    def __contains__(self, value: object) -> bool:
        with self._lock:
            return value in self._items

    def snapshot(self) -> list[int]:
        """Return a new list with the current contents."""
        with self._lock:
            return list(self._items)

    # ------------------------------------------------------------------
    # Writes (RLock-protected)
    # ------------------------------------------------------------------

    def __setitem__(self, index: int, value: int) -> None:
        position = operator.index(index)
        checked = check_int(value)
        with self._lock:
            self._items[position] = checked

    def __delitem__(self, index: int | slice) -> None:
        raise FixedLengthError("__delitem__")

    def __repr__(self) -> str:
        return f"BackingSequence({self.snapshot()!r})"
