"""Read-only view over a backing sequence.

Reads are forwarded to the live backing storage on every access, so the
view always reflects in-place updates made by the owner. Every mutating
operation raises :class:`MutationRejected` and leaves the backing storage
untouched.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any, NoReturn, overload

from minimize_access.core.errors import MutationRejected
from minimize_access.exposure.backing import BackingSequence

logger = logging.getLogger(__name__)


class UnmodifiableView(Sequence[int]):
    """A read-through, write-rejecting wrapper around a BackingSequence.

    Slicing returns a new ``list`` holding that slice, not a view.
    """

    __slots__ = ("_backing",)

    def __init__(self, backing: BackingSequence) -> None:
        self._backing = backing

    # ------------------------------------------------------------------
    # Reads (forwarded)
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._backing)

    @overload
    def __getitem__(self, index: int) -> int: ...

    @overload
    def __getitem__(self, index: slice) -> list[int]: ...

    def __getitem__(self, index: int | slice) -> int | list[int]:
        return self._backing[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._backing)

    def __reversed__(self) -> Iterator[int]:
        return reversed(self._backing.snapshot())

    def __contains__(self, value: object) -> bool:
        return value in self._backing

    def __eq__(self, other: object) -> bool:
        if isinstance(other, UnmodifiableView):
            return self._backing.snapshot() == other._backing.snapshot()
        if isinstance(other, Sequence) and not isinstance(other, (str, bytes)):
            return self._backing.snapshot() == list(other)
        return NotImplemented

    # Contents can change underneath the view.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"UnmodifiableView({self._backing.snapshot()!r})"

    # ------------------------------------------------------------------
    # Writes (rejected)
    # ------------------------------------------------------------------

    def _reject(self, operation: str) -> NoReturn:
        logger.warning("Rejected %s() on unmodifiable view", operation)
        raise MutationRejected(operation)

    def __setitem__(self, index: Any, value: Any) -> NoReturn:
        self._reject("__setitem__")

    def __delitem__(self, index: Any) -> NoReturn:
        self._reject("__delitem__")

    def __iadd__(self, other: Any) -> NoReturn:
        self._reject("__iadd__")

    def __imul__(self, other: Any) -> NoReturn:
        self._reject("__imul__")

    def append(self, value: Any) -> NoReturn:
        self._reject("append")

    def extend(self, values: Any) -> NoReturn:
        self._reject("extend")

    def insert(self, index: Any, value: Any) -> NoReturn:
        self._reject("insert")

    def remove(self, value: Any) -> NoReturn:
        self._reject("remove")

    def pop(self, index: Any = -1) -> NoReturn:
        self._reject("pop")

    def clear(self) -> NoReturn:
        self._reject("clear")

    def sort(self, *args: Any, **kwargs: Any) -> NoReturn:
        self._reject("sort")

    def reverse(self) -> NoReturn:
        self._reject("reverse")
