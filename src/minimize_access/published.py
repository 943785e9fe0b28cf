"""Module-level published values.

Only safe things are public here: an immutable scalar, a read-only view,
and accessors that return views or copies. The owner of the backing
sequence is private to this module.
"""

from __future__ import annotations

from typing import Final

from minimize_access.exposure import ExposureFacade, UnmodifiableView

EXAMPLE_CONSTANT: Final[int] = 25

_EXAMPLE_OWNER: Final = ExposureFacade((3, 4, 5))

LIST: Final[UnmodifiableView] = _EXAMPLE_OWNER.unmodifiable_view()


def get_unmodifiable_view() -> UnmodifiableView:
    """Return a read-only view over the example sequence."""
    return _EXAMPLE_OWNER.unmodifiable_view()


def copy_of() -> list[int]:
    """Return a copy of the example sequence's current contents."""
    return _EXAMPLE_OWNER.copy_of()


def value_of_array() -> list[int]:
    return copy_of()
