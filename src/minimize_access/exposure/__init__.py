"""Safe publication of privately owned mutable sequences.

The backing storage stays inside :class:`ExposureFacade`; callers receive
either an :class:`UnmodifiableView` or a defensive copy.
"""

from __future__ import annotations

from .facade import ExposureFacade
from .view import UnmodifiableView

__all__ = [
    "ExposureFacade",
    "UnmodifiableView",
]
