"""Minimal-accessibility examples: publish private mutable state safely.

Public surface::

    EXAMPLE_CONSTANT          immutable scalar, safe to publish directly
    LIST                      read-only view over a private sequence
    get_unmodifiable_view()   new read-only view over the same sequence
    copy_of()                 independent copy of the current contents
    ExposureFacade            owner for your own private sequences
"""

from __future__ import annotations

from .core.enums import ExposureStrategy
from .core.errors import AccessError, ConfigError, FixedLengthError, MutationRejected
from .exposure import ExposureFacade, UnmodifiableView
from .hazard import demonstrate_aliasing_hazard
from .published import (
    EXAMPLE_CONSTANT,
    LIST,
    copy_of,
    get_unmodifiable_view,
    value_of_array,
)

__all__ = [
    "AccessError",
    "ConfigError",
    "EXAMPLE_CONSTANT",
    "ExposureFacade",
    "ExposureStrategy",
    "FixedLengthError",
    "LIST",
    "MutationRejected",
    "UnmodifiableView",
    "copy_of",
    "demonstrate_aliasing_hazard",
    "get_unmodifiable_view",
    "value_of_array",
]
