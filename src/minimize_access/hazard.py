"""The aliasing hazard, demonstrated.

``EXAMPLE_ARRAY`` is annotated ``Final``: the name cannot be rebound, but
the list it refers to is still mutable. Any caller holding the name can
change the contents. This is the situation :class:`ExposureFacade` exists
to prevent.
"""

from __future__ import annotations

import logging
from typing import Final

logger = logging.getLogger(__name__)

EXAMPLE_ARRAY: Final[list[int]] = [2, 3]


def demonstrate_aliasing_hazard(array: list[int] | None = None) -> tuple[int, int]:
    """Read index 0, overwrite it with 6, read it again.

    Operates on ``EXAMPLE_ARRAY`` unless *array* is given.

    Returns:
        ``(before, after)`` values of index 0.
    """
    target = EXAMPLE_ARRAY if array is None else array

    before = target[0]
    logger.info("Exposed array[0] before write: %d", before)
    target[0] = 6
    after = target[0]
    logger.info("Exposed array[0] after write: %d", after)

    return before, after
