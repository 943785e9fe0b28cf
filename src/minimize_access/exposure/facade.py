"""Exposure facade — the only owner of a backing sequence.

The facade hands out either a read-through :class:`UnmodifiableView` or a
defensive copy. It never returns the backing storage itself.

Choosing between the two:

* **view** is cheap and always current. Use it when callers read
  repeatedly and only need to see the live values.
* **copy** costs one allocation per call but is fully decoupled. Use it
  when callers need a stable snapshot, want to modify what they get, or
  would be surprised by a ``MutationRejected`` error.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from minimize_access.core.enums import ExposureStrategy
from minimize_access.core.errors import ConfigError
from minimize_access.exposure.backing import BackingSequence
from minimize_access.exposure.view import UnmodifiableView

logger = logging.getLogger(__name__)


class ExposureFacade:
    """Owns a fixed-length int sequence and publishes it safely."""

    def __init__(
        self,
        values: Iterable[int],
        default_strategy: ExposureStrategy = ExposureStrategy.VIEW,
    ) -> None:
        self._backing = BackingSequence(values)
        self._default_strategy = ExposureStrategy(default_strategy)
        logger.debug(
            "ExposureFacade created: length=%d default_strategy=%s",
            len(self._backing),
            self._default_strategy.value,
        )

    @property
    def default_strategy(self) -> ExposureStrategy:
        return self._default_strategy

    # ------------------------------------------------------------------
    # Published surface
    # ------------------------------------------------------------------

    def unmodifiable_view(self) -> UnmodifiableView:
        """Return a read-only view that tracks the live contents."""
        return UnmodifiableView(self._backing)

    def copy_of(self) -> list[int]:
        """Return an independent copy of the current contents."""
        return self._backing.snapshot()

    def publish(
        self, strategy: ExposureStrategy | str | None = None
    ) -> UnmodifiableView | list[int]:
        """Publish the contents with *strategy*, or the default if omitted."""
        if strategy is None:
            chosen = self._default_strategy
        else:
            try:
                chosen = ExposureStrategy(strategy)
            except ValueError:
                raise ConfigError(
                    f"Unknown exposure strategy: {strategy!r} "
                    f"(expected one of {[s.value for s in ExposureStrategy]})"
                ) from None

        if chosen is ExposureStrategy.VIEW:
            return self.unmodifiable_view()
        return self.copy_of()

    # ------------------------------------------------------------------
    # Internal mutation
    # ------------------------------------------------------------------

    def update(self, index: int, value: int) -> None:
        """Overwrite one element in place. For use by the owning code only."""
        self._backing[index] = value
        logger.debug("Backing sequence updated: index=%d value=%d", index, value)

    def __len__(self) -> int:
        return len(self._backing)

    def __repr__(self) -> str:
        return (
            f"ExposureFacade(length={len(self._backing)}, "
            f"default_strategy={self._default_strategy.value!r})"
        )
