"""Custom exception hierarchy for the exposure library."""


class AccessError(Exception):
    """Base exception for all exposure library errors."""


# --- Configuration ---
class ConfigError(AccessError):
    """Invalid or missing configuration."""


# --- Exposure ---
class MutationRejected(AccessError, TypeError):
    """A write was attempted through a read-only view.

    This is a programmer error. It is raised immediately and never retried.
    """

    def __init__(self, operation: str, target: str = "UnmodifiableView"):
        self.operation = operation
        self.target = target
        super().__init__(f"{target} does not support {operation}()")


class FixedLengthError(AccessError, TypeError):
    """An operation would change the length of a fixed-size sequence."""

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"BackingSequence has a fixed length; {operation}() is not allowed")
