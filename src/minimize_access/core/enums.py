"""Enumerations used across the exposure library."""

from enum import Enum


class ExposureStrategy(str, Enum):
    VIEW = "view"  # Read-through wrapper, rejects writes
    COPY = "copy"  # Independent snapshot


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"
