"""Root exception type."""

from __future__ import annotations


class SignalCommandsError(Exception):
    """Base class for all errors raised by this package."""
