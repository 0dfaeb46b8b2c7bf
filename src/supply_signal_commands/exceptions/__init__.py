"""Shared exception hierarchy."""

from __future__ import annotations

from .base import SignalCommandsError
from .config import ConfigError
from .validation import ValidationError

__all__ = [
    "ConfigError",
    "SignalCommandsError",
    "ValidationError",
]
