"""Configuration-related exceptions."""

from __future__ import annotations

from supply_signal_commands.exceptions.base import SignalCommandsError


class ConfigError(SignalCommandsError, ValueError):
    """Raised when a supply signal configuration document is invalid."""
