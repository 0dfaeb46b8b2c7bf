"""Shared type aliases and host records."""

from .common import OutcomeStatus
from .host import Host, Player, Position, ThrowEvent, ThrownItem

__all__ = [
    "Host",
    "OutcomeStatus",
    "Player",
    "Position",
    "ThrowEvent",
    "ThrownItem",
]
