"""Runtime engine: matching, cooldowns, templating and dispatch."""

from __future__ import annotations

from .cooldown import CooldownCheck, CooldownTracker, format_duration
from .dispatcher import SupplySignalCommands, ThrowOutcome, chat_envelope
from .grid import MapGrid, column_letters
from .matcher import RuleMatch, match_rule
from .messages import MessageCatalog
from .templating import PlaceholderContext, placeholder_values, render

__all__ = [
    "CooldownCheck",
    "CooldownTracker",
    "MapGrid",
    "MessageCatalog",
    "PlaceholderContext",
    "RuleMatch",
    "SupplySignalCommands",
    "ThrowOutcome",
    "chat_envelope",
    "column_letters",
    "format_duration",
    "match_rule",
    "placeholder_values",
    "render",
]
