"""Placeholder tokens recognized in command and message templates."""

from __future__ import annotations

PLAYER_ID: str = "{PlayerId}"
PLAYER_NAME: str = "{PlayerName}"
POSITION_X: str = "{PositionX}"
POSITION_Y: str = "{PositionY}"
POSITION_Z: str = "{PositionZ}"
GRID: str = "{Grid}"

# Spellings used by configs written before 1.4.0. Command templates are not
# reset by migration, so these keep rendering.
LEGACY_PLAYER_ID: str = "{playerId}"
LEGACY_PLAYER_NAME: str = "{playerName}"
LEGACY_POSITION_X: str = "{positionX}"
LEGACY_POSITION_Y: str = "{positionY}"
LEGACY_POSITION_Z: str = "{positionZ}"
LEGACY_GRID: str = "{grid}"

POSITION_DECIMALS: int = 1

CHAT_COMMAND_FORMAT: str = 'chat.say "{0}"'
