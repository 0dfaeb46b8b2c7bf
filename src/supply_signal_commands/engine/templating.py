"""Placeholder substitution for command and message templates."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from re import Pattern

from supply_signal_commands.constants.placeholders import (
    GRID,
    LEGACY_GRID,
    LEGACY_PLAYER_ID,
    LEGACY_PLAYER_NAME,
    LEGACY_POSITION_X,
    LEGACY_POSITION_Y,
    LEGACY_POSITION_Z,
    PLAYER_ID,
    PLAYER_NAME,
    POSITION_DECIMALS,
    POSITION_X,
    POSITION_Y,
    POSITION_Z,
)
from supply_signal_commands.types.host import Player, Position

TOKEN_PATTERN: Pattern[str] = re.compile(r"\{[A-Za-z]+\}")


@dataclass(frozen=True)
class PlaceholderContext:
    """Values available to templates for one triggering player."""

    player_id: str
    player_name: str
    position: Position
    grid: str

    @classmethod
    def for_player(cls, player: Player, grid_label: Callable[[Position], str]) -> PlaceholderContext:
        return cls(
            player_id=player.user_id,
            player_name=player.display_name,
            position=player.position,
            grid=grid_label(player.position),
        )


def _format_fixed(value: float) -> str:
    return f"{value:.{POSITION_DECIMALS}f}"


def _format_default(value: float) -> str:
    """Shortest round-trip form, without a trailing ``.0`` on whole numbers."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def placeholder_values(context: PlaceholderContext) -> dict[str, str]:
    """Map every recognized token to its rendered value."""
    position = context.position
    return {
        PLAYER_ID: context.player_id,
        PLAYER_NAME: context.player_name,
        POSITION_X: _format_fixed(position.x),
        POSITION_Y: _format_fixed(position.y),
        POSITION_Z: _format_fixed(position.z),
        GRID: context.grid,
        LEGACY_PLAYER_ID: context.player_id,
        LEGACY_PLAYER_NAME: context.player_name,
        LEGACY_POSITION_X: _format_default(position.x),
        LEGACY_POSITION_Y: _format_default(position.y),
        LEGACY_POSITION_Z: _format_default(position.z),
        LEGACY_GRID: context.grid,
    }


def render(template: str, context: PlaceholderContext) -> str:
    """Substitute known placeholders in one pass; unknown tokens are left as written.

    Substituted values are never rescanned, so a player named ``{Grid}``
    renders literally.
    """
    values = placeholder_values(context)
    return TOKEN_PATTERN.sub(lambda match: values.get(match.group(0), match.group(0)), template)
