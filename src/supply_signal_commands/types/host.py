"""Records and protocols exchanged with the host game server.

The host owns the world, players and thrown entities. This package only sees
the thin slice described here: the inbound throw event and the outbound calls
used to run commands and talk to players.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from supply_signal_commands.constants.lang import DEFAULT_LOCALE


@dataclass(frozen=True)
class Position:
    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Player:
    """The player who threw the signal."""

    user_id: str
    display_name: str
    position: Position
    locale: str = DEFAULT_LOCALE


@dataclass(frozen=True)
class ThrownItem:
    skin_id: int
    name: str | None = None


@dataclass(frozen=True)
class ThrowEvent:
    """A supply signal leaving a player's hand.

    ``signal`` is an opaque host handle for the live entity; it is only ever
    passed back to :meth:`Host.cancel_explosion`.
    """

    player: Player | None
    signal: Any
    item: ThrownItem | None


class Host(Protocol):
    """Outbound capabilities the host game server provides."""

    def cancel_explosion(self, signal: Any) -> None: ...

    def run_client_command(self, player: Player, command: str) -> None: ...

    def run_server_command(self, command: str) -> None: ...

    def send_reply(self, player: Player, message: str) -> None: ...

    def connected_players(self) -> list[Player]: ...

    def grid_label(self, position: Position) -> str: ...
