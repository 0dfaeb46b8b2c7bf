"""Console host used to dry-run throws outside a game server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO

from supply_signal_commands.engine.grid import MapGrid
from supply_signal_commands.types.host import Player, Position


@dataclass
class ConsoleHost:
    """Host implementation that prints every outbound call instead of executing it."""

    grid: MapGrid = field(default_factory=MapGrid)
    players: list[Player] = field(default_factory=list)
    stream: TextIO | None = None

    def cancel_explosion(self, signal: Any) -> None:
        self._emit("explosion", "cancelled")

    def run_client_command(self, player: Player, command: str) -> None:
        self._emit(f"client:{player.user_id}", command)

    def run_server_command(self, command: str) -> None:
        self._emit("server", command)

    def send_reply(self, player: Player, message: str) -> None:
        self._emit(f"reply:{player.user_id}", message)

    def connected_players(self) -> list[Player]:
        return list(self.players)

    def grid_label(self, position: Position) -> str:
        return self.grid.label(position)

    def _emit(self, channel: str, text: str) -> None:
        print(f"[{channel}] {text}", file=self.stream)
