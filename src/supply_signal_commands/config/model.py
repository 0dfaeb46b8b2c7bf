"""Config data model for supply signal rules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class CommandType(StrEnum):
    """Where a rendered command is executed."""

    CHAT = "Chat"
    CLIENT = "Client"
    SERVER = "Server"

    @classmethod
    def parse(cls, value: str) -> CommandType:
        """Resolve a type name case-insensitively, raising ``ValueError`` when unknown."""
        folded = value.strip().casefold()
        for member in cls:
            if member.value.casefold() == folded:
                return member
        raise ValueError(value)


@dataclass(frozen=True)
class Command:
    type: CommandType
    template: str


@dataclass(frozen=True)
class Rule:
    """Behavior bound to one supply signal skin (and optionally one item name)."""

    skin_id: int = 0
    item_name: str = ""
    should_explode: bool = False
    cooldown_seconds: float = 0.0
    run_random_command: bool = False
    commands: tuple[Command, ...] = ()
    global_message: str = ""
    personal_message: str = ""

    def matches(self, skin_id: int, item_name: str | None) -> bool:
        """Whether an item with this skin and name triggers the rule.

        An empty ``item_name`` on the rule matches any name for the skin.
        """
        if self.skin_id != skin_id:
            return False
        return not self.item_name or self.item_name == item_name


@dataclass(frozen=True)
class Configuration:
    """Resolved plugin config. Rule order is match priority."""

    version: str
    rules: tuple[Rule, ...] = ()
