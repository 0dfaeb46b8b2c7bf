"""Configuration document keys, defaults and filenames."""

from __future__ import annotations

from typing import Any

CONFIG_FILENAME: str = "supply_signal_commands.yaml"
JSON_SUFFIXES: frozenset[str] = frozenset({".json"})

KEY_VERSION: str = "Version"
KEY_SUPPLY_SIGNALS: str = "Supply Signals"

KEY_ITEM_NAME: str = "Item Name"
KEY_ITEM_SKIN_ID: str = "Item Skin Id"
KEY_SHOULD_EXPLODE: str = "Should Explode"
KEY_COOLDOWN_SECONDS: str = "Cooldown Seconds"
KEY_RUN_RANDOM_COMMAND: str = "Run Random Command"
KEY_COMMANDS_TO_RUN: str = "Commands To Run"
KEY_GLOBAL_MESSAGE: str = "Global Message"
KEY_PERSONAL_MESSAGE: str = "Personal Message"

KEY_COMMAND_TYPE: str = "Type"
KEY_COMMAND: str = "Command"

TOP_LEVEL_KEYS: frozenset[str] = frozenset({KEY_VERSION, KEY_SUPPLY_SIGNALS})
RULE_KEYS: frozenset[str] = frozenset(
    {
        KEY_ITEM_NAME,
        KEY_ITEM_SKIN_ID,
        KEY_SHOULD_EXPLODE,
        KEY_COOLDOWN_SECONDS,
        KEY_RUN_RANDOM_COMMAND,
        KEY_COMMANDS_TO_RUN,
        KEY_GLOBAL_MESSAGE,
        KEY_PERSONAL_MESSAGE,
    }
)
COMMAND_KEYS: frozenset[str] = frozenset({KEY_COMMAND_TYPE, KEY_COMMAND})

COMMAND_TYPE_NAMES: tuple[str, ...] = ("Chat", "Client", "Server")

DEFAULT_COOLDOWN_SECONDS: float = 60.0
DEFAULT_PERSONAL_MESSAGE: str = "You just threw a supply signal at {Grid}. Get ready for the airdrop!"
DEFAULT_CHAT_COMMAND: str = "Hello, my name is {PlayerName} and you can find me in grid {Grid}."
DEFAULT_CLIENT_COMMAND: str = "heli.calltome"
DEFAULT_SERVER_COMMAND: str = "inventory.giveto {PlayerId} scrap 50"

# Oldest layout this plugin can migrate from; anything older is replaced by defaults.
FIRST_COMPATIBLE_VERSION: str = "1.0.0"

_COMMAND_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": [KEY_COMMAND_TYPE, KEY_COMMAND],
    "properties": {
        KEY_COMMAND_TYPE: {"enum": list(COMMAND_TYPE_NAMES)},
        KEY_COMMAND: {"type": "string"},
    },
}

_RULE_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": sorted(RULE_KEYS),
    "properties": {
        KEY_ITEM_NAME: {"type": "string"},
        KEY_ITEM_SKIN_ID: {"type": "integer", "minimum": 0},
        KEY_SHOULD_EXPLODE: {"type": "boolean"},
        KEY_COOLDOWN_SECONDS: {"type": "number", "minimum": 0},
        KEY_RUN_RANDOM_COMMAND: {"type": "boolean"},
        KEY_COMMANDS_TO_RUN: {"type": "array", "items": _COMMAND_SCHEMA},
        KEY_GLOBAL_MESSAGE: {"type": "string"},
        KEY_PERSONAL_MESSAGE: {"type": "string"},
    },
}

# JSON Schema (draft 2020-12) for documents written by this package.
CONFIG_JSON_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "type": "object",
    "required": [KEY_VERSION, KEY_SUPPLY_SIGNALS],
    "properties": {
        KEY_VERSION: {"type": "string", "pattern": r"^\d+(\.\d+)*$"},
        KEY_SUPPLY_SIGNALS: {"type": "array", "items": _RULE_SCHEMA},
    },
}
