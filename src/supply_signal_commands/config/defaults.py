"""Default configuration written on first install."""

from __future__ import annotations

from typing import Any

from supply_signal_commands.constants.config import (
    DEFAULT_CHAT_COMMAND,
    DEFAULT_CLIENT_COMMAND,
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_PERSONAL_MESSAGE,
    DEFAULT_SERVER_COMMAND,
    KEY_COMMAND,
    KEY_COMMAND_TYPE,
    KEY_COMMANDS_TO_RUN,
    KEY_COOLDOWN_SECONDS,
    KEY_GLOBAL_MESSAGE,
    KEY_ITEM_NAME,
    KEY_ITEM_SKIN_ID,
    KEY_PERSONAL_MESSAGE,
    KEY_RUN_RANDOM_COMMAND,
    KEY_SHOULD_EXPLODE,
    KEY_SUPPLY_SIGNALS,
    KEY_VERSION,
)
from supply_signal_commands.constants.version import PLUGIN_VERSION


def default_document(version: str = PLUGIN_VERSION) -> dict[str, Any]:
    """Return a fresh config document with one example rule using every command type."""
    return {
        KEY_VERSION: version,
        KEY_SUPPLY_SIGNALS: [
            {
                KEY_ITEM_NAME: "",
                KEY_ITEM_SKIN_ID: 0,
                KEY_SHOULD_EXPLODE: False,
                KEY_COOLDOWN_SECONDS: DEFAULT_COOLDOWN_SECONDS,
                KEY_RUN_RANDOM_COMMAND: False,
                KEY_COMMANDS_TO_RUN: [
                    {KEY_COMMAND_TYPE: "Chat", KEY_COMMAND: DEFAULT_CHAT_COMMAND},
                    {KEY_COMMAND_TYPE: "Client", KEY_COMMAND: DEFAULT_CLIENT_COMMAND},
                    {KEY_COMMAND_TYPE: "Server", KEY_COMMAND: DEFAULT_SERVER_COMMAND},
                ],
                KEY_GLOBAL_MESSAGE: "",
                KEY_PERSONAL_MESSAGE: DEFAULT_PERSONAL_MESSAGE,
            }
        ],
    }
