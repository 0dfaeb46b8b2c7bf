"""Run configurable commands when a supply signal is thrown."""

from __future__ import annotations

from supply_signal_commands.config import Configuration, load_config, load_config_file
from supply_signal_commands.constants.version import PLUGIN_VERSION
from supply_signal_commands.engine.dispatcher import SupplySignalCommands, ThrowOutcome

__version__ = PLUGIN_VERSION

__all__ = [
    "Configuration",
    "SupplySignalCommands",
    "ThrowOutcome",
    "__version__",
    "load_config",
    "load_config_file",
]
