"""Configuration loading, migration and validation.

This package facade re-exports the public names so callers can write
``from supply_signal_commands.config import ...``.
"""

from __future__ import annotations

from supply_signal_commands.config.defaults import default_document
from supply_signal_commands.config.loader import (
    LoadResult,
    config_to_document,
    default_config,
    load_config,
    load_config_file,
    parse_config,
    save_config_file,
)
from supply_signal_commands.config.migrations import (
    MIGRATION_STEPS,
    MigrationResult,
    MigrationStep,
    compare_versions,
    migrate_document,
    parse_version,
)
from supply_signal_commands.config.model import Command, CommandType, Configuration, Rule
from supply_signal_commands.config.validator import validate_config_file, validate_document

__all__ = [
    "MIGRATION_STEPS",
    "Command",
    "CommandType",
    "Configuration",
    "LoadResult",
    "MigrationResult",
    "MigrationStep",
    "Rule",
    "compare_versions",
    "config_to_document",
    "default_config",
    "default_document",
    "load_config",
    "load_config_file",
    "migrate_document",
    "parse_config",
    "parse_version",
    "save_config_file",
    "validate_config_file",
    "validate_document",
]
