"""Config loading, migration and normalization."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from supply_signal_commands.config.defaults import default_document
from supply_signal_commands.config.migrations import compare_versions, migrate_document
from supply_signal_commands.config.model import Command, CommandType, Configuration, Rule
from supply_signal_commands.constants.config import (
    COMMAND_TYPE_NAMES,
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
from supply_signal_commands.exceptions import ConfigError
from supply_signal_commands.io import load_document, write_document_atomic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a stored document."""

    config: Configuration
    created: bool = False
    migrated: bool = False
    from_version: str | None = None

    @property
    def needs_save(self) -> bool:
        return self.created or self.migrated


def default_config(version: str = PLUGIN_VERSION) -> Configuration:
    return parse_config(default_document(version))


def load_config(raw: object | None, current_version: str = PLUGIN_VERSION) -> LoadResult:
    """Turn a stored document (or its absence) into a current-version config.

    ``None`` means nothing is stored yet and yields the default config.
    Older documents are migrated; documents from a newer plugin version are
    used as-is.
    """
    if raw is None:
        logger.info("No stored config found, creating default config v%s", current_version)
        return LoadResult(config=default_config(current_version), created=True)

    if not isinstance(raw, Mapping):
        raise ConfigError(f"Config document must be a mapping, got {type(raw).__name__}")

    stored_version = raw.get(KEY_VERSION)
    if compare_versions(stored_version, current_version) > 0:
        logger.warning(
            "Config version %s is newer than plugin version %s; loading it without migration",
            stored_version,
            current_version,
        )
        return LoadResult(config=parse_config(raw), from_version=str(stored_version))

    migration = migrate_document(raw, current_version)
    return LoadResult(
        config=parse_config(migration.document),
        migrated=migration.migrated,
        from_version=migration.from_version,
    )


def load_config_file(
    path: Path,
    current_version: str = PLUGIN_VERSION,
    *,
    persist: bool = True,
) -> LoadResult:
    """Load a config file, creating or rewriting it when defaults or migrations apply."""
    raw: object | None = None
    if path.exists():
        try:
            raw = load_document(path)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid config file at {path}: {exc}") from exc
        except OSError as exc:
            raise ConfigError(f"Failed to read config file {path}: {exc}") from exc

    result = load_config(raw, current_version)
    if persist and result.needs_save:
        save_config_file(path, result.config)
        logger.info("Saved config to %s", path)
    return result


def save_config_file(path: Path, config: Configuration) -> None:
    write_document_atomic(path, config_to_document(config))


def config_to_document(config: Configuration) -> dict[str, Any]:
    """Serialize a config back to its stored document layout."""
    return {
        KEY_VERSION: config.version,
        KEY_SUPPLY_SIGNALS: [_rule_to_document(rule) for rule in config.rules],
    }


def _rule_to_document(rule: Rule) -> dict[str, Any]:
    return {
        KEY_ITEM_NAME: rule.item_name,
        KEY_ITEM_SKIN_ID: rule.skin_id,
        KEY_SHOULD_EXPLODE: rule.should_explode,
        KEY_COOLDOWN_SECONDS: rule.cooldown_seconds,
        KEY_RUN_RANDOM_COMMAND: rule.run_random_command,
        KEY_COMMANDS_TO_RUN: [
            {KEY_COMMAND_TYPE: command.type.value, KEY_COMMAND: command.template} for command in rule.commands
        ],
        KEY_GLOBAL_MESSAGE: rule.global_message,
        KEY_PERSONAL_MESSAGE: rule.personal_message,
    }


def parse_config(raw: Mapping[str, Any]) -> Configuration:
    """Validate and convert a current-layout document. Unknown keys are ignored."""
    version = raw.get(KEY_VERSION)
    if isinstance(version, (int, float)) and not isinstance(version, bool):
        version = str(version)
    if not isinstance(version, str):
        raise ConfigError(f"{KEY_VERSION} must be a string")

    signals_raw = raw.get(KEY_SUPPLY_SIGNALS)
    if signals_raw is None:
        signals_raw = []
    if not isinstance(signals_raw, list):
        raise ConfigError(f"{KEY_SUPPLY_SIGNALS} must be a list")

    rules = tuple(_parse_rule(entry, f"{KEY_SUPPLY_SIGNALS}[{index}]") for index, entry in enumerate(signals_raw))
    return Configuration(version=version, rules=rules)


def _parse_rule(raw: object, key_path: str) -> Rule:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{key_path} must be a mapping")

    commands_raw = raw.get(KEY_COMMANDS_TO_RUN)
    if commands_raw is None:
        commands_raw = []
    if not isinstance(commands_raw, list):
        raise ConfigError(f"{key_path}.{KEY_COMMANDS_TO_RUN} must be a list")

    return Rule(
        skin_id=_ensure_skin_id(raw.get(KEY_ITEM_SKIN_ID, 0), f"{key_path}.{KEY_ITEM_SKIN_ID}"),
        item_name=_ensure_string(raw.get(KEY_ITEM_NAME), f"{key_path}.{KEY_ITEM_NAME}"),
        should_explode=_ensure_bool(raw.get(KEY_SHOULD_EXPLODE, False), f"{key_path}.{KEY_SHOULD_EXPLODE}"),
        cooldown_seconds=_ensure_seconds(raw.get(KEY_COOLDOWN_SECONDS, 0), f"{key_path}.{KEY_COOLDOWN_SECONDS}"),
        run_random_command=_ensure_bool(
            raw.get(KEY_RUN_RANDOM_COMMAND, False),
            f"{key_path}.{KEY_RUN_RANDOM_COMMAND}",
        ),
        commands=tuple(
            _parse_command(entry, f"{key_path}.{KEY_COMMANDS_TO_RUN}[{index}]")
            for index, entry in enumerate(commands_raw)
        ),
        global_message=_ensure_string(raw.get(KEY_GLOBAL_MESSAGE), f"{key_path}.{KEY_GLOBAL_MESSAGE}"),
        personal_message=_ensure_string(raw.get(KEY_PERSONAL_MESSAGE), f"{key_path}.{KEY_PERSONAL_MESSAGE}"),
    )


def _parse_command(raw: object, key_path: str) -> Command:
    if not isinstance(raw, Mapping):
        raise ConfigError(f"{key_path} must be a mapping")

    type_raw = raw.get(KEY_COMMAND_TYPE)
    if not isinstance(type_raw, str):
        raise ConfigError(f"{key_path}.{KEY_COMMAND_TYPE} must be one of {list(COMMAND_TYPE_NAMES)}")
    try:
        command_type = CommandType.parse(type_raw)
    except ValueError:
        raise ConfigError(
            f"{key_path}.{KEY_COMMAND_TYPE} must be one of {list(COMMAND_TYPE_NAMES)}, got {type_raw!r}"
        ) from None

    return Command(type=command_type, template=_ensure_string(raw.get(KEY_COMMAND), f"{key_path}.{KEY_COMMAND}"))


def _ensure_string(value: Any, key_name: str) -> str:
    """Coerce a value to a string, treating ``None`` as empty."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"{key_name} must be a string")
    return value


def _ensure_bool(value: Any, key_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{key_name} must be a boolean")
    return value


def _ensure_skin_id(value: Any, key_name: str) -> int:
    """Accept a non-negative integer, or a string of digits as hand-edited files often contain."""
    if isinstance(value, str) and value.strip().isdigit():
        return int(value.strip())
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{key_name} must be a non-negative integer")
    return value


def _ensure_seconds(value: Any, key_name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
        raise ConfigError(f"{key_name} must be a finite, non-negative number of seconds")
    return float(value)
