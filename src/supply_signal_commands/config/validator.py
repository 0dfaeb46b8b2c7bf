"""Config file validation for supply signal rule documents."""

from __future__ import annotations

import difflib
import math
from pathlib import Path
from typing import Any

import yaml

from supply_signal_commands.config.migrations import compare_versions, parse_version
from supply_signal_commands.constants.config import (
    COMMAND_KEYS,
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
    RULE_KEYS,
    TOP_LEVEL_KEYS,
)
from supply_signal_commands.constants.validation import (
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    CFG009,
    CFG010,
    CFG011,
    LEVEL_WARNING,
)
from supply_signal_commands.constants.version import PLUGIN_VERSION
from supply_signal_commands.exceptions.validation import ValidationError, sort_errors
from supply_signal_commands.io import load_document

_BOOL_KEYS: tuple[str, ...] = (KEY_SHOULD_EXPLODE, KEY_RUN_RANDOM_COMMAND)
_STRING_KEYS: tuple[str, ...] = (KEY_ITEM_NAME, KEY_GLOBAL_MESSAGE, KEY_PERSONAL_MESSAGE)


def validate_config_file(path: Path, current_version: str = PLUGIN_VERSION) -> list[ValidationError]:
    """Validate a config file and return every problem found.

    Never raises. Unknown keys, shadowed rules and versions newer than the
    plugin are reported as warnings since loading tolerates them.
    """
    path_str = str(path)
    if not path.exists():
        return [ValidationError(code=CFG001, path=path_str, field="", message=f"config file not found: {path}")]

    try:
        raw = load_document(path)
    except (OSError, yaml.YAMLError) as exc:
        return [ValidationError(code=CFG002, path=path_str, field="", message=f"unreadable config: {exc}")]

    return validate_document(raw, path_str, current_version)


def validate_document(
    raw: object,
    path_str: str = "<document>",
    current_version: str = PLUGIN_VERSION,
) -> list[ValidationError]:
    """Validate an already parsed document."""
    errors: list[ValidationError] = []
    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a mapping, got {type(raw).__name__}",
            )
        )
        return errors

    _check_unknown_keys(raw, TOP_LEVEL_KEYS, "", path_str, errors)
    _validate_version(raw, path_str, current_version, errors)

    signals = raw.get(KEY_SUPPLY_SIGNALS)
    if signals is not None and not isinstance(signals, list):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field=KEY_SUPPLY_SIGNALS,
                message=f"invalid type for `{KEY_SUPPLY_SIGNALS}`",
                hint="expected a list of rules",
            )
        )
    elif signals:
        for index, rule in enumerate(signals):
            _validate_rule(rule, f"{KEY_SUPPLY_SIGNALS}[{index}]", path_str, errors)
        _check_shadowed_rules(signals, path_str, errors)

    return sort_errors(errors)


def _validate_version(
    raw: dict[str, Any],
    path_str: str,
    current_version: str,
    errors: list[ValidationError],
) -> None:
    version = raw.get(KEY_VERSION)
    if parse_version(version) is None:
        errors.append(
            ValidationError(
                code=CFG008,
                path=path_str,
                field=KEY_VERSION,
                message=f"invalid version {version!r}",
                hint="loading will replace this config with defaults",
                level=LEVEL_WARNING,
            )
        )
        return
    if compare_versions(version, current_version) > 0:
        errors.append(
            ValidationError(
                code=CFG010,
                path=path_str,
                field=KEY_VERSION,
                message=f"config version {version} is newer than plugin version {current_version}",
                hint="the config is loaded as-is without migration",
                level=LEVEL_WARNING,
            )
        )


def _validate_rule(rule: object, field: str, path_str: str, errors: list[ValidationError]) -> None:
    """Validate one entry of the ``Supply Signals`` list."""
    if not isinstance(rule, dict):
        errors.append(ValidationError(code=CFG009, path=path_str, field=field, message=f"`{field}` must be a mapping"))
        return

    _check_unknown_keys(rule, RULE_KEYS, field, path_str, errors)

    if KEY_ITEM_SKIN_ID in rule:
        skin_id = rule[KEY_ITEM_SKIN_ID]
        if isinstance(skin_id, str) and skin_id.strip().isdigit():
            pass
        elif isinstance(skin_id, bool) or not isinstance(skin_id, int):
            errors.append(_type_error(path_str, f"{field}.{KEY_ITEM_SKIN_ID}", "expected a non-negative integer"))
        elif skin_id < 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field}.{KEY_ITEM_SKIN_ID}",
                    message=f"`{KEY_ITEM_SKIN_ID}` must be non-negative, got {skin_id}",
                )
            )

    if KEY_COOLDOWN_SECONDS in rule:
        cooldown = rule[KEY_COOLDOWN_SECONDS]
        if isinstance(cooldown, bool) or not isinstance(cooldown, (int, float)):
            errors.append(_type_error(path_str, f"{field}.{KEY_COOLDOWN_SECONDS}", "expected a number of seconds"))
        elif not math.isfinite(cooldown) or cooldown < 0:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field=f"{field}.{KEY_COOLDOWN_SECONDS}",
                    message=f"`{KEY_COOLDOWN_SECONDS}` must be finite and non-negative, got {cooldown}",
                    hint="use 0 to disable the cooldown",
                )
            )

    for key in _BOOL_KEYS:
        if key in rule and not isinstance(rule[key], bool):
            errors.append(_type_error(path_str, f"{field}.{key}", "expected a boolean"))

    for key in _STRING_KEYS:
        if key in rule and rule[key] is not None and not isinstance(rule[key], str):
            errors.append(_type_error(path_str, f"{field}.{key}", "expected a string"))

    commands = rule.get(KEY_COMMANDS_TO_RUN)
    if commands is None:
        return
    if not isinstance(commands, list):
        errors.append(_type_error(path_str, f"{field}.{KEY_COMMANDS_TO_RUN}", "expected a list of commands"))
        return
    for index, command in enumerate(commands):
        _validate_command(command, f"{field}.{KEY_COMMANDS_TO_RUN}[{index}]", path_str, errors)


def _validate_command(command: object, field: str, path_str: str, errors: list[ValidationError]) -> None:
    if not isinstance(command, dict):
        errors.append(
            ValidationError(code=CFG009, path=path_str, field=field, message=f"`{field}` must be a mapping")
        )
        return

    _check_unknown_keys(command, COMMAND_KEYS, field, path_str, errors)

    command_type = command.get(KEY_COMMAND_TYPE)
    valid_types = {name.casefold() for name in COMMAND_TYPE_NAMES}
    if not isinstance(command_type, str) or command_type.strip().casefold() not in valid_types:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field=f"{field}.{KEY_COMMAND_TYPE}",
                message=f"invalid value for `{KEY_COMMAND_TYPE}`",
                hint=f"expected one of: {', '.join(COMMAND_TYPE_NAMES)}; got: {command_type!r}",
            )
        )

    template = command.get(KEY_COMMAND)
    if template is not None and not isinstance(template, str):
        errors.append(_type_error(path_str, f"{field}.{KEY_COMMAND}", "expected a string"))


def _check_shadowed_rules(signals: list[Any], path_str: str, errors: list[ValidationError]) -> None:
    """Warn about rules that can never match because an earlier rule always wins."""
    seen: dict[tuple[object, object], int] = {}
    for index, rule in enumerate(signals):
        if not isinstance(rule, dict):
            continue
        skin_id = rule.get(KEY_ITEM_SKIN_ID, 0)
        name = rule.get(KEY_ITEM_NAME) or ""
        if not isinstance(skin_id, (int, str)) or not isinstance(name, str):
            continue
        skin_key = str(skin_id).strip()
        earlier = seen.get((skin_key, "")) if name else None
        if earlier is None:
            earlier = seen.get((skin_key, name))
        if earlier is not None:
            errors.append(
                ValidationError(
                    code=CFG011,
                    path=path_str,
                    field=f"{KEY_SUPPLY_SIGNALS}[{index}]",
                    message=f"rule is shadowed by `{KEY_SUPPLY_SIGNALS}[{earlier}]` and will never match",
                    hint="the first matching rule wins; reorder or remove one of them",
                    level=LEVEL_WARNING,
                )
            )
            continue
        seen.setdefault((skin_key, name), index)


def _check_unknown_keys(
    raw: dict[str, Any],
    allowed: frozenset[str],
    prefix: str,
    path_str: str,
    errors: list[ValidationError],
) -> None:
    for key in sorted(raw.keys(), key=str):
        if key in allowed:
            continue
        field = f"{prefix}.{key}" if prefix else str(key)
        errors.append(
            ValidationError(
                code=CFG004,
                path=path_str,
                field=field,
                message=f"unknown key `{key}` is ignored",
                hint=_suggest_key(str(key), allowed),
                level=LEVEL_WARNING,
            )
        )


def _type_error(path_str: str, field: str, hint: str) -> ValidationError:
    return ValidationError(
        code=CFG005,
        path=path_str,
        field=field,
        message=f"invalid type for `{field}`",
        hint=hint,
    )


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
