"""Forward-only migrations for stored configuration documents.

Each step is keyed by the version that introduced a layout change. A step
runs when the document's version is older than its threshold, and every
applicable step runs in ascending order even when a later step resets the
same fields again. Steps operate on a raw document draft so renamed or
retyped fields are rewritten before the document is parsed.
"""

from __future__ import annotations

import copy
import logging
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from supply_signal_commands.config.defaults import default_document
from supply_signal_commands.constants.config import (
    DEFAULT_COOLDOWN_SECONDS,
    DEFAULT_PERSONAL_MESSAGE,
    FIRST_COMPATIBLE_VERSION,
    KEY_COOLDOWN_SECONDS,
    KEY_GLOBAL_MESSAGE,
    KEY_ITEM_NAME,
    KEY_ITEM_SKIN_ID,
    KEY_PERSONAL_MESSAGE,
    KEY_RUN_RANDOM_COMMAND,
    KEY_SUPPLY_SIGNALS,
    KEY_VERSION,
)

logger = logging.getLogger(__name__)

Document: TypeAlias = dict[str, Any]

_VERSION_PREFIX = re.compile(r"[vV]?(\d+(?:\.\d+)*)")


def parse_version(value: object) -> tuple[int, ...] | None:
    """Parse the leading dotted numeric part of a version, returning ``None`` when unusable.

    Bare YAML numbers such as ``1.4`` are read as their string form. A ``v``
    prefix and suffixes such as ``-beta`` are ignored.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        value = str(value)
    if not isinstance(value, str) or not value.strip():
        return None
    match = _VERSION_PREFIX.match(value.strip())
    if match is None:
        return None
    return tuple(int(part) for part in match.group(1).split("."))


def compare_versions(left: object, right: object) -> int:
    """Three-way compare two version strings; unparsable versions sort first."""
    left_parts = parse_version(left)
    right_parts = parse_version(right)
    if left_parts is None or right_parts is None:
        if left_parts is None and right_parts is None:
            return 0
        return -1 if left_parts is None else 1
    width = max(len(left_parts), len(right_parts))
    padded_left = left_parts + (0,) * (width - len(left_parts))
    padded_right = right_parts + (0,) * (width - len(right_parts))
    return (padded_left > padded_right) - (padded_left < padded_right)


def is_older(stored: object, target: str) -> bool:
    return compare_versions(stored, target) < 0


def _rules(draft: Document) -> list[dict[str, Any]]:
    signals = draft.get(KEY_SUPPLY_SIGNALS)
    if not isinstance(signals, list):
        return []
    return [rule for rule in signals if isinstance(rule, dict)]


def _reset_to_defaults(draft: Document, current_version: str) -> Document:
    logger.warning(
        "Config version %r is missing, unreadable or older than %s; its %d rule(s) are replaced with defaults",
        draft.get(KEY_VERSION),
        FIRST_COMPATIBLE_VERSION,
        len(_rules(draft)),
    )
    return default_document(current_version)


def _introduce_item_name(draft: Document, current_version: str) -> Document:
    for rule in _rules(draft):
        rule[KEY_ITEM_NAME] = ""
    return draft


def _retype_item_skin_id(draft: Document, current_version: str) -> Document:
    for rule in _rules(draft):
        rule[KEY_ITEM_NAME] = ""
        rule[KEY_ITEM_SKIN_ID] = 0
    return draft


def _introduce_run_random(draft: Document, current_version: str) -> Document:
    for rule in _rules(draft):
        rule[KEY_RUN_RANDOM_COMMAND] = False
    return draft


def _introduce_messages_and_cooldown(draft: Document, current_version: str) -> Document:
    for rule in _rules(draft):
        rule[KEY_ITEM_NAME] = ""
        rule[KEY_ITEM_SKIN_ID] = 0
        rule[KEY_COOLDOWN_SECONDS] = DEFAULT_COOLDOWN_SECONDS
        rule[KEY_GLOBAL_MESSAGE] = ""
        rule[KEY_PERSONAL_MESSAGE] = DEFAULT_PERSONAL_MESSAGE
    return draft


@dataclass(frozen=True)
class MigrationStep:
    threshold: str
    description: str
    apply: Callable[[Document, str], Document]


MIGRATION_STEPS: tuple[MigrationStep, ...] = (
    MigrationStep(FIRST_COMPATIBLE_VERSION, "replace incompatible layout with defaults", _reset_to_defaults),
    MigrationStep("1.1.0", "add item name filter", _introduce_item_name),
    MigrationStep("1.1.1", "reset item name and skin id", _retype_item_skin_id),
    MigrationStep("1.3.0", "add run random command flag", _introduce_run_random),
    MigrationStep("1.4.0", "add cooldown and broadcast/personal messages", _introduce_messages_and_cooldown),
)


@dataclass(frozen=True)
class MigrationResult:
    document: Document
    from_version: str | None
    applied: tuple[str, ...] = ()
    migrated: bool = False


def migrate_document(
    raw: Mapping[str, Any],
    current_version: str,
    steps: tuple[MigrationStep, ...] = MIGRATION_STEPS,
) -> MigrationResult:
    """Bring ``raw`` forward to ``current_version`` without touching the input.

    Documents already at or beyond ``current_version`` are returned as an
    unchanged copy with ``migrated=False``.
    """
    draft: Document = copy.deepcopy(dict(raw))
    stored = draft.get(KEY_VERSION)
    from_version = stored if isinstance(stored, str) else None

    if not is_older(stored, current_version):
        return MigrationResult(document=draft, from_version=from_version)

    logger.warning("Config changes detected! Updating from version %s to %s", from_version, current_version)

    applied: list[str] = []
    for step in steps:
        if is_older(current_version, step.threshold):
            continue
        if not is_older(draft.get(KEY_VERSION), step.threshold):
            continue
        logger.debug("Applying config migration %s: %s", step.threshold, step.description)
        draft = step.apply(draft, current_version)
        applied.append(step.threshold)

    draft[KEY_VERSION] = current_version
    logger.warning("Config update complete! Updated from version %s to %s", from_version, current_version)
    return MigrationResult(document=draft, from_version=from_version, applied=tuple(applied), migrated=True)
