"""Tests for forward-only config migrations."""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path

import pytest

from supply_signal_commands.config import (
    MIGRATION_STEPS,
    compare_versions,
    default_document,
    load_config,
    migrate_document,
    parse_version,
)
from supply_signal_commands.constants.config import DEFAULT_PERSONAL_MESSAGE


def _load_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.mark.parametrize(
    ("left", "right", "expected"),
    [
        ("1.0.0", "1.4.0", -1),
        ("1.4.0", "1.4.0", 0),
        ("1.4", "1.4.0", 0),
        ("1.10.0", "1.4.0", 1),
        (None, "0.0.1", -1),
        ("garbage", "1.0.0", -1),
        (1.3, "1.3.0", 0),
    ],
    ids=["older", "equal", "short-equal", "numeric-not-lexicographic", "missing", "unparsable", "yaml-float"],
)
def test_compare_versions(left: object, right: str, expected: int) -> None:
    assert compare_versions(left, right) == expected


def test_parse_version_reads_leading_numeric_part() -> None:
    assert parse_version("1.4.0") == (1, 4, 0)
    assert parse_version("1.4.0-beta") == (1, 4, 0)
    assert parse_version("v1.3.0") == (1, 3, 0)
    assert parse_version("latest") is None
    assert parse_version("") is None
    assert parse_version(True) is None


def test_migration_steps_are_in_ascending_order() -> None:
    thresholds = [step.threshold for step in MIGRATION_STEPS]
    assert thresholds == sorted(thresholds, key=parse_version)


def test_migrate_from_1_0_0_runs_every_later_step(configs_root: Path) -> None:
    raw = _load_json(configs_root / "v1_0_0.json")

    result = migrate_document(raw, "1.4.0")

    assert result.migrated
    assert result.from_version == "1.0.0"
    assert result.applied == ("1.1.0", "1.1.1", "1.3.0", "1.4.0")

    rule = result.document["Supply Signals"][0]
    assert result.document["Version"] == "1.4.0"
    assert rule["Item Name"] == ""
    assert rule["Item Skin Id"] == 0
    assert rule["Run Random Command"] is False
    assert rule["Cooldown Seconds"] == 60
    assert rule["Global Message"] == ""
    assert rule["Personal Message"] == DEFAULT_PERSONAL_MESSAGE


def test_migration_keeps_rules_and_untouched_fields(configs_root: Path) -> None:
    raw = _load_json(configs_root / "v1_0_0.json")

    config = load_config(raw, "1.4.0").config

    assert len(config.rules) == 1
    rule = config.rules[0]
    assert rule.should_explode is True
    assert [command.template for command in rule.commands] == [
        "inventory.giveto {playerId} scrap 100",
        "Airdrop incoming at {grid}!",
    ]


def test_migration_does_not_mutate_input(configs_root: Path) -> None:
    raw = _load_json(configs_root / "v1_0_0.json")
    snapshot = copy.deepcopy(raw)

    migrate_document(raw, "1.4.0")

    assert raw == snapshot


def test_pre_1_0_0_layout_is_replaced_with_defaults(configs_root: Path) -> None:
    raw = _load_json(configs_root / "v0_9_0.json")

    result = migrate_document(raw, "1.4.0")

    assert result.applied == ("1.0.0",)
    assert result.document == default_document("1.4.0")


def test_missing_version_is_treated_as_incompatible() -> None:
    result = migrate_document({"Supply Signals": [{"Item Skin Id": 5}]}, "1.4.0")

    assert result.applied == ("1.0.0",)
    assert result.document["Supply Signals"] == default_document("1.4.0")["Supply Signals"]


def test_migrate_from_1_3_0_only_runs_latest_step() -> None:
    raw = {
        "Version": "1.3.0",
        "Supply Signals": [
            {"Item Name": "Heli", "Item Skin Id": 77, "Run Random Command": True, "Commands To Run": []},
        ],
    }

    result = migrate_document(raw, "1.4.0")
    rule = result.document["Supply Signals"][0]

    assert result.applied == ("1.4.0",)
    assert rule["Run Random Command"] is True
    assert rule["Item Name"] == ""
    assert rule["Item Skin Id"] == 0
    assert rule["Cooldown Seconds"] == 60


def test_migrate_from_1_2_0_introduces_run_random_flag() -> None:
    raw = {"Version": "1.2.0", "Supply Signals": [{"Item Skin Id": 9}]}

    rule = migrate_document(raw, "1.4.0").document["Supply Signals"][0]

    assert rule["Run Random Command"] is False


def test_steps_beyond_current_version_are_skipped() -> None:
    raw = {"Version": "1.1.1", "Supply Signals": [{"Item Name": "Keep", "Item Skin Id": 3}]}

    result = migrate_document(raw, "1.3.0")
    rule = result.document["Supply Signals"][0]

    assert result.applied == ("1.3.0",)
    assert result.document["Version"] == "1.3.0"
    assert rule["Item Name"] == "Keep"
    assert "Cooldown Seconds" not in rule


def test_current_version_is_not_migrated() -> None:
    raw = default_document("1.4.0")

    result = migrate_document(raw, "1.4.0")

    assert not result.migrated
    assert result.applied == ()
    assert result.document == raw


def test_newer_version_loads_without_migration() -> None:
    raw = default_document("1.4.0")
    raw["Version"] = "2.0.0"
    raw["Supply Signals"][0]["Item Skin Id"] = 555

    result = load_config(raw, "1.4.0")

    assert not result.migrated
    assert not result.needs_save
    assert result.config.version == "2.0.0"
    assert result.config.rules[0].skin_id == 555


@pytest.mark.parametrize("version", ["1.3.0-beta", "v1.3.0"], ids=["suffix", "v-prefix"])
def test_hand_edited_version_keeps_rules(version: str) -> None:
    raw = {"Version": version, "Supply Signals": [{"Item Skin Id": 77, "Run Random Command": True}]}

    result = migrate_document(raw, "1.4.0")

    assert result.applied == ("1.4.0",)
    assert result.document["Supply Signals"][0]["Run Random Command"] is True


def test_reset_to_defaults_logs_dropped_rules(caplog: pytest.LogCaptureFixture) -> None:
    raw = {"Version": "latest", "Supply Signals": [{"Item Skin Id": 5}, {"Item Skin Id": 6}]}

    with caplog.at_level(logging.WARNING):
        migrate_document(raw, "1.4.0")

    assert "'latest'" in caplog.text
    assert "2 rule(s) are replaced with defaults" in caplog.text
