"""Tests for config loading, parsing and persistence."""

from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
import yaml

from supply_signal_commands.config import (
    CommandType,
    config_to_document,
    default_config,
    load_config,
    load_config_file,
    parse_config,
)
from supply_signal_commands.constants.config import DEFAULT_COOLDOWN_SECONDS
from supply_signal_commands.exceptions import ConfigError


def test_load_config_creates_defaults_when_absent() -> None:
    result = load_config(None, "1.4.0")

    assert result.created
    assert result.needs_save
    assert result.config.version == "1.4.0"
    [rule] = result.config.rules
    assert [command.type for command in rule.commands] == [CommandType.CHAT, CommandType.CLIENT, CommandType.SERVER]
    assert rule.should_explode is False
    assert rule.cooldown_seconds == DEFAULT_COOLDOWN_SECONDS


def test_load_config_rejects_non_mapping() -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(["not", "a", "mapping"])


def test_load_config_file_writes_default_file(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "supply_signal_commands.yaml"

    result = load_config_file(path)

    assert result.created
    stored = yaml.safe_load(path.read_text(encoding="utf-8"))
    assert stored == config_to_document(result.config)


def test_load_config_file_writes_json_for_json_suffix(tmp_path: Path) -> None:
    path = tmp_path / "SupplySignalCommands.json"

    load_config_file(path)

    stored = json.loads(path.read_text(encoding="utf-8"))
    assert list(stored) == ["Version", "Supply Signals"]


def test_load_config_file_rewrites_migrated_file(tmp_path: Path, configs_root: Path) -> None:
    path = tmp_path / "config.json"
    shutil.copy(configs_root / "v1_0_0.json", path)

    result = load_config_file(path, "1.4.0")

    assert result.migrated
    assert result.from_version == "1.0.0"
    assert json.loads(path.read_text(encoding="utf-8"))["Version"] == "1.4.0"


def test_load_config_file_leaves_current_file_untouched(tmp_path: Path, configs_root: Path) -> None:
    path = tmp_path / "config.yaml"
    shutil.copy(configs_root / "current.yaml", path)
    before = path.read_text(encoding="utf-8")

    result = load_config_file(path, "1.4.0")

    assert not result.needs_save
    assert path.read_text(encoding="utf-8") == before
    assert [rule.skin_id for rule in result.config.rules] == [100, 200]


def test_load_config_file_persist_false_does_not_write(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"

    result = load_config_file(path, persist=False)

    assert result.created
    assert not path.exists()


def test_load_config_file_rejects_invalid_yaml(tmp_path: Path) -> None:
    path = tmp_path / "config.yaml"
    path.write_text("Version: [1.4.0\n", encoding="utf-8")

    with pytest.raises(ConfigError, match="Invalid config file"):
        load_config_file(path)


def test_yaml_fixture_with_legacy_keys_parses_after_migration(configs_root: Path) -> None:
    raw = yaml.safe_load((configs_root / "v1_3_0.yaml").read_text(encoding="utf-8"))

    [rule] = load_config(raw, "1.4.0").config.rules

    assert rule.run_random_command is True
    assert rule.commands[0].type is CommandType.CLIENT
    assert rule.personal_message.startswith("You just threw a supply signal")


@pytest.mark.parametrize(
    ("rule_patch", "expected_match"),
    [
        ({"Item Skin Id": -1}, r"Supply Signals\[0\]\.Item Skin Id"),
        ({"Item Skin Id": True}, "Item Skin Id"),
        ({"Should Explode": "yes"}, "Should Explode"),
        ({"Cooldown Seconds": -5}, "Cooldown Seconds"),
        ({"Cooldown Seconds": float("inf")}, "Cooldown Seconds"),
        ({"Cooldown Seconds": float("nan")}, "Cooldown Seconds"),
        ({"Run Random Command": 1}, "Run Random Command"),
        ({"Personal Message": 12}, "Personal Message"),
        ({"Commands To Run": "say hi"}, "Commands To Run"),
        ({"Commands To Run": [{"Type": "Console", "Command": "x"}]}, r"Commands To Run\[0\]\.Type"),
    ],
    ids=["negative-skin", "bool-skin", "non-bool-explode", "negative-cooldown", "infinite-cooldown",
         "nan-cooldown", "int-random", "int-message", "string-commands", "unknown-type"],
)
def test_parse_config_rejects_invalid_values(rule_patch: dict, expected_match: str) -> None:
    raw = config_to_document(default_config("1.4.0"))
    raw["Supply Signals"][0].update(rule_patch)

    with pytest.raises(ConfigError, match=expected_match):
        parse_config(raw)


def test_parse_config_ignores_unknown_keys_and_fills_missing_ones() -> None:
    config = parse_config(
        {
            "Version": "1.4.0",
            "Comment": "hand edited",
            "Supply Signals": [{"Item Skin Id": "2902701361", "Notes": "legacy", "Commands To Run": None}],
        }
    )

    [rule] = config.rules
    assert rule.skin_id == 2902701361
    assert rule.item_name == ""
    assert rule.cooldown_seconds == 0
    assert rule.commands == ()
    assert rule.personal_message == ""


def test_parse_config_reads_command_type_case_insensitively() -> None:
    config = parse_config(
        {"Version": "1.4.0", "Supply Signals": [{"Commands To Run": [{"Type": " server ", "Command": "x"}]}]}
    )

    assert config.rules[0].commands[0].type is CommandType.SERVER


def test_config_document_round_trip_preserves_rules() -> None:
    config = default_config("1.4.0")

    assert parse_config(config_to_document(config)) == config


def test_load_config_file_rejects_infinite_cooldown(tmp_path: Path) -> None:
    path = tmp_path / "signals.yaml"
    path.write_text(
        "Version: 1.4.0\nSupply Signals:\n  - Item Skin Id: 100\n    Cooldown Seconds: .inf\n",
        encoding="utf-8",
    )

    with pytest.raises(ConfigError, match=r"Supply Signals\[0\]\.Cooldown Seconds"):
        load_config_file(path, persist=False)
