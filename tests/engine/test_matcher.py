"""Tests for first-match rule selection."""

from __future__ import annotations

from supply_signal_commands.config import Rule
from supply_signal_commands.engine import match_rule


def test_empty_name_filter_matches_any_item_name() -> None:
    rules = (Rule(skin_id=100),)

    for name in ("Supply Signal", "Custom Name", "", None):
        match = match_rule(100, name, rules)
        assert match is not None
        assert match.index == 0


def test_name_filter_requires_exact_name() -> None:
    rules = (Rule(skin_id=100, item_name="Heli Signal"),)

    assert match_rule(100, "Heli Signal", rules) is not None
    assert match_rule(100, "heli signal", rules) is None
    assert match_rule(100, "Heli Signal ", rules) is None
    assert match_rule(100, None, rules) is None


def test_skin_must_match() -> None:
    rules = (Rule(skin_id=100),)

    assert match_rule(101, "Supply Signal", rules) is None


def test_name_mismatch_falls_through_to_next_rule() -> None:
    rules = (
        Rule(skin_id=100, item_name="Heli Signal"),
        Rule(skin_id=100),
    )

    match = match_rule(100, "Loot Signal", rules)

    assert match is not None
    assert match.index == 1


def test_earlier_rule_wins_for_identical_matches() -> None:
    first = Rule(skin_id=7, personal_message="first")
    second = Rule(skin_id=7, personal_message="second")

    match = match_rule(7, "x", (first, second))

    assert match is not None
    assert match.index == 0
    assert match.rule is first


def test_no_rules_means_no_match() -> None:
    assert match_rule(0, "Supply Signal", ()) is None
