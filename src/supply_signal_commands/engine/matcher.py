"""Rule selection for thrown supply signals."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from supply_signal_commands.config.model import Rule


@dataclass(frozen=True)
class RuleMatch:
    index: int
    rule: Rule


def match_rule(skin_id: int, item_name: str | None, rules: Sequence[Rule]) -> RuleMatch | None:
    """Return the first rule in list order that matches the item, if any."""
    for index, rule in enumerate(rules):
        if rule.matches(skin_id, item_name):
            return RuleMatch(index=index, rule=rule)
    return None
