"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

OutcomeStatus: TypeAlias = Literal["ignored", "no_match", "cooldown", "triggered"]
