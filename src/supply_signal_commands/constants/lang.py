"""Localized player-facing strings."""

from __future__ import annotations

DEFAULT_LOCALE: str = "en"

MSG_COOLDOWN: str = "Cooldown"

DEFAULT_MESSAGES: dict[str, str] = {
    MSG_COOLDOWN: "You must wait {0} before throwing this supply signal again.",
}
