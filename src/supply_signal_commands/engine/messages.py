"""Per-locale catalog of player-facing strings."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from supply_signal_commands.constants.lang import DEFAULT_LOCALE, DEFAULT_MESSAGES

logger = logging.getLogger(__name__)


class MessageCatalog:
    """Looks up message templates by key and locale.

    Lookup order is the exact locale, its language part (``de`` for
    ``de-AT``), the default locale, and finally the key itself.
    """

    def __init__(self, messages: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._messages: dict[str, dict[str, str]] = {DEFAULT_LOCALE: dict(DEFAULT_MESSAGES)}
        for locale, table in (messages or {}).items():
            self.register(locale, table)

    def register(self, locale: str, messages: Mapping[str, str]) -> None:
        """Add or override messages for ``locale``."""
        self._messages.setdefault(_normalize(locale), {}).update(messages)

    def template(self, key: str, locale: str = DEFAULT_LOCALE) -> str:
        for candidate in _candidates(locale):
            table = self._messages.get(candidate)
            if table and key in table:
                return table[key]
        return key

    def get(self, key: str, locale: str = DEFAULT_LOCALE, *args: object) -> str:
        """Return the message for ``key`` with positional ``{0}``-style arguments filled in."""
        template = self.template(key, locale)
        if not args:
            return template
        try:
            return template.format(*args)
        except (IndexError, KeyError, ValueError) as exc:
            logger.warning("Bad message template for %s (%s): %s", key, locale, exc)
            return template


def _normalize(locale: str) -> str:
    return locale.strip().replace("_", "-").lower()


def _candidates(locale: str) -> list[str]:
    normalized = _normalize(locale or DEFAULT_LOCALE)
    candidates = [normalized]
    language = normalized.split("-", 1)[0]
    if language != normalized:
        candidates.append(language)
    if DEFAULT_LOCALE not in candidates:
        candidates.append(DEFAULT_LOCALE)
    return candidates
