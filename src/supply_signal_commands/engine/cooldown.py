"""Per-player, per-rule cooldown tracking.

Records live in memory only and are lost when the plugin unloads.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeAlias

CooldownKey: TypeAlias = tuple[str, int]


@dataclass(frozen=True)
class CooldownCheck:
    blocked: bool
    remaining: float = 0.0


class CooldownTracker:
    """Last-trigger timestamps keyed by ``(player_id, rule_index)``.

    Timestamps come from ``clock``, a monotonic seconds counter. A lock
    serializes access so concurrent throws from different players cannot
    interleave a check with another player's record.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._last_use: dict[CooldownKey, float] = {}
        self._lock = threading.Lock()

    def check(
        self,
        player_id: str,
        rule_index: int,
        cooldown_seconds: float,
        now: float | None = None,
    ) -> CooldownCheck:
        """Report whether a trigger at ``now`` falls inside the cooldown window."""
        current = self._clock() if now is None else now
        with self._lock:
            return self._check_locked((player_id, rule_index), cooldown_seconds, current)

    def record(self, player_id: str, rule_index: int, now: float | None = None) -> None:
        current = self._clock() if now is None else now
        with self._lock:
            self._last_use[(player_id, rule_index)] = current

    def try_acquire(
        self,
        player_id: str,
        rule_index: int,
        cooldown_seconds: float,
        now: float | None = None,
    ) -> CooldownCheck:
        """Check the window and, when not blocked, record ``now`` as the new trigger time.

        Blocked attempts leave the stored timestamp untouched.
        """
        current = self._clock() if now is None else now
        key = (player_id, rule_index)
        with self._lock:
            result = self._check_locked(key, cooldown_seconds, current)
            if not result.blocked and cooldown_seconds > 0:
                self._last_use[key] = current
            return result

    def last_use(self, player_id: str, rule_index: int) -> float | None:
        with self._lock:
            return self._last_use.get((player_id, rule_index))

    def clear(self) -> None:
        with self._lock:
            self._last_use.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_use)

    def _check_locked(self, key: CooldownKey, cooldown_seconds: float, now: float) -> CooldownCheck:
        if cooldown_seconds <= 0:
            return CooldownCheck(blocked=False)
        last = self._last_use.get(key)
        if last is None:
            return CooldownCheck(blocked=False)
        expires_at = last + cooldown_seconds
        if now < expires_at:
            return CooldownCheck(blocked=True, remaining=expires_at - now)
        return CooldownCheck(blocked=False)


def format_duration(seconds: float) -> str:
    """Format a remaining time for players, truncating toward zero.

    ``3725`` -> ``"1h 2m"``, ``150.9`` -> ``"2m 30s"``, ``42.7`` -> ``"42s"``.
    """
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h {minutes}m"
    if minutes:
        return f"{minutes}m {secs}s"
    return f"{secs}s"
