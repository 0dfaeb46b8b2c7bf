"""Throw handling: rule lookup, cooldowns, command dispatch and messaging."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from supply_signal_commands.config.loader import load_config_file
from supply_signal_commands.config.model import Command, CommandType, Configuration, Rule
from supply_signal_commands.constants.lang import MSG_COOLDOWN
from supply_signal_commands.constants.placeholders import CHAT_COMMAND_FORMAT
from supply_signal_commands.engine.cooldown import CooldownTracker, format_duration
from supply_signal_commands.engine.matcher import match_rule
from supply_signal_commands.engine.messages import MessageCatalog
from supply_signal_commands.engine.templating import PlaceholderContext, render
from supply_signal_commands.types.common import OutcomeStatus
from supply_signal_commands.types.host import Host, Player, ThrowEvent

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThrowOutcome:
    """What handling one throw event did."""

    status: OutcomeStatus
    rule_index: int | None = None
    explosion_cancelled: bool = False
    commands: tuple[str, ...] = ()
    remaining: float = 0.0


def chat_envelope(text: str) -> str:
    """Wrap text in a client ``say`` command, escaping embedded quotes."""
    return CHAT_COMMAND_FORMAT.format(text.replace('"', '\\"'))


class SupplySignalCommands:
    """Plugin service holding the active config and cooldown records.

    The host calls :meth:`on_explosive_thrown` for every thrown supply signal,
    one event at a time.
    """

    def __init__(
        self,
        host: Host,
        config: Configuration,
        *,
        cooldowns: CooldownTracker | None = None,
        messages: MessageCatalog | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._host = host
        self._config = config
        self._cooldowns = cooldowns or CooldownTracker()
        self._messages = messages or MessageCatalog()
        self._rng = rng or random.Random()

    @classmethod
    def from_config_file(cls, path: Path, host: Host, **kwargs: Any) -> SupplySignalCommands:
        """Load (creating or migrating as needed) the config file and build the service."""
        result = load_config_file(path)
        return cls(host, result.config, **kwargs)

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def cooldowns(self) -> CooldownTracker:
        return self._cooldowns

    @property
    def messages(self) -> MessageCatalog:
        return self._messages

    def reload(self, config: Configuration) -> None:
        """Swap in a new config. Cooldown records are kept."""
        self._config = config
        logger.info("Config reloaded with %d supply signal rule(s)", len(config.rules))

    def unload(self) -> None:
        self._cooldowns.clear()

    def on_explosive_thrown(self, event: ThrowEvent) -> ThrowOutcome:
        """Handle a thrown supply signal."""
        player = event.player
        if player is None or event.signal is None or event.item is None:
            return ThrowOutcome(status="ignored")

        # One snapshot per event; a reload mid-handler must not mix rule lists.
        config = self._config
        match = match_rule(event.item.skin_id, event.item.name, config.rules)
        if match is None:
            return ThrowOutcome(status="no_match")

        rule = match.rule
        logger.debug(
            "Supply signal skin %d thrown by %s matched rule %d",
            event.item.skin_id,
            player.user_id,
            match.index,
        )

        if rule.cooldown_seconds > 0:
            check = self._cooldowns.try_acquire(player.user_id, match.index, rule.cooldown_seconds)
            if check.blocked:
                message = self._messages.get(MSG_COOLDOWN, player.locale, format_duration(check.remaining))
                self._host.send_reply(player, message)
                return ThrowOutcome(status="cooldown", rule_index=match.index, remaining=check.remaining)

        if not rule.should_explode:
            self._host.cancel_explosion(event.signal)

        context = PlaceholderContext.for_player(player, self._host.grid_label)
        dispatched = tuple(self._run_command(player, command, context) for command in self._select_commands(rule))
        self._send_messages(player, rule, context)

        return ThrowOutcome(
            status="triggered",
            rule_index=match.index,
            explosion_cancelled=not rule.should_explode,
            commands=dispatched,
        )

    def _select_commands(self, rule: Rule) -> tuple[Command, ...]:
        if rule.run_random_command and rule.commands:
            return (self._rng.choice(rule.commands),)
        return rule.commands

    def _run_command(self, player: Player, command: Command, context: PlaceholderContext) -> str:
        rendered = render(command.template, context)
        match command.type:
            case CommandType.CHAT:
                self._host.run_client_command(player, chat_envelope(rendered))
            case CommandType.CLIENT:
                self._host.run_client_command(player, rendered)
            case CommandType.SERVER:
                self._host.run_server_command(rendered)
        logger.debug("Dispatched %s command for %s: %s", command.type.value, player.user_id, rendered)
        return rendered

    def _send_messages(self, player: Player, rule: Rule, context: PlaceholderContext) -> None:
        if rule.global_message:
            broadcast = render(rule.global_message, context)
            for recipient in self._host.connected_players():
                self._host.send_reply(recipient, broadcast)

        if rule.personal_message:
            self._host.send_reply(player, render(rule.personal_message, context))
