"""Reward dispatch for reached milestones.

Every action of a reward runs on its own: an exception raised while healing
does not stop the ammo refill, a failing command does not stop the next one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from killawards.domain.enums import CommandType, MessageKey
from killawards.domain.localization import Localizer
from killawards.domain.models import Player
from killawards.domain.players import top_up_ammo
from killawards.domain.rules_config import CommandConfig, RewardConfig
from killawards.domain.templating import substitute_placeholders
from killawards.interfaces import IGearProvider, IPlayerHost, IServerConsole

logger = logging.getLogger(__name__)

DEFAULT_WORLD_SIZE = 4500


class RewardDispatcher:
    """Apply the actions of a reward to a player."""

    def __init__(
        self,
        host: IPlayerHost,
        console: IServerConsole,
        *,
        gear_provider: IGearProvider | None = None,
        localizer: Localizer | None = None,
        world_size: int = DEFAULT_WORLD_SIZE,
    ) -> None:
        self.host = host
        self.console = console
        self.gear_provider = gear_provider
        self.localizer = localizer or Localizer()
        self.world_size = world_size

    def dispatch(self, player: Player, reward: RewardConfig) -> None:
        """Run heal, ammo, gear and command actions in that order."""

        self._isolated("heal", lambda: self._restore_health(player, reward))
        self._isolated("refill_ammo", lambda: self._refill_ammo(player, reward))
        self._isolated("equip_gear_set", lambda: self._equip_gear_set(player, reward))
        for index, command in enumerate(reward.commands):
            self._isolated(f"command[{index}]", lambda cmd=command: self.run_command(player, cmd))

    def run_command(self, player: Player, command: CommandConfig) -> str:
        """Substitute placeholders and route the command to its sink.

        Returns:
            The command text after substitution
        """

        text = substitute_placeholders(command.template, player, world_size=self.world_size)
        if command.kind is CommandType.CHAT_MESSAGE:
            self.host.run_client_command(player, f'chat.say "{text}"')
        elif command.kind is CommandType.CLIENT_CONSOLE:
            self.host.run_client_command(player, text)
        elif command.kind is CommandType.SERVER_CONSOLE:
            self.console.run_server_command(text)
        return text

    def _restore_health(self, player: Player, reward: RewardConfig) -> None:
        if reward.health_restored <= 0:
            return
        self.host.heal(player, reward.health_restored)
        self._notify(player, MessageKey.HEALTH_RESTORED, f"{reward.health_restored:g}")

    def _refill_ammo(self, player: Player, reward: RewardConfig) -> None:
        if not reward.refill_ammo:
            return
        if top_up_ammo(player):
            self.host.send_weapon_update(player)
        self._notify(player, MessageKey.AMMO_REFILLED)

    def _equip_gear_set(self, player: Player, reward: RewardConfig) -> None:
        if not reward.gear_set_name or self.gear_provider is None:
            return
        if self.gear_provider.equip_gear_set(player, reward.gear_set_name, True):
            self._notify(player, MessageKey.GEAR_SET_GIVEN, reward.gear_set_name)

    def _notify(self, player: Player, key: MessageKey, *args: object) -> None:
        self.host.send_message(player, self.localizer.get_message(key, *args))

    @staticmethod
    def _isolated(action: str, run: Callable[[], object]) -> None:
        try:
            run()
        except Exception:
            logger.exception("Reward action %s failed", action)
