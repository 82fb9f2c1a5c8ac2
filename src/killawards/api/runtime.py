"""Runtime primitives backing the Kill Awards HTTP API.

Over HTTP the game server is a remote caller, so the host collaborators
the reward engine talks to are stand-ins: an :class:`ActionJournal` records
every side effect dispatch asks for and hands the list back in the
response, and a :class:`TeamRegistry` keeps the team rosters the game
server pushes.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from killawards.config import Settings, get_settings
from killawards.domain.models import Player, PlayerID, Victim
from killawards.domain.rules_config import Configuration
from killawards.factory import create_award_service, create_config_repository
from killawards.services.award_service import DeathOutcome
from killawards.services.config_service import load_configuration

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class HostAction:
    """One side effect the game server is asked to carry out."""

    type: str
    player_id: PlayerID | None = None
    detail: dict[str, object] = field(default_factory=dict)


class ActionJournal:
    """Player host, server console and gear provider that records calls."""

    def __init__(self) -> None:
        self.actions: list[HostAction] = []

    def heal(self, player: Player, amount: float) -> None:
        self.actions.append(HostAction("heal", player.id, {"amount": amount}))

    def send_weapon_update(self, player: Player) -> None:
        weapon = player.active_weapon
        detail: dict[str, object] = {}
        if weapon is not None:
            detail = {"weapon": weapon.name, "ammo_count": weapon.ammo_count}
        self.actions.append(HostAction("weapon_update", player.id, detail))

    def run_client_command(self, player: Player, command: str) -> None:
        self.actions.append(HostAction("client_command", player.id, {"command": command}))

    def send_message(self, player: Player, text: str) -> None:
        self.actions.append(HostAction("message", player.id, {"text": text}))

    def run_server_command(self, command: str) -> None:
        self.actions.append(HostAction("server_command", None, {"command": command}))

    def equip_gear_set(self, player: Player, gear_set_name: str, clear_inventory: bool) -> bool:
        self.actions.append(
            HostAction(
                "equip_gear_set",
                player.id,
                {"gear_set": gear_set_name, "clear_inventory": clear_inventory},
            )
        )
        return True

    def drain(self) -> list[HostAction]:
        """Return and forget the recorded actions."""

        actions, self.actions = self.actions, []
        return actions


class TeamRegistry:
    """In-memory team rosters used for teammate lookups."""

    def __init__(self) -> None:
        self._teams: dict[int, frozenset[PlayerID]] = {}

    def set_team(self, team_id: int, members: list[PlayerID]) -> frozenset[PlayerID]:
        roster = frozenset(members)
        self._teams[team_id] = roster
        return roster

    def remove_team(self, team_id: int) -> bool:
        return self._teams.pop(team_id, None) is not None

    def are_teammates(self, first_id: PlayerID, second_id: PlayerID) -> bool:
        return any(
            first_id in roster and second_id in roster for roster in self._teams.values()
        )


class ApiState:
    """Aggregated services shared by the FastAPI layer."""

    def __init__(self, *, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.journal = ActionJournal()
        self.teams = TeamRegistry()
        self.config_repository = create_config_repository(self.settings)
        self.awards = create_award_service(
            self.settings,
            host=self.journal,
            console=self.journal,
            team_lookup=self.teams,
            gear_provider=self.journal if self.settings.gear_provider_enabled else None,
        )
        # Death events are handled one at a time so counter updates never interleave.
        self._event_lock = asyncio.Lock()

    async def handle_death(
        self, victim: Victim, killer: Player | None
    ) -> tuple[DeathOutcome, list[HostAction]]:
        """Run a death through the award service and collect the host actions."""

        async with self._event_lock:
            self.journal.drain()
            outcome = self.awards.on_entity_death(victim, killer)
            return outcome, self.journal.drain()

    async def new_save(self) -> None:
        async with self._event_lock:
            self.awards.on_new_save()

    async def reload_configuration(self) -> Configuration:
        """Re-read the configuration document and make it current."""

        async with self._event_lock:
            config = load_configuration(self.config_repository, self.settings.plugin_version)
            self.awards.reconfigure(config)
            logger.info("Configuration reloaded from %s", self.config_repository.path)
            return config

    async def shutdown(self) -> None:
        async with self._event_lock:
            pending = self.journal.drain()
        if pending:
            logger.warning("Dropping %d undelivered host actions on shutdown", len(pending))


def build_state() -> ApiState:
    """Factory used by the API to initialize state."""

    return ApiState()
