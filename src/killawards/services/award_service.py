"""Award Service for Kill Awards.

This module ties the rules layer to persistence and the host environment.
One :class:`KillAwardService` is built at startup and receives every death
and world-reset notification; it holds the running configuration and the
in-memory counters and saves them after each mutation.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from killawards.domain.eligibility import evaluate_kill
from killawards.domain.enums import Eligibility
from killawards.domain.milestones import KillOutcome, record_kill, reset_on_death
from killawards.domain.models import Player, PlayerID, Victim
from killawards.domain.rules_config import Configuration
from killawards.domain.stored_data import StoredData
from killawards.interfaces import ITeamLookup
from killawards.repository import JsonStoredDataRepository
from killawards.services.reward_service import RewardDispatcher

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class DeathOutcome:
    """What handling a single death changed."""

    eligibility: Eligibility
    victim_reset: bool = False
    kill: KillOutcome | None = None


class KillAwardService:
    """Track kill streaks and hand out milestone rewards."""

    def __init__(
        self,
        config: Configuration,
        repository: JsonStoredDataRepository,
        dispatcher: RewardDispatcher,
        team_lookup: ITeamLookup,
        *,
        stored: StoredData | None = None,
    ) -> None:
        self._config = config
        self._repository = repository
        self._dispatcher = dispatcher
        self._team_lookup = team_lookup
        self._stored = stored if stored is not None else repository.load_or_create()

    @property
    def config(self) -> Configuration:
        return self._config

    @property
    def stored(self) -> StoredData:
        return self._stored

    def reconfigure(self, config: Configuration) -> None:
        """Swap in a new configuration; existing counters are kept as they are."""

        self._config = config

    def kill_count(self, player_id: PlayerID) -> int | None:
        """Return a player's current counter, ``None`` if they have no record."""

        record = self._stored.get(player_id)
        return record.kill_count if record is not None else None

    def on_entity_death(self, victim: Victim, killer: Player | None) -> DeathOutcome:
        """Handle a death reported by the host.

        The victim's own counter is reset before the killer is considered, so
        the reset happens whether or not the kill is counted.
        """

        outcome = DeathOutcome(eligibility=Eligibility.REJECTED_NO_KILLER)
        if isinstance(victim, Player):
            outcome.victim_reset = self.on_qualifying_death(victim)

        are_teammates = (
            killer is not None
            and isinstance(victim, Player)
            and self._team_lookup.are_teammates(killer.id, victim.id)
        )
        outcome.eligibility = evaluate_kill(
            victim, killer, self._config, are_teammates=are_teammates
        )
        if outcome.eligibility is Eligibility.QUALIFIES and killer is not None:
            outcome.kill = self.on_qualifying_kill(killer)
        return outcome

    def on_qualifying_death(self, victim: Player) -> bool:
        """Reset the victim's streak when configured to; returns whether it was reset."""

        if not reset_on_death(self._stored, victim.id, self._config):
            return False
        self._repository.save(self._stored)
        return True

    def on_qualifying_kill(self, killer: Player) -> KillOutcome:
        """Advance the killer's counter, persist it and dispatch any reward."""

        outcome = record_kill(self._stored, killer.id, self._config)
        self._repository.save(self._stored)
        if outcome.reward is not None:
            logger.info(
                "Player %s (%s) reached kill milestone %s",
                killer.display_name,
                killer.id,
                outcome.kill_count,
            )
            self._dispatcher.dispatch(killer, outcome.reward)
        return outcome

    def on_new_save(self) -> None:
        """Forget every counter, on disk and in memory."""

        self._repository.delete()
        self._stored = StoredData()
        logger.info("World reset, kill counters wiped")
