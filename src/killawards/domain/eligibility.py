"""Decide whether a kill counts towards the killer's streak."""

from __future__ import annotations

from .enums import CreatureKind, Eligibility
from .models import Creature, Player, Victim, is_steam_id
from .rules_config import Configuration


def evaluate_kill(
    victim: Victim,
    killer: Player | None,
    config: Configuration,
    *,
    are_teammates: bool = False,
) -> Eligibility:
    """Classify a kill event.

    ``are_teammates`` is the host's answer to whether killer and victim
    share a team; it is only consulted for player victims.
    """

    if killer is None:
        return Eligibility.REJECTED_NO_KILLER
    if isinstance(victim, Player) and victim.id == killer.id:
        return Eligibility.REJECTED_SELF_KILL
    if not is_steam_id(killer.id):
        return Eligibility.REJECTED_NO_KILLER

    if isinstance(victim, Player):
        if are_teammates and config.ignore_teammate_kills:
            return Eligibility.REJECTED_TEAMMATE
        if victim.is_npc and not config.include_non_actor_kills:
            return Eligibility.REJECTED_NPC_EXCLUDED
        return Eligibility.QUALIFIES

    if isinstance(victim, Creature) and victim.kind is CreatureKind.ANIMAL:
        if not config.include_wildlife_kills:
            return Eligibility.REJECTED_WILDLIFE_EXCLUDED
        return Eligibility.QUALIFIES

    return Eligibility.REJECTED_UNKNOWN_VICTIM_KIND
