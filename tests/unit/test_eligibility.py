"""Unit tests for kill eligibility rules."""

from __future__ import annotations

import pytest

from killawards.domain import models as dm
from killawards.domain.eligibility import evaluate_kill
from killawards.domain.enums import CreatureKind, Eligibility
from killawards.domain.rules_config import Configuration


@pytest.fixture
def config() -> Configuration:
    return Configuration(
        include_non_actor_kills=False,
        include_wildlife_kills=False,
        ignore_teammate_kills=True,
    )


def test_player_kill_qualifies(killer, victim, config):
    assert evaluate_kill(victim, killer, config) is Eligibility.QUALIFIES


def test_missing_killer(victim, config):
    assert evaluate_kill(victim, None, config) is Eligibility.REJECTED_NO_KILLER


def test_self_kill(killer, config):
    assert evaluate_kill(killer, killer, config) is Eligibility.REJECTED_SELF_KILL


def test_untrackable_killer(player_factory, victim, config):
    bot = player_factory(1234, "Scientist", is_npc=True)

    assert evaluate_kill(victim, bot, config) is Eligibility.REJECTED_NO_KILLER


def test_steam_id_boundary():
    assert not dm.is_steam_id(dm.STEAM_ID_BASE)
    assert dm.is_steam_id(dm.STEAM_ID_BASE + 1)


def test_teammate_kill_respects_flag(killer, victim, config):
    assert (
        evaluate_kill(victim, killer, config, are_teammates=True) is Eligibility.REJECTED_TEAMMATE
    )

    lenient = config.model_copy(update={"ignore_teammate_kills": False})
    assert evaluate_kill(victim, killer, lenient, are_teammates=True) is Eligibility.QUALIFIES


def test_npc_victim_respects_flag(player_factory, killer, config):
    npc = player_factory(42, "Scientist", is_npc=True)

    assert evaluate_kill(npc, killer, config) is Eligibility.REJECTED_NPC_EXCLUDED

    inclusive = config.model_copy(update={"include_non_actor_kills": True})
    assert evaluate_kill(npc, killer, inclusive) is Eligibility.QUALIFIES


def test_teammate_check_runs_before_npc_check(player_factory, killer, config):
    npc = player_factory(42, "Scientist", is_npc=True)

    outcome = evaluate_kill(npc, killer, config, are_teammates=True)

    assert outcome is Eligibility.REJECTED_TEAMMATE


def test_animal_victim_respects_flag(killer, config):
    bear = dm.Creature(id=9, short_name="bear", kind=CreatureKind.ANIMAL)

    assert evaluate_kill(bear, killer, config) is Eligibility.REJECTED_WILDLIFE_EXCLUDED

    inclusive = config.model_copy(update={"include_wildlife_kills": True})
    assert evaluate_kill(bear, killer, inclusive) is Eligibility.QUALIFIES


def test_other_victims_never_qualify(killer, config):
    barrel = dm.Creature(id=11, short_name="loot-barrel")
    permissive = config.model_copy(
        update={"include_wildlife_kills": True, "include_non_actor_kills": True}
    )

    assert evaluate_kill(barrel, killer, permissive) is Eligibility.REJECTED_UNKNOWN_VICTIM_KIND
