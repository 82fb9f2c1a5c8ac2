"""Unit tests for kill counter transitions."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from killawards.domain import models as dm
from killawards.domain.milestones import (
    advance_kill_count,
    record_kill,
    reset_on_death,
    resolve_reward,
)
from killawards.domain.rules_config import Configuration, RewardConfig, default_configuration
from killawards.domain.stored_data import PlayerRecord, StoredData

PLAYER = dm.PlayerID(76561198000000001)


def _config(*keys: int, reset: bool = True) -> Configuration:
    return Configuration(
        reset_counter_on_death=reset,
        milestones={key: RewardConfig(health_restored=float(key)) for key in keys},
    )


def test_counter_wraps_to_zero_after_top_milestone():
    config = _config(1, 2, 3)
    stored = StoredData()

    counts = [record_kill(stored, PLAYER, config).kill_count for _ in range(5)]

    assert counts == [1, 2, 3, 0, 1]


def test_wrap_kill_resolves_no_reward():
    config = default_configuration("1.0.0")
    stored = StoredData()

    outcomes = [record_kill(stored, PLAYER, config) for _ in range(4)]

    assert [o.milestone for o in outcomes] == [1, 2, 3, None]
    assert outcomes[3].reward is None
    assert stored.get(PLAYER).kill_count == 0


def test_gaps_between_milestones_still_advance_the_counter():
    config = _config(2, 5)
    stored = StoredData()

    outcomes = [record_kill(stored, PLAYER, config) for _ in range(6)]

    assert [o.kill_count for o in outcomes] == [1, 2, 3, 4, 5, 0]
    assert [o.milestone for o in outcomes] == [None, 2, None, None, 5, None]


def test_empty_milestones_count_without_bound():
    config = Configuration()
    stored = StoredData()

    outcomes = [record_kill(stored, PLAYER, config) for _ in range(10)]

    assert outcomes[-1].kill_count == 10
    assert all(o.reward is None for o in outcomes)


def test_record_created_lazily():
    stored = StoredData()
    assert PLAYER not in stored

    record_kill(stored, PLAYER, _config(1))

    assert PLAYER in stored
    assert len(stored) == 1


def test_resolve_reward_returns_configured_entry():
    config = _config(1, 3)

    assert resolve_reward(config, 3) == RewardConfig(health_restored=3.0)
    assert resolve_reward(config, 2) is None
    assert resolve_reward(config, 0) is None


def test_reset_on_death_zeroes_existing_record():
    stored = StoredData({PLAYER: PlayerRecord(kill_count=2)})

    assert reset_on_death(stored, PLAYER, _config(1, 2, 3))
    assert stored.get(PLAYER).kill_count == 0


def test_reset_on_death_disabled_keeps_counter():
    stored = StoredData({PLAYER: PlayerRecord(kill_count=2)})

    assert not reset_on_death(stored, PLAYER, _config(1, 2, 3, reset=False))
    assert stored.get(PLAYER).kill_count == 2


def test_reset_on_death_does_not_create_records():
    stored = StoredData()

    assert not reset_on_death(stored, PLAYER, _config(1))
    assert PLAYER not in stored


@given(
    max_milestone=st.integers(min_value=1, max_value=50),
    kills=st.integers(min_value=0, max_value=200),
)
def test_counter_stays_within_bounds(max_milestone, kills):
    count = 0
    for _ in range(kills):
        count = advance_kill_count(count, max_milestone)
        assert 0 <= count <= max_milestone
    assert count == kills % (max_milestone + 1)
