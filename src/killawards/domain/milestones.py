"""Kill counter transitions and milestone resolution."""

from __future__ import annotations

from dataclasses import dataclass

from .models import PlayerID
from .rules_config import Configuration, RewardConfig
from .stored_data import StoredData


@dataclass(slots=True)
class KillOutcome:
    """Counter value after a qualifying kill and the reward it resolved to."""

    player_id: PlayerID
    kill_count: int
    reward: RewardConfig | None = None

    @property
    def milestone(self) -> int | None:
        return self.kill_count if self.reward is not None else None


def advance_kill_count(kill_count: int, max_milestone: int | None) -> int:
    """Increment a counter, wrapping to zero once it passes ``max_milestone``.

    A kill past the top milestone lands on 0, not 1; milestone 1 is reached
    again on the following kill.  Without milestones the counter never wraps.
    """

    kill_count += 1
    if max_milestone is not None and kill_count > max_milestone:
        kill_count = 0
    return kill_count


def resolve_reward(config: Configuration, kill_count: int) -> RewardConfig | None:
    """Return the reward configured for ``kill_count``, if any."""

    return config.milestones.get(kill_count)


def record_kill(stored: StoredData, player_id: PlayerID, config: Configuration) -> KillOutcome:
    """Count a qualifying kill for ``player_id`` and resolve its reward."""

    record = stored.get_or_create(player_id)
    record.kill_count = advance_kill_count(record.kill_count, config.max_milestone)
    return KillOutcome(
        player_id=player_id,
        kill_count=record.kill_count,
        reward=resolve_reward(config, record.kill_count),
    )


def reset_on_death(stored: StoredData, player_id: PlayerID, config: Configuration) -> bool:
    """Zero the victim's counter when death resets are enabled.

    Players without a record are left alone; returns whether a record was
    reset.
    """

    if not config.reset_counter_on_death:
        return False
    record = stored.get(player_id)
    if record is None:
        return False
    record.kill_count = 0
    return True
