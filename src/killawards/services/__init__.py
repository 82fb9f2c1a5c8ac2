"""Service layer for Kill Awards.

Services depend on the Protocol interfaces in :mod:`killawards.interfaces`
for everything the host environment provides:

- KillAwardService: death intake, streak counters, persistence, world resets
- RewardDispatcher: heal, ammo, gear and command actions of a reward
- load_configuration: load, migrate and persist the reward configuration

Production Usage:
    from killawards.factory import create_award_service
    service = create_award_service(settings, host=host, console=console, team_lookup=teams)
    service.on_entity_death(victim, killer)

Testing Usage:
    from killawards.services.reward_service import RewardDispatcher

    class FakeHost:
        def heal(self, player, amount):
            self.healed = amount
        ...

    dispatcher = RewardDispatcher(FakeHost(), FakeConsole())
"""

from killawards.services.award_service import DeathOutcome, KillAwardService
from killawards.services.config_service import load_configuration
from killawards.services.reward_service import RewardDispatcher

__all__ = [
    "DeathOutcome",
    "KillAwardService",
    "RewardDispatcher",
    "load_configuration",
]
