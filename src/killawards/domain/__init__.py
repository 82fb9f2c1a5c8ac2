"""Rules layer for kill-streak rewards.

This package holds everything that can run purely in memory:

* Dataclasses for the entities a death event mentions (see :mod:`models`).
* The configuration schema, its defaults (see :mod:`rules_config`) and
  forward migration (see :mod:`migration`).
* Pure rule functions for eligibility, counter transitions, command
  templating and ammo top-ups.

Persistence and host side effects live in the repository and service
layers.
"""

from . import (
    eligibility,
    enums,
    localization,
    migration,
    milestones,
    models,
    players,
    rules_config,
    stored_data,
    templating,
)

__all__ = [
    "eligibility",
    "enums",
    "localization",
    "migration",
    "milestones",
    "models",
    "players",
    "rules_config",
    "stored_data",
    "templating",
]
