"""Declarative reward configuration and its compiled-in defaults.

The configuration document is human-edited, so every field is exposed
under a stable camelCase key (``schemaVersion``, ``includeNonActorKills``,
``milestones`` ...).  Python code addresses the same fields in snake_case.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .enums import CommandType

_SCHEMA_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CommandConfig(BaseModel):
    """A templated command and the sink it is routed to."""

    model_config = _SCHEMA_CONFIG

    kind: CommandType = Field(..., description="Execution sink for the command")
    template: str = Field(..., description="Command text with {Placeholder} tokens")


class RewardConfig(BaseModel):
    """Bundle of actions fired when a milestone is reached."""

    model_config = _SCHEMA_CONFIG

    health_restored: float = Field(
        default=0.0, ge=0.0, description="Health points restored, 0 disables healing"
    )
    refill_ammo: bool = Field(default=False, description="Top up the active weapon magazine")
    gear_set_name: str | None = Field(
        default="", description="Gear set to equip, empty disables the grant"
    )
    commands: list[CommandConfig] = Field(
        default_factory=list, description="Commands run in list order"
    )


class Configuration(BaseModel):
    """Top-level configuration document."""

    model_config = _SCHEMA_CONFIG

    schema_version: str | None = Field(
        default=None, description="Version the document was written by"
    )
    include_non_actor_kills: bool = Field(default=False, description="Count NPC player kills")
    include_wildlife_kills: bool = Field(default=False, description="Count animal kills")
    ignore_teammate_kills: bool = Field(default=True, description="Skip kills of teammates")
    reset_counter_on_death: bool = Field(
        default=True, description="Reset a player's streak when they die"
    )
    milestones: dict[int, RewardConfig] = Field(
        default_factory=dict, description="Kill count to reward mapping"
    )

    @field_validator("milestones")
    @classmethod
    def _positive_keys(cls, value: dict[int, RewardConfig]) -> dict[int, RewardConfig]:
        for key in value:
            if key <= 0:
                raise ValueError(f"milestone keys must be positive, got {key}")
        return value

    @property
    def max_milestone(self) -> int | None:
        """Highest configured milestone, ``None`` when there are none."""

        return max(self.milestones) if self.milestones else None


def default_configuration(version: str) -> Configuration:
    """Return the compiled-in configuration stamped with ``version``."""

    return Configuration(
        schema_version=version,
        include_non_actor_kills=False,
        include_wildlife_kills=False,
        ignore_teammate_kills=True,
        reset_counter_on_death=True,
        milestones={
            1: RewardConfig(health_restored=10.0),
            2: RewardConfig(health_restored=15.0, refill_ammo=True),
            3: RewardConfig(
                health_restored=20.0,
                refill_ammo=True,
                commands=[
                    CommandConfig(
                        kind=CommandType.SERVER_CONSOLE,
                        template="inventory.giveto {PlayerId} scrap 50",
                    )
                ],
            ),
        },
    )
