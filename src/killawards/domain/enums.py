"""Enumerations shared across the Kill Awards domain."""

from __future__ import annotations

from enum import StrEnum


class CommandType(StrEnum):
    """Execution sink a reward command is routed to."""

    CHAT_MESSAGE = "ChatMessage"
    SERVER_CONSOLE = "ServerConsole"
    CLIENT_CONSOLE = "ClientConsole"


class Eligibility(StrEnum):
    """Outcome of filtering a kill event."""

    QUALIFIES = "qualifies"
    REJECTED_SELF_KILL = "rejected_self_kill"
    REJECTED_NO_KILLER = "rejected_no_killer"
    REJECTED_TEAMMATE = "rejected_teammate"
    REJECTED_NPC_EXCLUDED = "rejected_npc_excluded"
    REJECTED_WILDLIFE_EXCLUDED = "rejected_wildlife_excluded"
    REJECTED_UNKNOWN_VICTIM_KIND = "rejected_unknown_victim_kind"


class CreatureKind(StrEnum):
    """Classification of non-player victims."""

    ANIMAL = "animal"
    OTHER = "other"


class MessageKey(StrEnum):
    """Keys of the localised notifications sent to players."""

    HEALTH_RESTORED = "HealthRestored"
    AMMO_REFILLED = "AmmoRefilled"
    GEAR_SET_GIVEN = "GearSetGiven"
