"""Dataclasses describing the entities a death event refers to.

The host environment owns the live game objects.  These lightweight
snapshots carry exactly what the rules engine reads: identity, display
name, world position, whether a player is server-controlled, and the
projectile weapon currently held.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType

from .enums import CreatureKind

# --- Strongly typed identifiers -------------------------------------------------

PlayerID = NewType("PlayerID", int)

# Steam64 identities start above this value; anything at or below it is a
# bot or NPC id allocated by the server.
STEAM_ID_BASE = 76561197960265728


def is_steam_id(user_id: int) -> bool:
    """Return whether ``user_id`` belongs to a real, trackable account."""

    return user_id > STEAM_ID_BASE


# --- Core dataclasses -----------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Vector3:
    """World-space position."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(slots=True)
class HeldWeapon:
    """Projectile weapon in a player's active slot."""

    name: str
    magazine_capacity: int
    ammo_count: int = 0


@dataclass(slots=True)
class Player:
    """Player or player-shaped NPC."""

    id: PlayerID
    display_name: str
    position: Vector3 = Vector3()
    is_npc: bool = False
    active_weapon: HeldWeapon | None = None


@dataclass(frozen=True, slots=True)
class Creature:
    """Any victim that is not a player: animals, vehicles, deployables."""

    id: int
    short_name: str
    kind: CreatureKind = CreatureKind.OTHER


Victim = Player | Creature
