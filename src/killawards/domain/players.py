"""Player-side reward primitives."""

from __future__ import annotations

from .models import Player


def top_up_ammo(player: Player) -> bool:
    """Fill the active weapon's magazine to capacity.

    Returns ``False`` when the player holds no projectile weapon.
    """

    weapon = player.active_weapon
    if weapon is None or weapon.magazine_capacity <= 0:
        return False
    weapon.ammo_count = weapon.magazine_capacity
    return True
