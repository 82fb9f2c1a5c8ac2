"""Host Environment Protocol Interfaces.

This module defines the protocols the reward engine uses to reach into the
game server.  The engine never owns live game objects; it asks the host to
apply health, push weapon state, run commands and look up teams.
"""

from typing import Protocol

from killawards.domain.models import Player, PlayerID


class IPlayerHost(Protocol):
    """Protocol for side effects applied to a single player."""

    def heal(self, player: Player, amount: float) -> None:
        """Restore ``amount`` health points to the player."""
        ...

    def send_weapon_update(self, player: Player) -> None:
        """Push the player's active weapon state (ammo count) to clients."""
        ...

    def run_client_command(self, player: Player, command: str) -> None:
        """Run a console command as if the player had typed it."""
        ...

    def send_message(self, player: Player, text: str) -> None:
        """Show a chat notification to the player."""
        ...


class IServerConsole(Protocol):
    """Protocol for the server console sink."""

    def run_server_command(self, command: str) -> None:
        """Run a command on the server console."""
        ...


class ITeamLookup(Protocol):
    """Protocol for the relationship manager."""

    def are_teammates(self, first_id: PlayerID, second_id: PlayerID) -> bool:
        """Return whether both players belong to the same team."""
        ...


class IGearProvider(Protocol):
    """Protocol for the optional gear-set provisioning plugin."""

    def equip_gear_set(self, player: Player, gear_set_name: str, clear_inventory: bool) -> bool:
        """Equip a named gear set.

        Returns:
            ``True`` when the gear set was handed out
        """
        ...
