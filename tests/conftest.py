"""Pytest configuration and shared fakes.

This adds the `src/` directory to `sys.path` so tests can import the
`killawards` package without requiring an editable install in CI, and
provides protocol-based fakes for the host collaborators.
"""

import sys
from pathlib import Path

import pytest

SRC_PATH = Path(__file__).resolve().parents[1] / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from killawards.domain import models as dm  # noqa: E402

KILLER_ID = dm.PlayerID(76561198000000001)
VICTIM_ID = dm.PlayerID(76561198000000002)


class FakeHost:
    """Records every host call in order; implements all host protocols."""

    def __init__(self, *, teams: list[set[int]] | None = None, gear_result: bool = True) -> None:
        self.calls: list[tuple] = []
        self.teams = teams or []
        self.gear_result = gear_result

    def heal(self, player, amount):
        self.calls.append(("heal", player.id, amount))

    def send_weapon_update(self, player):
        self.calls.append(("weapon_update", player.id, player.active_weapon.ammo_count))

    def run_client_command(self, player, command):
        self.calls.append(("client_command", player.id, command))

    def send_message(self, player, text):
        self.calls.append(("message", player.id, text))

    def run_server_command(self, command):
        self.calls.append(("server_command", command))

    def equip_gear_set(self, player, gear_set_name, clear_inventory):
        self.calls.append(("equip_gear_set", player.id, gear_set_name, clear_inventory))
        return self.gear_result

    def are_teammates(self, first_id, second_id):
        return any(first_id in team and second_id in team for team in self.teams)

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]

    def messages(self) -> list[str]:
        return [call[2] for call in self.calls if call[0] == "message"]


def make_player(
    player_id: int = KILLER_ID,
    name: str = "Shooter",
    *,
    is_npc: bool = False,
    weapon: dm.HeldWeapon | None = None,
    position: dm.Vector3 = dm.Vector3(),
) -> dm.Player:
    return dm.Player(
        id=dm.PlayerID(player_id),
        display_name=name,
        position=position,
        is_npc=is_npc,
        active_weapon=weapon,
    )


@pytest.fixture
def host() -> FakeHost:
    return FakeHost()


@pytest.fixture
def killer() -> dm.Player:
    return make_player(KILLER_ID, "Shooter", weapon=dm.HeldWeapon("rifle.ak", 30, 4))


@pytest.fixture
def victim() -> dm.Player:
    return make_player(VICTIM_ID, "Target")


@pytest.fixture
def player_factory():
    return make_player
