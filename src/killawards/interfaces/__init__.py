"""Protocol-based interfaces for the host environment.

These protocols describe the collaborators the reward engine calls but does
not implement, enabling dependency injection and protocol-based fakes in
tests.
"""

from killawards.interfaces.host import IGearProvider, IPlayerHost, IServerConsole, ITeamLookup

__all__ = [
    "IGearProvider",
    "IPlayerHost",
    "IServerConsole",
    "ITeamLookup",
]
