"""Exception types raised by the Kill Awards package."""

from __future__ import annotations


class KillAwardsError(Exception):
    """Base class for errors raised by this package."""


class ConfigurationError(KillAwardsError):
    """The stored configuration document cannot be decoded."""

    def __init__(self, path: object, detail: str) -> None:
        super().__init__(f"invalid configuration in {path}: {detail}")
        self.path = path
        self.detail = detail
