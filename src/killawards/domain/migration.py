"""Forward migration of stored configuration documents."""

from __future__ import annotations

import re

from .rules_config import Configuration, default_configuration

# Documents written before this version are replaced wholesale by the default.
BASELINE_VERSION = "1.0.0"

_COMPONENT = re.compile(r"\d+")


def parse_version(text: str | None) -> tuple[int, int, int]:
    """Return ``(major, minor, patch)`` for a version string.

    Missing or unparseable components count as zero, so ``None`` and ``""``
    sort before every released version.  Pre-release suffixes such as
    ``-beta`` are ignored.
    """

    parts = [0, 0, 0]
    if text:
        for index, component in enumerate(text.strip().split(".")[:3]):
            match = _COMPONENT.match(component)
            if match is None:
                break
            parts[index] = int(match.group())
    return parts[0], parts[1], parts[2]


def is_stale(config: Configuration, running_version: str) -> bool:
    """Return whether ``config`` was written by an older schema version."""

    return parse_version(config.schema_version) < parse_version(running_version)


def migrate_configuration(
    config: Configuration,
    running_version: str,
    *,
    baseline: str = BASELINE_VERSION,
) -> Configuration:
    """Bring ``config`` up to ``running_version``.

    Documents older than ``baseline`` are replaced by the default; newer
    stale documents keep every field and only have their version stamped.
    Current or newer documents are returned unchanged.
    """

    if not is_stale(config, running_version):
        return config
    if parse_version(config.schema_version) < parse_version(baseline):
        return default_configuration(running_version)
    return config.model_copy(update={"schema_version": running_version})
