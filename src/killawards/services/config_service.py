"""Load, migrate and persist the reward configuration."""

from __future__ import annotations

import logging

from killawards.domain.migration import is_stale, migrate_configuration
from killawards.domain.rules_config import Configuration, default_configuration
from killawards.repository import JsonConfigRepository

logger = logging.getLogger(__name__)


def load_configuration(repository: JsonConfigRepository, running_version: str) -> Configuration:
    """Return the configuration the service should run with.

    A missing document falls back to the compiled-in default.  A document
    written by an older version is migrated.  The result is always written
    back so the file on disk reflects the running schema.

    Raises:
        ConfigurationError: if the stored document cannot be decoded
    """

    config = repository.load()
    if config is None:
        logger.info("No configuration at %s, creating default", repository.path)
        config = default_configuration(running_version)
    elif is_stale(config, running_version):
        previous = config.schema_version
        logger.warning("Config changes detected! Updating...")
        config = migrate_configuration(config, running_version)
        logger.warning(
            "Config update complete! Updated from version %s to %s", previous, running_version
        )

    repository.save(config)
    return config
