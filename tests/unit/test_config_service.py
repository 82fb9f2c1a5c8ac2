"""Tests for loading and migrating the stored configuration."""

from __future__ import annotations

import json
import logging

import pytest

from killawards.domain.rules_config import Configuration, RewardConfig, default_configuration
from killawards.errors import ConfigurationError
from killawards.repository import JsonConfigRepository
from killawards.services.config_service import load_configuration


@pytest.fixture
def repository(tmp_path) -> JsonConfigRepository:
    return JsonConfigRepository(tmp_path, "KillAwards")


def test_missing_configuration_writes_default(repository):
    config = load_configuration(repository, "1.0.0")

    assert config == default_configuration("1.0.0")
    assert repository.load() == config


def test_current_configuration_is_kept(repository, caplog):
    custom = Configuration(
        schema_version="1.0.0",
        include_wildlife_kills=True,
        milestones={4: RewardConfig(health_restored=40.0)},
    )
    repository.save(custom)

    with caplog.at_level(logging.WARNING):
        config = load_configuration(repository, "1.0.0")

    assert config == custom
    assert config.schema_version == "1.0.0"
    assert caplog.records == []


def test_legacy_configuration_is_reset(repository, caplog):
    legacy = {
        "Version": "0.9.0",
        "Include NPC Kills": True,
        "Kill Milestones": {"10": {"Amount Of Health Restored": 100}},
    }
    repository.path.write_text(json.dumps(legacy), encoding="utf-8")

    with caplog.at_level(logging.WARNING):
        config = load_configuration(repository, "1.0.0")

    assert config == default_configuration("1.0.0")
    assert "Config changes detected" in caplog.text
    assert "Updated from version None to 1.0.0" in caplog.text
    on_disk = json.loads(repository.path.read_text(encoding="utf-8"))
    assert on_disk["schemaVersion"] == "1.0.0"
    assert "Version" not in on_disk


def test_stale_configuration_is_stamped_and_persisted(repository):
    custom = Configuration(schema_version="1.0.0", milestones={2: RewardConfig()})
    repository.save(custom)

    config = load_configuration(repository, "1.2.0")

    assert config.schema_version == "1.2.0"
    assert config.milestones == custom.milestones
    assert repository.load().schema_version == "1.2.0"


def test_invalid_configuration_is_fatal(repository):
    repository.path.write_text("[]", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(repository, "1.0.0")
