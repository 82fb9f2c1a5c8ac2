"""Service Factory for Kill Awards.

This module wires repositories, configuration and host collaborators into a
ready :class:`KillAwardService`.  Use it in production code; in tests,
construct the services directly with protocol-based fakes.

Example:
    from killawards.config import get_settings
    from killawards.factory import create_award_service

    service = create_award_service(
        get_settings(), host=host, console=console, team_lookup=teams
    )
"""

from killawards.config import Settings
from killawards.domain.localization import Localizer
from killawards.interfaces import IGearProvider, IPlayerHost, IServerConsole, ITeamLookup
from killawards.repository import JsonConfigRepository, JsonStoredDataRepository
from killawards.services.award_service import KillAwardService
from killawards.services.config_service import load_configuration
from killawards.services.reward_service import RewardDispatcher


def create_config_repository(settings: Settings) -> JsonConfigRepository:
    """Create the repository for the configuration document."""
    return JsonConfigRepository(settings.config_dir, settings.plugin_name)


def create_stored_data_repository(settings: Settings) -> JsonStoredDataRepository:
    """Create the repository for the kill counter document."""
    return JsonStoredDataRepository(settings.data_dir, settings.plugin_name)


def create_reward_dispatcher(
    settings: Settings,
    *,
    host: IPlayerHost,
    console: IServerConsole,
    gear_provider: IGearProvider | None = None,
) -> RewardDispatcher:
    """Create a RewardDispatcher for the configured language and map size."""
    return RewardDispatcher(
        host,
        console,
        gear_provider=gear_provider,
        localizer=Localizer(settings.language),
        world_size=settings.world_size,
    )


def create_award_service(
    settings: Settings,
    *,
    host: IPlayerHost,
    console: IServerConsole,
    team_lookup: ITeamLookup,
    gear_provider: IGearProvider | None = None,
) -> KillAwardService:
    """Create a KillAwardService with all dependencies.

    Loads (and, if stale, migrates) the configuration and the stored
    counters.

    Args:
        settings: Process settings
        host: Player-side host primitives
        console: Server console sink
        team_lookup: Relationship manager
        gear_provider: Gear-set plugin, ``None`` when it is not loaded

    Returns:
        Fully initialized KillAwardService
    """
    config = load_configuration(create_config_repository(settings), settings.plugin_version)
    dispatcher = create_reward_dispatcher(
        settings, host=host, console=console, gear_provider=gear_provider
    )
    return KillAwardService(
        config,
        create_stored_data_repository(settings),
        dispatcher,
        team_lookup,
    )
