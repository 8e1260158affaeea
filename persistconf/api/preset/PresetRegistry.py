"""Registry of named persistence presets."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from ..config.ConfigError import UnknownProfileError, UnknownScenarioError
from ..config.PersistenceConfig import PersistenceConfig

logger = logging.getLogger(__name__)

DEFAULT_ENVIRONMENT = "development"


def _freeze(table: Mapping[str, PersistenceConfig]) -> Mapping[str, PersistenceConfig]:
    return MappingProxyType(dict(table))


@dataclass(frozen=True)
class PresetRegistry:
    """Immutable tables of named configurations.

    Construct one explicitly (see `build_default_registry`) and pass it to
    whoever needs it; to change presets, build a new registry.

    Lookup policy differs on purpose: an unknown environment falls back to
    ``development``, an unknown scenario or SQLite profile raises.
    """

    environment_presets: Mapping[str, PersistenceConfig]
    scenario_presets: Mapping[str, PersistenceConfig]
    sqlite_profiles: Mapping[str, PersistenceConfig] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if DEFAULT_ENVIRONMENT not in self.environment_presets:
            raise ValueError(f"environment_presets must define {DEFAULT_ENVIRONMENT!r}")
        object.__setattr__(self, "environment_presets", _freeze(self.environment_presets))
        object.__setattr__(self, "scenario_presets", _freeze(self.scenario_presets))
        object.__setattr__(self, "sqlite_profiles", _freeze(self.sqlite_profiles))

    @property
    def environment_names(self) -> list[str]:
        return list(self.environment_presets)

    @property
    def scenario_names(self) -> list[str]:
        return list(self.scenario_presets)

    @property
    def profile_names(self) -> list[str]:
        return list(self.sqlite_profiles)

    def get_environment_config(self, name: str | None) -> PersistenceConfig:
        """Return the preset for an environment, or the development preset for an unknown name."""
        preset = self.environment_presets.get(name or "")
        if preset is None:
            logger.debug(f"Unknown environment {name!r}, using {DEFAULT_ENVIRONMENT!r} preset")
            return self.environment_presets[DEFAULT_ENVIRONMENT]
        return preset

    def get_scenario_config(self, name: str) -> PersistenceConfig:
        """Return the preset for a deployment scenario.

        Raises:
            UnknownScenarioError: If the scenario is not registered.
        """
        try:
            return self.scenario_presets[name]
        except KeyError:
            raise UnknownScenarioError(name, self.scenario_names) from None

    def get_sqlite_profile(self, name: str) -> PersistenceConfig:
        """Return a SQLite tuning profile.

        Raises:
            UnknownProfileError: If the profile is not registered.
        """
        try:
            return self.sqlite_profiles[name]
        except KeyError:
            raise UnknownProfileError(name, self.profile_names) from None
