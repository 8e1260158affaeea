"""Construct the built-in preset registry."""

from collections.abc import Mapping

from ._environment_presets import environment_presets
from ._scenario_presets import scenario_presets
from ._sqlite_profiles import sqlite_profiles
from .PresetRegistry import PresetRegistry


def build_default_registry(environ: Mapping[str, str] | None = None) -> PresetRegistry:
    """Build the registry of built-in presets.

    Args:
        environ: Source of deployment values baked into presets (encryption key,
            Atlas URI, backup bucket/region). Defaults to an empty mapping so the
            registry does not depend on the process environment unless asked to.
    """
    values = environ if environ is not None else {}
    return PresetRegistry(
        environment_presets=environment_presets(values),
        scenario_presets=scenario_presets(values),
        sqlite_profiles=sqlite_profiles(values),
    )
