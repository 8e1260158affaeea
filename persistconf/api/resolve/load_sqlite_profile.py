"""Load a SQLite tuning profile for a SQLite-only deployment."""

import os
from collections.abc import Mapping

from ..config.PersistenceConfig import PersistenceConfig
from ..preset.build_default_registry import build_default_registry
from ..preset.PresetRegistry import PresetRegistry
from .accept_config import accept_config
from .ConfigResolver import ConfigResolver
from .detect_sqlite_profile import detect_sqlite_profile
from .Overrides import Overrides


def load_sqlite_profile(
    profile: str | None = None,
    environ: Mapping[str, str] | None = None,
    registry: PresetRegistry | None = None,
    strict: bool = False,
) -> PersistenceConfig:
    """Resolve a SQLite profile with overrides, under the same policy as `load_config`.

    Args:
        profile: Profile name; detected from ``environ`` when omitted.
        environ: Environment variables (default: the process environment).
        registry: Preset registry; built from ``environ`` when omitted.
        strict: Treat every violation as fatal.

    Raises:
        UnknownProfileError: If the profile is not registered.
        InvalidConfigurationError: If validation reports a violation the policy does not tolerate.
    """
    source = os.environ if environ is None else environ
    name = profile or detect_sqlite_profile(source)
    resolver = ConfigResolver(registry or build_default_registry(source))
    config = resolver.resolve_profile(name, Overrides.from_env(source))
    return accept_config(config, f"SQLite profile {name!r}", strict=strict)
