"""Bootstrap: detect, resolve and validate the persistence configuration."""

import os
from collections.abc import Mapping

from ..config.PersistenceConfig import PersistenceConfig
from ..preset.build_default_registry import build_default_registry
from ..preset.PresetRegistry import PresetRegistry
from .accept_config import accept_config
from .ConfigResolver import ConfigResolver
from .detect_environment import detect_environment
from .Overrides import Overrides


def load_config(
    environment: str | None = None,
    environ: Mapping[str, str] | None = None,
    registry: PresetRegistry | None = None,
    strict: bool = False,
) -> PersistenceConfig:
    """Resolve the configuration for this process and reject inconsistent results.

    Args:
        environment: Environment name; detected from ``environ`` when omitted.
        environ: Environment variables (default: the process environment).
        registry: Preset registry; built from ``environ`` when omitted.
        strict: Treat every violation as fatal.

    Raises:
        InvalidConfigurationError: If validation reports a violation the policy does not tolerate.
    """
    source = os.environ if environ is None else environ
    name = environment or detect_environment(source)
    resolver = ConfigResolver(registry or build_default_registry(source))
    config = resolver.resolve(name, Overrides.from_env(source))
    return accept_config(config, f"environment {name!r}", strict=strict)
