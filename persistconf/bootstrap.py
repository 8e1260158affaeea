"""Application bootstrap: resolve the persistence configuration or exit with help."""

import os
from collections.abc import Mapping

from .api.config.ConfigError import InvalidConfigurationError
from .api.config.PersistenceConfig import PersistenceConfig
from .api.resolve.detect_environment import detect_environment
from .api.resolve.load_config import load_config
from .error_messages import invalid_configuration_error
from .logging_config import level_from_config, setup_logging


def bootstrap(
    environment: str | None = None,
    environ: Mapping[str, str] | None = None,
    strict: bool = False,
    configure_logging: bool = True,
) -> PersistenceConfig:
    """Load the configuration for this process, exiting with status 1 if it is rejected.

    When ``configure_logging`` is set, the root logger level follows the
    resolved ``logging.level``.
    """
    source = os.environ if environ is None else environ
    name = environment or detect_environment(source)
    try:
        config = load_config(name, source, strict=strict)
    except InvalidConfigurationError as e:
        invalid_configuration_error(e, name)

    if configure_logging:
        setup_logging(level=level_from_config(config.logging))
    return config
