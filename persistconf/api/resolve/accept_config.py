"""Acceptance policy for resolved configurations."""

import logging

from ..config.ConfigError import InvalidConfigurationError
from ..config.PersistenceConfig import PersistenceConfig
from ..validate.validate_config import validate_config

logger = logging.getLogger(__name__)

# Violations a non-strict bootstrap tolerates with a warning
NON_CRITICAL_CODES = frozenset({"MissingEncryptionKey"})


def accept_config(config: PersistenceConfig, label: str, strict: bool = False) -> PersistenceConfig:
    """Validate ``config`` and return it if the policy accepts it.

    Args:
        config: Resolved configuration.
        label: What was resolved (e.g. "environment 'production'"), used in log lines.
        strict: Treat every violation as fatal.

    Raises:
        InvalidConfigurationError: If validation reports a violation the policy does not tolerate.
    """
    validation = validate_config(config)
    if validation.ok:
        logger.info(f"Resolved {config.storage_type!r} persistence configuration for {label}")
        return config

    fatal = [code for code in validation.codes if strict or code not in NON_CRITICAL_CODES]
    if fatal:
        logger.error(f"Configuration for {label} rejected: {list(validation.errors)}")
        raise InvalidConfigurationError(validation)

    for error in validation.errors:
        logger.warning(f"Configuration for {label}: {error}")
    return config
