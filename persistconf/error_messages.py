"""Helpful error messages for common configuration failure modes."""

import logging
import sys
from typing import NoReturn

from .api.config.ConfigError import InvalidConfigurationError
from .api.resolve.Overrides import OVERRIDE_ENV_VARS

logger = logging.getLogger(__name__)


def _emit_error(*lines: str) -> None:
    """Write error message lines to STDERR."""
    for line in lines:
        sys.stderr.write(line + "\n")


def invalid_configuration_error(error: InvalidConfigurationError, environment: str) -> NoReturn:
    """Log and display a helpful message for a rejected configuration and exit.

    Args:
        error: The bootstrap error carrying the validation result
        environment: Environment name the configuration was resolved for
    """
    logger.error(f"Invalid persistence configuration for {environment!r}: {error}")
    _emit_error(
        "",
        "=" * 70,
        "INVALID PERSISTENCE CONFIGURATION",
        "=" * 70,
        f"\nEnvironment: {environment}",
        "\nProblems:",
        *[f"  - {line}" for line in error.validation.errors],
        "\nPossible solutions:",
        "  1. Set the missing values through environment variables:",
        *[f"     - {var}" for var in OVERRIDE_ENV_VARS.values()],
        "\n  2. Pick another environment with PERSISTCONF_ENV",
        "     (development, test, production, cloud)",
        "\n  3. Inspect the resolved values:",
        "     persistconf config show",
        "=" * 70,
        "",
    )
    sys.exit(1)
