"""Detect the deployment environment name."""

import os
from collections.abc import Mapping

from ..preset.PresetRegistry import DEFAULT_ENVIRONMENT

ENVIRONMENT_VARS = ("PERSISTCONF_ENV", "APP_ENV")


def detect_environment(environ: Mapping[str, str] | None = None) -> str:
    """Get the environment name from PERSISTCONF_ENV or APP_ENV, defaulting to development."""
    source = os.environ if environ is None else environ
    for var in ENVIRONMENT_VARS:
        value = source.get(var)
        if value:
            return value
    return DEFAULT_ENVIRONMENT
