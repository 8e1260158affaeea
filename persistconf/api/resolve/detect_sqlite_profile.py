"""Detect which SQLite tuning profile fits the running process."""

import os
from collections.abc import Mapping

from .detect_environment import ENVIRONMENT_VARS

DEFAULT_PROFILE = "basic"
PERFORMANCE_PROFILE = "performance"

# Environment names that select the profile of the same name
PROFILE_ENVIRONMENTS = ("production", "development")


def detect_sqlite_profile(environ: Mapping[str, str] | None = None) -> str:
    """Pick a SQLite profile name.

    An explicit ``production`` or ``development`` environment (PERSISTCONF_ENV,
    then APP_ENV) selects that profile; otherwise ``PERFORMANCE_MODE=true``
    selects ``performance``; otherwise ``basic``.
    """
    source = os.environ if environ is None else environ
    environment = next((source[var] for var in ENVIRONMENT_VARS if source.get(var)), "")
    if environment in PROFILE_ENVIRONMENTS:
        return environment
    if source.get("PERFORMANCE_MODE") == "true":
        return PERFORMANCE_PROFILE
    return DEFAULT_PROFILE
