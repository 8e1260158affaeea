"""Preset and override resolution."""

from .accept_config import NON_CRITICAL_CODES, accept_config
from .ConfigResolver import ConfigResolver
from .detect_environment import detect_environment
from .detect_sqlite_profile import detect_sqlite_profile
from .load_config import load_config
from .load_sqlite_profile import load_sqlite_profile
from .Overrides import OVERRIDE_ENV_VARS, Overrides

__all__ = [
    "NON_CRITICAL_CODES",
    "OVERRIDE_ENV_VARS",
    "ConfigResolver",
    "Overrides",
    "accept_config",
    "detect_environment",
    "detect_sqlite_profile",
    "load_config",
    "load_sqlite_profile",
]
