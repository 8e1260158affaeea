"""Show SQLite tuning profile command."""

import os
from collections.abc import Iterator

from ..config.ConfigError import ConfigError
from ..resolve.ConfigResolver import ConfigResolver
from ..resolve.detect_sqlite_profile import detect_sqlite_profile
from ..resolve.Overrides import Overrides
from ..StageResult import StageResult
from ..validate.validate_config import validate_config
from .build_default_registry import build_default_registry


def cmd_profile(name: str = "", apply_overrides: bool = False) -> StageResult:
    """Show a SQLite tuning profile.

    Args:
        name: Profile name. Empty string detects it from PERSISTCONF_ENV/APP_ENV and PERFORMANCE_MODE.
        apply_overrides: Layer SQLITE_PATH, ENCRYPTION_KEY, ... from the process environment.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        profile = name or detect_sqlite_profile()
        yield (0.3, "Building preset registry...")
        resolver = ConfigResolver(build_default_registry(os.environ))
        yield (0.6, "Looking up profile...")
        try:
            overrides = Overrides.from_env() if apply_overrides else None
            config = resolver.resolve_profile(profile, overrides)
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Profile '{profile}' not found"
            result_obj.output = {
                "errors": [str(e)],
                "warnings": [],
                "profile": profile,
                "detected": not name,
                "content": {},
            }
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved SQLite profile '{profile}'"
        result_obj.output = {
            "errors": [],
            "warnings": list(validate_config(config).errors),
            "profile": profile,
            "detected": not name,
            "content": config.to_dict(),
        }
        result_obj.success = True

    announce = f"Showing SQLite profile '{name}'..." if name else "Detecting SQLite profile..."
    return StageResult(announce=announce, progress_callback=do_work)
