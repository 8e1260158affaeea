"""Show scenario preset command."""

import os
from collections.abc import Iterator

from ..config.ConfigError import ConfigError
from ..resolve.ConfigResolver import ConfigResolver
from ..resolve.Overrides import Overrides
from ..StageResult import StageResult
from .build_default_registry import build_default_registry


def cmd_scenario(name: str, apply_overrides: bool = False) -> StageResult:
    """Show a scenario preset, optionally with environment overrides applied.

    Args:
        name: Scenario name (e.g. 'personal', 'enterprise').
        apply_overrides: Layer STORAGE_TYPE, MONGODB_URI, ... from the process environment.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Building preset registry...")
        resolver = ConfigResolver(build_default_registry(os.environ))
        yield (0.6, "Looking up scenario...")
        try:
            overrides = Overrides.from_env() if apply_overrides else None
            config = resolver.resolve_scenario(name, overrides)
        except ConfigError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Scenario '{name}' not found"
            result_obj.output = {"errors": [str(e)], "warnings": [], "scenario": name, "content": {}}
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved scenario '{name}'"
        result_obj.output = {"errors": [], "warnings": [], "scenario": name, "content": config.to_dict()}
        result_obj.success = True

    return StageResult(announce=f"Showing scenario '{name}'...", progress_callback=do_work)
