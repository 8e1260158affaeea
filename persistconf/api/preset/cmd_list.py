"""List preset names command."""

import os
from collections.abc import Iterator

from ..StageResult import StageResult
from .build_default_registry import build_default_registry


def cmd_list() -> StageResult:
    """List environment presets, scenario presets and SQLite profiles."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Building preset registry...")
        registry = build_default_registry(os.environ)
        yield (1.0, "Complete")
        total = len(registry.environment_names) + len(registry.scenario_names) + len(registry.profile_names)
        result_obj.result = f"Found {total} preset(s)"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "environments": registry.environment_names,
            "scenarios": registry.scenario_names,
            "sqlite_profiles": registry.profile_names,
        }
        result_obj.success = True

    return StageResult(announce="Listing presets...", progress_callback=do_work)
