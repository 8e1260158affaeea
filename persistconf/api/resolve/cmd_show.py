"""Show resolved configuration command."""

import os
from collections.abc import Iterator

from ..preset.build_default_registry import build_default_registry
from ..StageResult import StageResult
from .ConfigResolver import ConfigResolver
from .detect_environment import detect_environment
from .Overrides import Overrides


def cmd_show(environment: str = "") -> StageResult:
    """Resolve an environment preset with the process environment overrides.

    Args:
        environment: Environment name. Empty string uses the detected environment.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        name = environment or detect_environment()
        yield (0.3, "Building preset registry...")
        registry = build_default_registry(os.environ)
        yield (0.6, "Applying overrides...")
        overrides = Overrides.from_env()
        config = ConfigResolver(registry).resolve(name, overrides)
        warnings: list[str] = []
        if name not in registry.environment_names:
            warnings.append(f"Unknown environment {name!r}, using 'development' preset")

        yield (1.0, "Complete")
        result_obj.result = f"Resolved configuration for '{name}'"
        result_obj.output = {
            "errors": [],
            "warnings": warnings,
            "environment": name,
            "overrides": sorted(overrides.present()),
            "content": config.to_dict(),
        }
        result_obj.success = True

    announce = f"Resolving configuration for '{environment}'..." if environment else "Resolving configuration..."
    return StageResult(announce=announce, progress_callback=do_work)
