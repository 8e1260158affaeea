"""Validate resolved configuration command."""

import os
from collections.abc import Iterator

from ..preset.build_default_registry import build_default_registry
from ..resolve.ConfigResolver import ConfigResolver
from ..resolve.detect_environment import detect_environment
from ..resolve.Overrides import Overrides
from ..StageResult import StageResult
from .validate_config import validate_config


def cmd_validate(environment: str = "") -> StageResult:
    """Resolve an environment with overrides and report every violation.

    Args:
        environment: Environment name. Empty string uses the detected environment.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        name = environment or detect_environment()
        yield (0.3, "Resolving configuration...")
        config = ConfigResolver(build_default_registry(os.environ)).resolve(name, Overrides.from_env())
        yield (0.6, "Validating configuration...")
        validation = validate_config(config)

        yield (1.0, "Complete")
        if validation.ok:
            result_obj.result = f"Configuration for '{name}' is valid"
        else:
            result_obj.result = f"Configuration for '{name}' has {len(validation.errors)} problem(s)"
        result_obj.output = {
            "errors": list(validation.errors),
            "warnings": [],
            "environment": name,
            "storage_type": config.storage_type,
            "valid": validation.ok,
        }
        result_obj.success = validation.ok

    announce = f"Validating configuration for '{environment}'..." if environment else "Validating configuration..."
    return StageResult(announce=announce, progress_callback=do_work)
