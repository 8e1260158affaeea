"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from typing import Any, TypeVar

F = TypeVar("F", bound=Callable)


def _run_single_execution(
    func: F,
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Run command once and display result.

    Commands handle their own ConfigErrors and report them in output["errors"].
    """
    # Stage 1: Announce
    result = func(*args, **kwargs)
    display.status(result.announce)

    # Stage 2: Progress - progress_callback yields (progress_percent, message) tuples
    for progress_percent, message in result.progress_callback(result):
        display.info(f"Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    for warning in result.warnings:
        display.warning(warning)
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result, details="; ".join(result.errors))

    # Stage 4: Output - JSON or YAML based on --display flag
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
