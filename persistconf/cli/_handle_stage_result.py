"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import typer

from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

F = TypeVar("F", bound=Callable)

DISPLAY_FORMATS = ("json", "yaml")


def _extract_display_format(ctx: typer.Context | None) -> str:
    """Get the display format stored by the main callback, defaulting to yaml."""
    current = ctx
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in DISPLAY_FORMATS:
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: typer.Context | None = None) -> F:
    """Wrap a command function to handle StageResult for CLI display.

    1. Announce (stderr)
    2. Progress (stderr)
    3. Result (stderr)
    4. Output (stdout, JSON or YAML per the ``--display`` stored on ``ctx``)
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
