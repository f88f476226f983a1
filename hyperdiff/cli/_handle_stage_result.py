"""Decorator to handle StageResult for CLI display."""

import functools
from collections.abc import Callable
from typing import TypeVar

import click

from .display.CLIDisplay import CLIDisplay
from ._run_single_execution import _run_single_execution

F = TypeVar("F", bound=Callable)


def _extract_display_format(ctx: click.Context | None = None) -> str:
    """Get the display format from ``ctx`` or the active Click context, defaulting to yaml."""
    current: click.Context | None = ctx if ctx is not None else click.get_current_context(silent=True)
    while current is not None:
        obj = current.obj
        if isinstance(obj, dict) and obj.get("display_format") in ("json", "yaml"):
            return obj["display_format"]
        current = current.parent
    return "yaml"


def _handle_stage_result(func: F, ctx: click.Context | None = None) -> F:
    """Wrap a command function returning StageResult for CLI display.

    The wrapper announces on stderr, reports progress and the result on stderr,
    prints the output to stdout as YAML or JSON, and exits 0 on success, 1 otherwise.
    """

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        _run_single_execution(func, args, kwargs, CLIDisplay(), _extract_display_format(ctx))

    return wrapper  # type: ignore[return-value]
