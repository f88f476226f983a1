"""Run command once and display result using 4-stage pattern."""

import sys
from collections.abc import Callable
from datetime import datetime
from typing import Any

from hyperdiff.api.StageResult import StageResult


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Any,
    display_format: str,
) -> None:
    """Run command once, display each stage, and exit with its status.

    Commands handle their own errors and report them through ``output``.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        timestamp = datetime.now().strftime("%H:%M:%S")
        display.info(f"[dim]{timestamp}[/dim] Progress: {message} ({progress_percent:.1%})")

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    else:
        display.error(result.result)

    # Stage 4: Output
    display.json_output(result.output, format=display_format)

    sys.exit(0 if result.success else 1)
