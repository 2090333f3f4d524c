"""Run a command once and show it in four stages."""

import sys
from collections.abc import Callable

from linkstrip.api.StageResult import StageResult
from linkstrip.api.validate_output import validate_output

from .display.Display import Display


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: Display,
    display_format: str,
) -> None:
    """Run func, display every stage, then exit 0 on success and 1 otherwise.

    Commands report their own failures through the output schema; a command
    that leaves result or output empty is a programming error.
    """
    stage = func(*args, **kwargs)
    display.announce(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        display.progress(fraction, message)

    if not stage.result:
        raise ValueError(f"{func.__name__} finished without a result message")
    if not stage.output:
        raise ValueError(f"{func.__name__} finished without output")

    stage.output = validate_output(func, stage.output)

    if stage.success:
        display.success(stage.result)
    else:
        display.error(stage.result)
    for warning in stage.output.get("warnings", []):
        display.warning(warning)

    display.output(stage.output, display_format)
    sys.exit(0 if stage.success else 1)
