"""Check a command's output dict against the schema registered for it."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from . import _output_schemas  # noqa: F401  (registers schemas)
from .schema_registry import schema_registry


def _command_key(func: Callable) -> tuple[str, str] | None:
    """Map linkstrip.api.<domain>.cmd_<name> to (domain, name)."""
    parts = func.__module__.split(".")
    if parts[:2] != ["linkstrip", "api"] or len(parts) < 3:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Validate output against the schema for func and fill in defaults.

    Functions outside ``linkstrip.api`` and commands without a registered
    schema are passed through unchanged.

    Raises:
        ValueError: If output does not match the schema
    """
    key = _command_key(func)
    schema_class = schema_registry.get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    try:
        return schema_class(**output).model_dump(mode="python")
    except ValidationError as e:
        domain, command = key
        raise ValueError(f"Output validation failed for {domain}.{command}: {e}") from e
