"""Output schemas for strip commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class StripFileOutput(BaseOutputSchema):
    """Output schema for strip file command."""

    path: str = Field(..., description="Input file path")
    output_path: str = Field(..., description="File written (or that would be written), empty string if nothing written")
    changed: bool = Field(..., description="Whether any link was removed")
    dry_run: bool = Field(..., description="Whether writing was skipped on purpose")
    passes: list[str] = Field(..., description="Passes applied, in order")
    chars_before: int = Field(..., description="Length of the input text")
    chars_after: int = Field(..., description="Length of the output text")


schema_registry.register_output_schema("strip", "file", StripFileOutput)
