"""Strip domain: run the link removal passes as the configuration dictates."""

from .apply_overrides import apply_overrides
from .strip_text import strip_text
from .StripReport import StripReport

__all__ = ["StripReport", "apply_overrides", "strip_text"]
