"""Output schemas for API commands.

Importing this package registers every schema with the schema registry.
"""

from .config import ConfigInitOutput, ConfigShowOutput
from .strip import StripFileOutput

__all__ = ["ConfigInitOutput", "ConfigShowOutput", "StripFileOutput"]
