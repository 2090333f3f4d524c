"""Display interface used by the four-stage CLI runner."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where a command's announce, progress, result and output go."""

    @abstractmethod
    def announce(self, message: str) -> None: ...

    @abstractmethod
    def progress(self, fraction: float, message: str) -> None: ...

    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str, details: str = "") -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def output(self, data: dict[str, Any], display_format: str) -> None:
        """Write the command output as YAML or JSON."""
