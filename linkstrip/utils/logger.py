import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(home: Path | None = None, level: str = "WARNING") -> None:
    """Configure the linkstrip log file.

    Args:
        home: linkstrip home directory. If None, derived from environment.
        level: Level name for the ``linkstrip`` logger
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    if home is None:
        env_home = os.environ.get("LINKSTRIP_HOME")
        home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".linkstrip"

    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "linkstrip.log"

    root_logger = logging.getLogger("linkstrip")
    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the ``linkstrip`` namespace.

    Configuration is left to the entry point (see configure_logging).
    """
    return logging.getLogger(f"linkstrip.{name}")
