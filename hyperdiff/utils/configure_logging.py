import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(hyperdiff_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified hyperdiff logging.

    Args:
        hyperdiff_home: Path to hyperdiff home directory. If None, derived from environment.
        level: Level name for the ``hyperdiff`` logger. Applied even when the
            handler is already installed.
    """
    global _CONFIGURED
    if _CONFIGURED:
        logging.getLogger("hyperdiff").setLevel(getattr(logging, level, logging.INFO))
        return

    if hyperdiff_home is None:
        env_home = os.environ.get("HYPERDIFF_HOME")
        hyperdiff_home = Path(env_home).expanduser().resolve() if env_home else Path.home() / ".hyperdiff"

    # Ensure directory exists
    hyperdiff_home.mkdir(parents=True, exist_ok=True)
    log_file = hyperdiff_home / "hyperdiff.log"

    root_logger = logging.getLogger("hyperdiff")
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def is_configured() -> bool:
    """Whether configure_logging has installed its handler."""
    return _CONFIGURED


def reset_logging() -> None:
    """Detach handlers installed by configure_logging so it can run again."""
    global _CONFIGURED
    root_logger = logging.getLogger("hyperdiff")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False
