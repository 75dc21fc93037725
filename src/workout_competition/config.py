"""Runtime configuration read from the environment."""

import logging
import os
from pathlib import Path

# Default data directory (project root / data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent.parent / "data"

DATA_DIR_ENV = "WORKOUT_COMPETITION_DATA_DIR"
LOG_LEVEL_ENV = "WORKOUT_COMPETITION_LOG_LEVEL"
SESSION_COOKIE_ENV = "WORKOUT_COMPETITION_SESSION_COOKIE"

LOG_FORMAT = "%(levelname)s %(name)s %(message)s"


def get_data_dir() -> Path:
    """Get the data directory, honouring the environment override."""
    env_dir = os.getenv(DATA_DIR_ENV)
    if env_dir:
        return Path(env_dir).expanduser()
    return DEFAULT_DATA_DIR


def get_log_level() -> int:
    """Get the configured logging level (INFO when unset or unknown)."""
    name = os.getenv(LOG_LEVEL_ENV, "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def get_session_cookie_name() -> str:
    return os.getenv(SESSION_COOKIE_ENV, "session")


def configure_logging() -> None:
    """Configure root logging once for the CLI and the web app."""
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
