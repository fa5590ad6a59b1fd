"""
Logging and timing configuration for steadydriver.

steadydriver logs under the "steadydriver" logger tree: lookups, frame
switches, click attempts and wait timeouts at DEBUG. The driver backends
underneath (selenium and its urllib3 transport, playwright) log every wire
command, so configure_logging() holds them at WARNING unless DEBUG is asked
for.

Timing defaults for waits, frame probing and retry loops live in SyncConfig,
read once from STEADY_* environment variables (and a .env file).

Usage:
    from steadydriver.config import configure_logging, get_config, get_logger

    configure_logging()                 # LOG_LEVEL from the environment
    logger = get_logger(__name__)
    timeout = get_config().wait_timeout
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s: %(message)s"

VALID_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Backend loggers held at WARNING above DEBUG
BACKEND_LOGGERS = ("selenium", "urllib3", "playwright")

DEFAULT_WAIT_TIMEOUT = 50.0
DEFAULT_POLL_INTERVAL = 0.5
DEFAULT_FRAME_PROBE_WAIT = 0.01
DEFAULT_CLICK_MAX_TRIES = 5
DEFAULT_CLICK_INTERVAL_MS = 500
DEFAULT_TEXT_MAX_RETRIES = 10


def get_log_level() -> int:
    """
    Read LOG_LEVEL from the environment.

    An unknown level name is reported on stderr (logging is not set up yet
    at this point) and INFO is used instead.

    Returns:
        Logging level constant
    """
    level_name = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    level = VALID_LEVELS.get(level_name)
    if level is None:
        print(
            f"Warning: Invalid LOG_LEVEL '{level_name}'. "
            f"Valid values: {', '.join(VALID_LEVELS)}. Using {DEFAULT_LOG_LEVEL}.",
            file=sys.stderr,
        )
        return VALID_LEVELS[DEFAULT_LOG_LEVEL]

    return level


def configure_logging(
    level: Optional[int] = None,
    verbose: bool = False,
) -> None:
    """
    Set up root logging and the steadydriver logger tree.

    Call once from a script or test session; the library itself never
    configures logging.

    Args:
        level: Level for steadydriver (default: LOG_LEVEL, else INFO)
        verbose: Include timestamps and logger names in each line
    """
    if level is None:
        level = get_log_level()

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT if verbose else LOG_FORMAT_SIMPLE,
        stream=sys.stderr,
        force=True,
    )
    logging.getLogger("steadydriver").setLevel(level)

    if level > logging.DEBUG:
        for name in BACKEND_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Logger for a steadydriver module (pass __name__)."""
    return logging.getLogger(name)


@dataclass
class SyncConfig:
    """
    Timing defaults shared by waits, frame search and retrying interactions.

    All durations are in seconds unless the field name says otherwise.
    """

    # Polling wait deadline
    wait_timeout: float = DEFAULT_WAIT_TIMEOUT

    # Pause between two predicate evaluations
    poll_interval: float = DEFAULT_POLL_INTERVAL

    # Implicit wait used while probing each level of the frame tree
    frame_probe_wait: float = DEFAULT_FRAME_PROBE_WAIT

    # patient_click defaults
    click_max_tries: int = DEFAULT_CLICK_MAX_TRIES
    click_interval_ms: int = DEFAULT_CLICK_INTERVAL_MS

    # enter_text_try_hard_mode default
    text_max_retries: int = DEFAULT_TEXT_MAX_RETRIES

    @classmethod
    def from_env(cls) -> "SyncConfig":
        """
        Create SyncConfig from environment variables.

        Environment variables:
            STEADY_WAIT_TIMEOUT: float seconds (default: 50)
            STEADY_POLL_INTERVAL: float seconds (default: 0.5)
            STEADY_FRAME_PROBE_WAIT: float seconds (default: 0.01)
            STEADY_CLICK_MAX_TRIES: int (default: 5)
            STEADY_CLICK_INTERVAL_MS: int in ms (default: 500)
            STEADY_TEXT_MAX_RETRIES: int (default: 10)
        """
        load_dotenv()

        return cls(
            wait_timeout=float(os.getenv("STEADY_WAIT_TIMEOUT", str(DEFAULT_WAIT_TIMEOUT))),
            poll_interval=float(os.getenv("STEADY_POLL_INTERVAL", str(DEFAULT_POLL_INTERVAL))),
            frame_probe_wait=float(
                os.getenv("STEADY_FRAME_PROBE_WAIT", str(DEFAULT_FRAME_PROBE_WAIT))
            ),
            click_max_tries=int(os.getenv("STEADY_CLICK_MAX_TRIES", str(DEFAULT_CLICK_MAX_TRIES))),
            click_interval_ms=int(
                os.getenv("STEADY_CLICK_INTERVAL_MS", str(DEFAULT_CLICK_INTERVAL_MS))
            ),
            text_max_retries=int(
                os.getenv("STEADY_TEXT_MAX_RETRIES", str(DEFAULT_TEXT_MAX_RETRIES))
            ),
        )


_config: Optional[SyncConfig] = None


def get_config() -> SyncConfig:
    """Get the process-wide configuration, reading the environment on first use."""
    global _config

    if _config is None:
        _config = SyncConfig.from_env()
    return _config


def set_config(config: Optional[SyncConfig]) -> None:
    """
    Replace the process-wide configuration.

    Args:
        config: New configuration, or None to re-read the environment on next use
    """
    global _config
    _config = config
