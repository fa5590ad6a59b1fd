"""
Scoped implicit-wait override.

The implicit wait is session-wide state: every lookup on the session pays
it. Anything that changes it temporarily goes through implicit_wait(), which
restores the value it found on every exit path.
"""

from contextlib import contextmanager
from typing import Iterator

from ..browser.facade import Driver
from ..config import get_logger

logger = get_logger(__name__)


@contextmanager
def implicit_wait(driver: Driver, seconds: float) -> Iterator[float]:
    """
    Temporarily set the driver's implicit wait.

    Args:
        driver: Driver session
        seconds: Implicit wait to apply inside the block

    Yields:
        The implicit wait that was in effect before the block
    """
    original = driver.get_implicit_wait()
    driver.set_implicit_wait(seconds)
    try:
        yield original
    finally:
        driver.set_implicit_wait(original)


def set_implicit_wait(driver: Driver, seconds: float) -> Driver:
    """
    Set the driver's implicit wait for the rest of the session.

    Args:
        driver: Driver session
        seconds: New implicit wait

    Returns:
        The same driver, for chaining
    """
    logger.debug("Implicit wait for max -> %s seconds...", seconds)
    driver.set_implicit_wait(seconds)
    return driver
