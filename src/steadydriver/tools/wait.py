"""
Wait Tools

Polling wait primitive plus the waits built on it: alerts, page load state
and pointer hover. All waiting is active polling on the calling thread;
timeouts are checked between polls.
"""

import time
from typing import Any, Callable, Iterable, Optional, TypeVar

from ..browser.facade import Driver
from ..config import get_config, get_logger
from ..exceptions import (
    DriverError,
    NoAlertPresentError,
    NoSuchElementError,
    StaleElementError,
    WaitTimeoutError,
)

logger = get_logger(__name__)

T = TypeVar("T")

# "Not ready yet" failures a predicate may raise while the page settles
DEFAULT_IGNORED_EXCEPTIONS: tuple[type[BaseException], ...] = (
    NoSuchElementError,
    StaleElementError,
    NoAlertPresentError,
)


class Wait:
    """
    Block until a predicate over the driver becomes truthy.

    Usage:
        >>> wait = Wait(driver, timeout=10)
        >>> button = wait.until(lambda d: d.find_element(Locator.css("#save")))
    """

    def __init__(
        self,
        driver: Driver,
        timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
        ignored_exceptions: Optional[Iterable[type[BaseException]]] = None,
    ):
        """
        Initialize the wait.

        Args:
            driver: Driver passed to every predicate evaluation
            timeout: Deadline in seconds (default: SyncConfig.wait_timeout)
            poll_interval: Pause between evaluations in seconds
                (default: SyncConfig.poll_interval)
            ignored_exceptions: Extra exception types treated as "condition
                not met yet", on top of DEFAULT_IGNORED_EXCEPTIONS
        """
        config = get_config()

        self.driver = driver
        self.timeout = config.wait_timeout if timeout is None else timeout
        self.poll_interval = config.poll_interval if poll_interval is None else poll_interval

        ignored = list(DEFAULT_IGNORED_EXCEPTIONS)
        if ignored_exceptions is not None:
            ignored.extend(ignored_exceptions)
        self.ignored_exceptions = tuple(ignored)

    def __repr__(self) -> str:
        return f"<Wait timeout={self.timeout} poll_interval={self.poll_interval}>"

    def until(self, predicate: Callable[[Driver], T], message: str = "") -> T:
        """
        Evaluate predicate until it returns a truthy value.

        The predicate is evaluated at least once, even with a zero timeout.

        Args:
            predicate: Called with the driver; ignored exceptions count as falsy
            message: Text for the timeout error

        Returns:
            The first truthy value returned by predicate

        Raises:
            WaitTimeoutError: The deadline passed without a truthy value
        """
        deadline = time.monotonic() + self.timeout
        last_error: Optional[BaseException] = None

        while True:
            try:
                value = predicate(self.driver)
                if value:
                    return value
            except self.ignored_exceptions as e:
                last_error = e

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            time.sleep(min(self.poll_interval, remaining))

        logger.debug("Wait timed out after %s seconds -> %s", self.timeout, message)
        raise WaitTimeoutError(
            message or f"Condition not met within {self.timeout} seconds",
            last_error=last_error,
        ) from last_error

    def until_not(self, predicate: Callable[[Driver], Any], message: str = "") -> bool:
        """
        Evaluate predicate until it returns a falsy value.

        An ignored exception counts as the condition having gone away.

        Args:
            predicate: Called with the driver
            message: Text for the timeout error

        Returns:
            True once predicate is falsy

        Raises:
            WaitTimeoutError: predicate stayed truthy until the deadline
        """
        deadline = time.monotonic() + self.timeout

        while True:
            try:
                if not predicate(self.driver):
                    return True
            except self.ignored_exceptions:
                return True

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            time.sleep(min(self.poll_interval, remaining))

        raise WaitTimeoutError(message or f"Condition still met after {self.timeout} seconds")


def waiter(driver: Driver, timeout: Optional[float] = None) -> Wait:
    """Shortcut for Wait(driver, timeout)."""
    return Wait(driver, timeout=timeout)


def is_alert_present(driver: Driver) -> bool:
    """
    Check whether an alert is open by trying to switch to it.

    Leaves the driver switched to the alert when one is present.

    Args:
        driver: Driver session

    Returns:
        True if an alert is open
    """
    try:
        driver.switch_to_alert()
    except NoAlertPresentError:
        return False
    return True


def wait_for_alert(driver: Driver, timeout: Optional[float] = None) -> str:
    """
    Wait until an alert is open.

    Args:
        driver: Driver session
        timeout: Seconds to wait (default: SyncConfig.wait_timeout)

    Returns:
        The alert's text
    """
    Wait(driver, timeout=timeout).until(is_alert_present, "No alert appeared")
    return driver.switch_to_alert().text


def wait_for_alert_and_accept(driver: Driver, timeout: Optional[float] = None) -> None:
    """
    Wait until an alert is open, then accept it.

    Args:
        driver: Driver session
        timeout: Seconds to wait (default: SyncConfig.wait_timeout)
    """
    Wait(driver, timeout=timeout).until(is_alert_present, "No alert appeared")
    driver.switch_to_alert().accept()


def wait_for_page_loaded(driver: Driver, timeout: Optional[float] = None) -> None:
    """
    Wait until document.readyState reports "complete".

    Args:
        driver: Driver session
        timeout: Seconds to wait (default: SyncConfig.wait_timeout)
    """
    Wait(driver, timeout=timeout).until(
        lambda d: d.execute_script("return document.readyState") == "complete",
        "Page did not finish loading",
    )


def hover_over_element(driver: Driver, element: Any, timeout: Optional[float] = None) -> None:
    """
    Move the pointer over an element, retrying until a move succeeds.

    Args:
        driver: Driver session
        element: Element to hover
        timeout: Seconds to keep retrying (default: SyncConfig.wait_timeout)
    """

    def moved(d: Driver) -> bool:
        try:
            d.move_to_element(element)
        except DriverError as e:
            logger.debug("Hover attempt failed -> %s", e)
            return False
        return True

    Wait(driver, timeout=timeout).until(moved, "Could not move the pointer to the element")
