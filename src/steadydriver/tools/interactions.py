"""
Interaction Tools

Click and text-entry operations that ride out transient failures of a live
page, such as obstructed clicks or fields that swallow keystrokes.

Obstruction and "not found" are reported through return values
(bool/None, or the tagged ClickOutcome/LookupResult models); every other
failure propagates to the caller.
"""

import time
from typing import Any, Optional

from ..browser.facade import Driver, Keys
from ..browser.locators import Locator
from ..config import get_config, get_logger
from ..exceptions import (
    ClickInterceptedError,
    DriverError,
    ElementNotInteractableError,
    NoSuchElementError,
)
from .models import AttemptLog, ClickOutcome, InteractionStatus, LookupResult
from .timeouts import implicit_wait
from .wait import Wait

logger = get_logger(__name__)


def _elapsed_ms(start_time: float) -> int:
    return int((time.monotonic() - start_time) * 1000)


def click_outcome(driver: Driver, element: Any) -> ClickOutcome:
    """
    Click an element, reporting an obstructed click instead of raising.

    Args:
        driver: Driver session
        element: Element to click

    Returns:
        ClickOutcome with status OK or OBSTRUCTED

    Raises:
        DriverError: Any failure other than interception or non-interactability
    """
    try:
        driver.click(element)
    except (ClickInterceptedError, ElementNotInteractableError) as e:
        return ClickOutcome(status=InteractionStatus.OBSTRUCTED, error=str(e))

    return ClickOutcome(status=InteractionStatus.OK)


def attempt_click(driver: Driver, element: Any) -> bool:
    """
    Try to click an element once.

    Args:
        driver: Driver session
        element: Element to click

    Returns:
        True if clicked, False if the click was intercepted or the element
        was not interactable
    """
    return click_outcome(driver, element).succeeded


def patient_click(
    driver: Driver,
    element: Any,
    max_tries: Optional[int] = None,
    interval_ms: Optional[int] = None,
    attempt_log: Optional[AttemptLog] = None,
) -> bool:
    """
    Click an element, retrying until a click lands or the tries run out.

    Both obstructed clicks and any other driver failure (stale element,
    communication hiccup) are retried after interval_ms.

    Args:
        driver: Driver session
        element: Element to click
        max_tries: Maximum attempts (default: SyncConfig.click_max_tries)
        interval_ms: Pause after each failed attempt in milliseconds
            (default: SyncConfig.click_interval_ms)
        attempt_log: Optional log that receives one record per attempt

    Returns:
        True on the first successful click, False if every attempt failed
    """
    config = get_config()
    if max_tries is None:
        max_tries = config.click_max_tries
    if interval_ms is None:
        interval_ms = config.click_interval_ms

    log = attempt_log if attempt_log is not None else AttemptLog(
        action="patient_click", max_attempts=max_tries
    )

    for attempt in range(1, max_tries + 1):
        start_time = time.monotonic()
        try:
            outcome = click_outcome(driver, element)
        except DriverError as e:
            log.add_attempt(InteractionStatus.FAILED, _elapsed_ms(start_time), str(e))
        else:
            log.add_attempt(outcome.status, _elapsed_ms(start_time), outcome.error)
            if outcome.succeeded:
                return True

        logger.debug("Click attempt %d/%d failed", attempt, max_tries)
        if attempt < max_tries:
            time.sleep(interval_ms / 1000)

    logger.debug("Giving up on click -> %s", log.to_dict())
    return False


def enter_text_try_hard_mode(
    driver: Driver,
    element: Any,
    text: str,
    max_retries: Optional[int] = None,
    attempt_log: Optional[AttemptLog] = None,
) -> bool:
    """
    Repeatedly clear a field and type text until the field holds exactly text.

    There is no pause between attempts.

    Args:
        driver: Driver session
        element: Input element
        text: Text the field must end up holding
        max_retries: Maximum attempts (default: SyncConfig.text_max_retries)
        attempt_log: Optional log that receives one record per attempt

    Returns:
        True once the field's value equals text, False after max_retries misses
    """
    if max_retries is None:
        max_retries = get_config().text_max_retries

    log = attempt_log if attempt_log is not None else AttemptLog(
        action="enter_text", max_attempts=max_retries
    )

    for _ in range(max_retries):
        start_time = time.monotonic()
        driver.clear(element)
        driver.send_keys(element, text)

        if get_value(driver, element) == text:
            log.add_attempt(InteractionStatus.OK, _elapsed_ms(start_time))
            return True

        log.add_attempt(InteractionStatus.OBSTRUCTED, _elapsed_ms(start_time), "value mismatch")

    logger.debug("Field never accepted text -> %s", log.to_dict())
    return False


def clear_with_backspace(driver: Driver, element: Any, timeout: Optional[float] = None) -> None:
    """
    Clear a field by pressing backspace until it is empty.

    An alternative to clear() for fields whose scripts ignore programmatic
    clearing.

    Args:
        driver: Driver session
        element: Input element
        timeout: Seconds to keep pressing (default: SyncConfig.wait_timeout)

    Raises:
        WaitTimeoutError: The field was still not empty at the deadline
    """
    driver.send_keys(element, Keys.END)

    def emptied(d: Driver) -> bool:
        d.send_keys(element, Keys.BACKSPACE)
        return d.get_text(element) == "" and not get_value(d, element)

    Wait(driver, timeout=timeout).until(emptied, "Field could not be cleared")


def set_value(driver: Driver, element: Any, value: Optional[str]) -> None:
    """
    Replace a field's content: clear with backspace, then type value.

    Does nothing when value is None.

    Args:
        driver: Driver session
        element: Input element
        value: New content
    """
    if value is None:
        return

    clear_with_backspace(driver, element)
    driver.send_keys(element, value)


def get_value(driver: Driver, element: Any) -> Optional[str]:
    """Shortcut for the element's value attribute."""
    return driver.get_attribute(element, "value")


def find_elements_by_css(
    driver: Driver,
    selector: str,
    context: Optional[Any] = None,
) -> list[Any]:
    """
    Shortcut for a CSS selector lookup.

    Args:
        driver: Driver session
        selector: CSS selector
        context: Element to search under (default: current document)

    Returns:
        All matching elements
    """
    return driver.find_elements(Locator.css(selector), context)


def lookup(
    driver: Driver,
    selector: str,
    timeout: float,
    context: Optional[Any] = None,
) -> LookupResult:
    """
    Look up the first element matching a CSS selector within a timeout.

    The implicit wait is set to timeout for this lookup only and restored
    afterwards, including when the lookup fails.

    Args:
        driver: Driver session
        selector: CSS selector
        timeout: Seconds the lookup may wait for a match
        context: Element to search under (default: current document)

    Returns:
        LookupResult with status OK, NOT_FOUND, or FAILED
    """
    try:
        with implicit_wait(driver, timeout):
            elements = find_elements_by_css(driver, selector, context)
    except NoSuchElementError:
        return LookupResult(status=InteractionStatus.NOT_FOUND, selector=selector)
    except DriverError as e:
        logger.debug("Lookup of %s failed -> %s", selector, e)
        return LookupResult(status=InteractionStatus.FAILED, selector=selector, error=str(e))

    if not elements:
        return LookupResult(status=InteractionStatus.NOT_FOUND, selector=selector)

    return LookupResult(status=InteractionStatus.OK, selector=selector, element=elements[0])


def find_element(
    driver: Driver,
    selector: str,
    timeout: float,
    context: Optional[Any] = None,
) -> Optional[Any]:
    """
    Find the first element matching a CSS selector, or None.

    Any driver failure during the lookup also yields None; use lookup() to
    tell "not found" apart from other failures.

    Args:
        driver: Driver session
        selector: CSS selector
        timeout: Seconds the lookup may wait for a match
        context: Element to search under (default: current document)

    Returns:
        The first matching element, or None
    """
    return lookup(driver, selector, timeout, context).element
