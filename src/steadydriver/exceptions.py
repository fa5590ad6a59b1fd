"""
Failure kinds raised by Driver Facade adapters and the synchronization layer.

Driver adapters translate their backend's exceptions into the DriverError
subclasses below, so waits and retry loops can decide what is transient
without knowing which browser library sits underneath.
"""

from typing import Optional


class SteadyDriverError(Exception):
    """Base exception for all steadydriver failures."""

    pass


class DriverError(SteadyDriverError):
    """A driver-level failure reported by the browser session."""

    pass


class NoSuchElementError(DriverError):
    """No element (or frame, or window) matched the lookup."""

    pass


class StaleElementError(DriverError):
    """The element handle no longer refers to a node in the current document."""

    pass


class ElementNotInteractableError(DriverError):
    """The element exists but cannot receive the interaction (hidden, disabled, ...)."""

    pass


class ClickInterceptedError(DriverError):
    """Another element would receive the click."""

    pass


class NoAlertPresentError(DriverError):
    """No alert/dialog is currently open."""

    pass


class InvalidLocatorError(DriverError):
    """The selector could not be parsed by the browser."""

    pass


class DriverCommunicationError(DriverError):
    """Any other failure talking to the browser session."""

    pass


class WaitTimeoutError(SteadyDriverError):
    """A polling wait reached its deadline without the condition becoming true."""

    def __init__(self, message: str = "", last_error: Optional[BaseException] = None):
        super().__init__(message)
        self.last_error = last_error
