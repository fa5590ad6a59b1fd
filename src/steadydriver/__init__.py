"""
steadydriver

Synchronization and resilient-interaction layer for WebDriver-style browser
sessions: polling waits, recursive frame search, retrying clicks and text
entry, and page components that re-resolve their element on every access.
"""

from .browser import By, Driver, Keys, Locator, PlaywrightDriver, SeleniumDriver
from .config import SyncConfig, configure_logging, get_config, set_config
from .exceptions import (
    ClickInterceptedError,
    DriverCommunicationError,
    DriverError,
    ElementNotInteractableError,
    InvalidLocatorError,
    NoAlertPresentError,
    NoSuchElementError,
    StaleElementError,
    SteadyDriverError,
    WaitTimeoutError,
)
from .pages import PageComponent, WebPage
from .tools import Wait

__version__ = "0.1.0"

__all__ = [
    "By",
    "Driver",
    "Keys",
    "Locator",
    "PlaywrightDriver",
    "SeleniumDriver",
    "SyncConfig",
    "configure_logging",
    "get_config",
    "set_config",
    "ClickInterceptedError",
    "DriverCommunicationError",
    "DriverError",
    "ElementNotInteractableError",
    "InvalidLocatorError",
    "NoAlertPresentError",
    "NoSuchElementError",
    "StaleElementError",
    "SteadyDriverError",
    "WaitTimeoutError",
    "PageComponent",
    "WebPage",
    "Wait",
]
