"""
Browser Session Module

Driver facade, locator value type and the Selenium/Playwright adapters
the synchronization layer runs on.
"""

from .facade import Alert, Driver, Keys
from .locators import By, Locator
from .selenium_driver import SeleniumDriver
from .playwright_driver import PlaywrightDriver
from .controller import BrowserController, BrowserConfig, create_browser

__all__ = [
    "Alert",
    "Driver",
    "Keys",
    "By",
    "Locator",
    "SeleniumDriver",
    "PlaywrightDriver",
    "BrowserController",
    "BrowserConfig",
    "create_browser",
]
