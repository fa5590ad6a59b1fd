"""
Browser Controller

Launches a Playwright browser and hands out PlaywrightDriver sessions.
Used by the integration tests and examples; any other WebDriver-equivalent
session can be wrapped directly in SeleniumDriver or PlaywrightDriver.
"""

import os
from dataclasses import dataclass
from typing import Literal, Optional

from dotenv import load_dotenv
from playwright.sync_api import (
    Browser,
    BrowserContext,
    Page,
    Playwright,
    sync_playwright,
)

from ..config import get_logger
from .playwright_driver import DialogResponse, PlaywrightDriver

# Load environment variables
load_dotenv()

logger = get_logger(__name__)

BrowserType = Literal["chromium", "firefox", "webkit"]


@dataclass
class BrowserConfig:
    """
    Configuration for browser instance.

    Reads from environment variables with sensible defaults.
    """

    # Browser type (chromium is Playwright's Chrome-based browser)
    browser_type: BrowserType = "chromium"

    headless: bool = True

    viewport_width: int = 1280
    viewport_height: int = 720

    # Slow motion delay in ms (useful for debugging)
    slow_mo: int = 0

    # Page load / navigation timeout in ms
    page_load_timeout: int = 30000

    # Initial implicit wait of each driver in seconds
    implicit_wait: float = 0.0

    # Per-action timeout (click, type, hover) in seconds
    action_timeout: float = 5.0

    # Answer given to alert/confirm/prompt dialogs as they open
    dialog_response: DialogResponse = "accept"

    @classmethod
    def from_env(cls) -> "BrowserConfig":
        """
        Create BrowserConfig from environment variables.

        Environment variables:
            BROWSER_TYPE: chromium, firefox, or webkit (default: chromium)
            BROWSER_HEADLESS: true/false (default: true)
            BROWSER_VIEWPORT_WIDTH: int (default: 1280)
            BROWSER_VIEWPORT_HEIGHT: int (default: 720)
            BROWSER_SLOW_MO: int in ms (default: 0)
            PAGE_LOAD_TIMEOUT: int in ms (default: 30000)
            STEADY_IMPLICIT_WAIT: float in seconds (default: 0)
            STEADY_ACTION_TIMEOUT: float in seconds (default: 5)
            STEADY_DIALOG_RESPONSE: accept or dismiss (default: accept)
        """
        env_type = os.getenv("BROWSER_TYPE", "chrome").lower()
        browser_type_map = {
            "chrome": "chromium",
            "chromium": "chromium",
            "firefox": "firefox",
            "webkit": "webkit",
            "safari": "webkit",
        }
        browser_type = browser_type_map.get(env_type, "chromium")

        headless_str = os.getenv("BROWSER_HEADLESS", "true").lower()
        headless = headless_str in ("true", "1", "yes")

        dialog_response = os.getenv("STEADY_DIALOG_RESPONSE", "accept").lower()
        if dialog_response not in ("accept", "dismiss"):
            logger.warning("Invalid STEADY_DIALOG_RESPONSE '%s', using accept", dialog_response)
            dialog_response = "accept"

        return cls(
            browser_type=browser_type,
            headless=headless,
            viewport_width=int(os.getenv("BROWSER_VIEWPORT_WIDTH", "1280")),
            viewport_height=int(os.getenv("BROWSER_VIEWPORT_HEIGHT", "720")),
            slow_mo=int(os.getenv("BROWSER_SLOW_MO", "0")),
            page_load_timeout=int(os.getenv("PAGE_LOAD_TIMEOUT", "30000")),
            implicit_wait=float(os.getenv("STEADY_IMPLICIT_WAIT", "0")),
            action_timeout=float(os.getenv("STEADY_ACTION_TIMEOUT", "5")),
            dialog_response=dialog_response,
        )


class BrowserController:
    """
    Controls the Playwright browser instance.

    Usage:
        >>> with BrowserController() as browser:
        ...     driver = browser.driver
        ...     driver.navigate("https://example.com")
    """

    def __init__(self, config: Optional[BrowserConfig] = None):
        """
        Initialize browser controller.

        Args:
            config: Browser configuration (uses env if None)
        """
        self.config = config or BrowserConfig.from_env()

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._context: Optional[BrowserContext] = None
        self._driver: Optional[PlaywrightDriver] = None

    @property
    def is_initialized(self) -> bool:
        """Check if browser is initialized."""
        return self._browser is not None

    @property
    def driver(self) -> PlaywrightDriver:
        """Driver for the first page, created on first access."""
        if self._driver is None:
            self._driver = self.new_driver()
        return self._driver

    def initialize(self) -> None:
        """Start Playwright and launch the browser."""
        if self._playwright is not None:
            return

        self._playwright = sync_playwright().start()

        launcher = self._get_browser_launcher()
        logger.debug("Launching %s (headless=%s)", self.config.browser_type, self.config.headless)

        self._browser = launcher.launch(
            headless=self.config.headless,
            slow_mo=self.config.slow_mo,
        )
        self._context = self._browser.new_context(
            viewport={
                "width": self.config.viewport_width,
                "height": self.config.viewport_height,
            },
        )
        self._context.set_default_timeout(self.config.page_load_timeout)
        self._context.set_default_navigation_timeout(self.config.page_load_timeout)

    def _get_browser_launcher(self):
        """Get the appropriate browser launcher based on config."""
        if self._playwright is None:
            raise RuntimeError("Playwright not initialized")

        launchers = {
            "chromium": self._playwright.chromium,
            "firefox": self._playwright.firefox,
            "webkit": self._playwright.webkit,
        }
        return launchers.get(self.config.browser_type, self._playwright.chromium)

    def new_page(self) -> Page:
        """
        Create a new browser page.

        Returns:
            New Playwright Page instance
        """
        if self._context is None:
            self.initialize()

        return self._context.new_page()

    def new_driver(self) -> PlaywrightDriver:
        """
        Open a new page and wrap it in a driver.

        Returns:
            PlaywrightDriver positioned on the new page
        """
        return PlaywrightDriver(
            self.new_page(),
            implicit_wait=self.config.implicit_wait,
            action_timeout=self.config.action_timeout,
            dialog_response=self.config.dialog_response,
        )

    def close(self) -> None:
        """Close the browser and cleanup resources."""
        self._driver = None

        # Each step runs even when an earlier one fails (e.g. a crashed browser)
        if self._context:
            try:
                self._context.close()
            except Exception as e:
                logger.debug("Closing browser context failed -> %s", e)
            self._context = None

        if self._browser:
            try:
                self._browser.close()
            except Exception as e:
                logger.debug("Closing browser failed -> %s", e)
            self._browser = None

        if self._playwright:
            try:
                self._playwright.stop()
            except Exception as e:
                logger.debug("Stopping Playwright failed -> %s", e)
            self._playwright = None

    def __enter__(self) -> "BrowserController":
        self.initialize()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def create_browser(config: Optional[BrowserConfig] = None) -> BrowserController:
    """
    Factory function to create a browser controller.

    Use with a context manager:
        >>> with create_browser() as browser:
        ...     browser.driver.navigate("https://example.com")

    Args:
        config: Browser configuration (uses env if None)

    Returns:
        BrowserController instance (not yet initialized)
    """
    return BrowserController(config)
