"""
Selenium Driver Adapter

Implements the Driver facade on top of a Selenium WebDriver session.
Selenium exceptions are translated into steadydriver failure kinds so the
synchronization layer never has to import selenium itself.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Optional, Union

from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidElementStateException,
    InvalidSelectorException,
    NoAlertPresentException,
    NoSuchElementException,
    NoSuchFrameException,
    NoSuchWindowException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.common.action_chains import ActionChains
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from ..config import get_logger
from ..exceptions import (
    ClickInterceptedError,
    DriverCommunicationError,
    ElementNotInteractableError,
    InvalidLocatorError,
    NoAlertPresentError,
    NoSuchElementError,
    StaleElementError,
)
from .facade import Alert
from .locators import Locator

logger = get_logger(__name__)

# Checked in order: more specific selenium classes first
_TRANSLATIONS = (
    (ElementClickInterceptedException, ClickInterceptedError),
    (InvalidSelectorException, InvalidLocatorError),
    (StaleElementReferenceException, StaleElementError),
    (NoSuchElementException, NoSuchElementError),
    (NoSuchFrameException, NoSuchElementError),
    (NoSuchWindowException, NoSuchElementError),
    (NoAlertPresentException, NoAlertPresentError),
    (ElementNotInteractableException, ElementNotInteractableError),
    (InvalidElementStateException, ElementNotInteractableError),
)


@contextmanager
def _translated() -> Iterator[None]:
    """Re-raise selenium exceptions as steadydriver failure kinds."""
    try:
        yield
    except WebDriverException as e:
        for selenium_type, error_type in _TRANSLATIONS:
            if isinstance(e, selenium_type):
                raise error_type(e.msg or str(e)) from e
        raise DriverCommunicationError(e.msg or str(e)) from e


class SeleniumDriver:
    """
    Driver facade backed by a Selenium WebDriver.

    Usage:
        >>> from selenium import webdriver
        >>> driver = SeleniumDriver(webdriver.Chrome())
        >>> driver.navigate("https://example.com")
    """

    def __init__(self, webdriver: WebDriver):
        """
        Initialize the adapter.

        Args:
            webdriver: An already started Selenium WebDriver session
        """
        self.webdriver = webdriver

    def _root(self, context: Optional[Any]) -> Union[WebDriver, WebElement]:
        return self.webdriver if context is None else context

    def navigate(self, url: str) -> None:
        logger.debug("Load page -> %s", url)
        with _translated():
            self.webdriver.get(url)

    def find_element(self, locator: Locator, context: Optional[Any] = None) -> WebElement:
        with _translated():
            return self._root(context).find_element(locator.by.value, locator.value)

    def find_elements(self, locator: Locator, context: Optional[Any] = None) -> list[WebElement]:
        with _translated():
            return list(self._root(context).find_elements(locator.by.value, locator.value))

    def get_attribute(self, element: WebElement, name: str) -> Optional[str]:
        with _translated():
            return element.get_attribute(name)

    def get_text(self, element: WebElement) -> str:
        with _translated():
            return element.text

    def click(self, element: WebElement) -> None:
        with _translated():
            element.click()

    def send_keys(self, element: WebElement, keys: str) -> None:
        with _translated():
            element.send_keys(keys)

    def clear(self, element: WebElement) -> None:
        with _translated():
            element.clear()

    def move_to_element(self, element: WebElement) -> None:
        with _translated():
            ActionChains(self.webdriver).move_to_element(element).perform()

    def get_implicit_wait(self) -> float:
        with _translated():
            return float(self.webdriver.timeouts.implicit_wait)

    def set_implicit_wait(self, seconds: float) -> None:
        with _translated():
            self.webdriver.implicitly_wait(seconds)

    @property
    def window_handles(self) -> list[str]:
        with _translated():
            return list(self.webdriver.window_handles)

    def switch_to_window(self, handle: str) -> None:
        with _translated():
            self.webdriver.switch_to.window(handle)

    def switch_to_frame(self, frame: Union[str, WebElement]) -> None:
        with _translated():
            self.webdriver.switch_to.frame(frame)

    def switch_to_parent_frame(self) -> None:
        with _translated():
            self.webdriver.switch_to.parent_frame()

    def switch_to_default_content(self) -> None:
        with _translated():
            self.webdriver.switch_to.default_content()

    def switch_to_alert(self) -> Alert:
        with _translated():
            return self.webdriver.switch_to.alert

    def execute_script(self, script: str, *args: Any) -> Any:
        with _translated():
            return self.webdriver.execute_script(script, *args)

    def go_offline(self) -> None:
        """
        Simulate a disconnected network.

        Only Chromium-based drivers support network conditions; other
        drivers raise DriverCommunicationError.
        """
        self._set_network_conditions(
            offline=True,
            latency=10,
            download_throughput=0,
            upload_throughput=0,
        )

    def go_online(self) -> None:
        """Restore normal network conditions after go_offline()."""
        self._set_network_conditions(
            offline=False,
            latency=0,
            download_throughput=1000000,
            upload_throughput=1000000,
        )

    def _set_network_conditions(self, **conditions: Any) -> None:
        setter = getattr(self.webdriver, "set_network_conditions", None)
        if setter is None:
            raise DriverCommunicationError(
                f"{type(self.webdriver).__name__} does not support network conditions"
            )

        logger.debug("Setting network conditions -> %s", conditions)
        with _translated():
            setter(**conditions)
