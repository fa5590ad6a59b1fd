"""
Unit tests for the Selenium and Playwright driver adapters.

This module covers:
- Selenium exception translation and call forwarding
- Network condition hooks
- Playwright selector conversion and error classification
"""

from unittest.mock import MagicMock, PropertyMock

import pytest
from playwright.sync_api import Error as PlaywrightError
from selenium.common.exceptions import (
    ElementClickInterceptedException,
    ElementNotInteractableException,
    InvalidSelectorException,
    NoAlertPresentException,
    NoSuchElementException,
    StaleElementReferenceException,
    WebDriverException,
)
from selenium.webdriver.remote.webdriver import WebDriver

from steadydriver.browser.locators import Locator
from steadydriver.browser.playwright_driver import PlaywrightDriver, classify_error, to_selector
from steadydriver.browser.selenium_driver import SeleniumDriver
from steadydriver.exceptions import (
    ClickInterceptedError,
    DriverCommunicationError,
    ElementNotInteractableError,
    InvalidLocatorError,
    NoAlertPresentError,
    NoSuchElementError,
    StaleElementError,
)


@pytest.fixture
def webdriver():
    return MagicMock(spec=WebDriver)


class TestSeleniumDriver:
    """Test the Selenium adapter."""

    def test_find_element_forwards_strategy(self, webdriver):
        element = object()
        webdriver.find_element.return_value = element

        assert SeleniumDriver(webdriver).find_element(Locator.name("q")) is element
        webdriver.find_element.assert_called_once_with("name", "q")

    def test_find_elements_within_context(self, webdriver):
        context = MagicMock()
        context.find_elements.return_value = ["a", "b"]

        result = SeleniumDriver(webdriver).find_elements(Locator.tag_name("frame"), context)

        assert result == ["a", "b"]
        context.find_elements.assert_called_once_with("tag name", "frame")
        webdriver.find_elements.assert_not_called()

    @pytest.mark.parametrize(
        "selenium_error, expected",
        [
            (NoSuchElementException("x"), NoSuchElementError),
            (StaleElementReferenceException("x"), StaleElementError),
            (ElementClickInterceptedException("x"), ClickInterceptedError),
            (ElementNotInteractableException("x"), ElementNotInteractableError),
            (InvalidSelectorException("x"), InvalidLocatorError),
            (WebDriverException("x"), DriverCommunicationError),
        ],
    )
    def test_exception_translation(self, selenium_error, expected):
        element = MagicMock()
        element.click.side_effect = selenium_error

        with pytest.raises(expected) as exc_info:
            SeleniumDriver(MagicMock()).click(element)

        assert exc_info.value.__cause__ is selenium_error

    def test_missing_alert(self, webdriver):
        switch_to = MagicMock()
        type(switch_to).alert = PropertyMock(side_effect=NoAlertPresentException("none"))
        webdriver.switch_to = switch_to

        with pytest.raises(NoAlertPresentError):
            SeleniumDriver(webdriver).switch_to_alert()

    def test_implicit_wait(self, webdriver):
        webdriver.timeouts = MagicMock(implicit_wait=3)
        driver = SeleniumDriver(webdriver)

        assert driver.get_implicit_wait() == 3.0

        driver.set_implicit_wait(0.01)
        webdriver.implicitly_wait.assert_called_once_with(0.01)

    def test_frame_switching(self, webdriver):
        frame = object()
        driver = SeleniumDriver(webdriver)

        driver.switch_to_frame(frame)
        driver.switch_to_parent_frame()
        driver.switch_to_default_content()

        webdriver.switch_to.frame.assert_called_once_with(frame)
        webdriver.switch_to.parent_frame.assert_called_once_with()
        webdriver.switch_to.default_content.assert_called_once_with()

    def test_attribute_and_text(self):
        element = MagicMock(text="Hello")
        element.get_attribute.return_value = "v"
        driver = SeleniumDriver(MagicMock())

        assert driver.get_attribute(element, "value") == "v"
        assert driver.get_text(element) == "Hello"

    def test_go_offline_requires_chromium(self, webdriver):
        with pytest.raises(DriverCommunicationError):
            SeleniumDriver(webdriver).go_offline()

    def test_network_conditions(self):
        webdriver = MagicMock()
        driver = SeleniumDriver(webdriver)

        driver.go_offline()
        driver.go_online()

        offline, online = webdriver.set_network_conditions.call_args_list
        assert offline.kwargs["offline"] is True
        assert offline.kwargs["download_throughput"] == 0
        assert online.kwargs["offline"] is False


class TestPlaywrightSelectors:
    """Test Locator to Playwright selector conversion."""

    @pytest.mark.parametrize(
        "locator, selector",
        [
            (Locator.css("div > a"), "css=div > a"),
            (Locator.tag_name("frame"), "css=frame"),
            (Locator.xpath("//a"), "xpath=//a"),
            (Locator.id("main"), 'css=[id="main"]'),
            (Locator.name('q"x'), 'css=[name="q\\"x"]'),
            (Locator.class_name("btn"), "css=.btn"),
            (Locator.link_text("Home"), 'css=a:text-is("Home")'),
        ],
    )
    def test_to_selector(self, locator, selector):
        assert to_selector(locator) == selector


class TestPlaywrightErrors:
    """Test Playwright error classification."""

    @pytest.mark.parametrize(
        "message, expected",
        [
            ("<div class=overlay> intercepts pointer events", ClickInterceptedError),
            ("Element is not attached to the DOM", StaleElementError),
            ("Execution context was destroyed, most likely because of a navigation", StaleElementError),
            ("Unexpected token \"]\" while parsing selector", InvalidLocatorError),
            ("element is not visible", ElementNotInteractableError),
            ("Target page, context or browser has been closed", DriverCommunicationError),
        ],
    )
    def test_classify(self, message, expected):
        assert classify_error(PlaywrightError(message)) is expected


class TestPlaywrightDriverState:
    """Test PlaywrightDriver state handling without a browser."""

    @pytest.fixture
    def page(self):
        page = MagicMock()
        page.main_frame.parent_frame = None
        return page

    @staticmethod
    def listener(page, event):
        for call in page.on.call_args_list:
            if call.args[0] == event:
                return call.args[1]
        raise AssertionError(f"No {event} listener registered")

    def test_implicit_wait_is_local_state(self, page):
        driver = PlaywrightDriver(page, implicit_wait=2.0)

        assert driver.get_implicit_wait() == 2.0
        driver.set_implicit_wait(0.01)
        assert driver.get_implicit_wait() == 0.01

    def test_registers_page_listeners(self, page):
        PlaywrightDriver(page)

        events = {call.args[0] for call in page.on.call_args_list}
        assert events == {"dialog", "close"}

    def test_rejects_unknown_dialog_response(self, page):
        with pytest.raises(ValueError):
            PlaywrightDriver(page, dialog_response="ignore")

    def test_no_dialog_means_no_alert(self, page):
        with pytest.raises(NoAlertPresentError):
            PlaywrightDriver(page).switch_to_alert()

    def test_dialog_answered_as_it_opens(self, page):
        """Test the dialog is accepted inside the listener so the opening action can finish."""
        driver = PlaywrightDriver(page)
        dialog = MagicMock(message="Are you sure?", type="confirm")

        self.listener(page, "dialog")(dialog)

        dialog.accept.assert_called_once_with()
        dialog.dismiss.assert_not_called()

        alert = driver.switch_to_alert()
        assert alert.text == "Are you sure?"
        assert alert.answer == "accept"

        alert.accept()
        dialog.accept.assert_called_once_with()

        with pytest.raises(NoAlertPresentError):
            driver.switch_to_alert()

    def test_dismiss_response(self, page):
        driver = PlaywrightDriver(page, dialog_response="dismiss")
        dialog = MagicMock(message="Leave page?", type="confirm")

        self.listener(page, "dialog")(dialog)

        dialog.dismiss.assert_called_once_with()
        dialog.accept.assert_not_called()
        assert driver.switch_to_alert().answer == "dismiss"

    def test_dialogs_surface_in_order(self, page):
        driver = PlaywrightDriver(page)
        answer_dialog = self.listener(page, "dialog")

        answer_dialog(MagicMock(message="first"))
        answer_dialog(MagicMock(message="second"))

        first = driver.switch_to_alert()
        assert first.text == "first"
        first.dismiss()

        assert driver.switch_to_alert().text == "second"

    def test_closed_page_is_forgotten(self, page):
        driver = PlaywrightDriver(page)
        self.listener(page, "dialog")(MagicMock(message="bye"))

        self.listener(page, "close")(page)

        assert page not in driver._handles
        assert page not in driver._dialogs
        with pytest.raises(NoAlertPresentError):
            driver.switch_to_alert()

    def test_find_element_without_match(self, page):
        page.main_frame.query_selector_all.return_value = []

        with pytest.raises(NoSuchElementError):
            PlaywrightDriver(page).find_element(Locator.css("#missing"))

    def test_parent_frame_stops_at_top(self, page):
        driver = PlaywrightDriver(page)

        driver.switch_to_parent_frame()

        assert driver.current_frame is page.main_frame
