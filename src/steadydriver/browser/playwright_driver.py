"""
Playwright Driver Adapter

Implements the Driver facade on a Playwright sync Page, emulating the
WebDriver session model the synchronization layer expects:

- an implicit wait applied to every lookup (Playwright has none),
- a current-frame pointer for default/parent/child frame switching,
- dialogs answered as they open and exposed as alerts until acknowledged,
- window handles mapped onto the pages of the browser context.

A Playwright dialog blocks the action that opened it (a click, an
evaluate) until the dialog is answered, so dialogs are accepted or
dismissed inside the event handler. The page continues right away and the
dialog's message stays readable through switch_to_alert() until the caller
accepts or dismisses the alert.

Playwright errors carry no machine-readable kind, so they are classified
by message into steadydriver failure kinds.
"""

import itertools
import time
from contextlib import contextmanager
from typing import Any, Iterator, Literal, Optional, Union

from playwright.sync_api import Dialog, ElementHandle, Frame, Page
from playwright.sync_api import Error as PlaywrightError

from ..config import get_logger
from ..exceptions import (
    ClickInterceptedError,
    DriverCommunicationError,
    DriverError,
    ElementNotInteractableError,
    InvalidLocatorError,
    NoAlertPresentError,
    NoSuchElementError,
    StaleElementError,
)
from .facade import Keys
from .locators import By, Locator

logger = get_logger(__name__)

# Poll cadence of the emulated implicit wait
FIND_POLL_MS = 50

DialogResponse = Literal["accept", "dismiss"]

# Message fragments, checked in order
_ERROR_PATTERNS: tuple[tuple[tuple[str, ...], type[DriverError]], ...] = (
    (("intercepts pointer events",), ClickInterceptedError),
    (
        (
            "not attached to the dom",
            "execution context was destroyed",
            "frame was detached",
            "is disposed",
            "cannot find context",
        ),
        StaleElementError,
    ),
    (
        (
            "is not a valid selector",
            "while parsing selector",
            "unexpected token",
            "unknown engine",
        ),
        InvalidLocatorError,
    ),
    (
        (
            "element is not visible",
            "element is not enabled",
            "element is not editable",
            "outside of the viewport",
            "not an <input>",
        ),
        ElementNotInteractableError,
    ),
)

_KEY_NAMES = {
    Keys.BACKSPACE: "Backspace",
    Keys.TAB: "Tab",
    Keys.ENTER: "Enter",
    Keys.ESCAPE: "Escape",
    Keys.END: "End",
    Keys.HOME: "Home",
    Keys.DELETE: "Delete",
}

# WebDriver reports the live value property for "value"
_GET_ATTRIBUTE_JS = """(element, name) => {
    if (name === "value" && "value" in element) {
        return element.value === null || element.value === undefined ? null : String(element.value);
    }
    return element.getAttribute(name);
}"""


def classify_error(error: PlaywrightError) -> type[DriverError]:
    """
    Map a Playwright error onto a steadydriver failure kind.

    Args:
        error: Error raised by a Playwright call

    Returns:
        The DriverError subclass matching the message
    """
    message = (getattr(error, "message", None) or str(error)).lower()

    for fragments, error_type in _ERROR_PATTERNS:
        if any(fragment in message for fragment in fragments):
            return error_type

    return DriverCommunicationError


@contextmanager
def _translated() -> Iterator[None]:
    try:
        yield
    except PlaywrightError as e:
        error_type = classify_error(e)
        raise error_type(getattr(e, "message", None) or str(e)) from e


def _quote(value: str) -> str:
    return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'


def to_selector(locator: Locator) -> str:
    """
    Convert a Locator into a Playwright selector string.

    Args:
        locator: Locator to convert

    Returns:
        Selector with an explicit engine prefix
    """
    value = locator.value

    if locator.by in (By.CSS_SELECTOR, By.TAG_NAME):
        return f"css={value}"
    if locator.by == By.XPATH:
        return f"xpath={value}"
    if locator.by == By.ID:
        return f"css=[id={_quote(value)}]"
    if locator.by == By.NAME:
        return f"css=[name={_quote(value)}]"
    if locator.by == By.CLASS_NAME:
        return f"css=.{value}"
    if locator.by == By.LINK_TEXT:
        return f"css=a:text-is({_quote(value)})"
    if locator.by == By.PARTIAL_LINK_TEXT:
        return f"css=a:has-text({_quote(value)})"

    raise InvalidLocatorError(f"Unsupported locator strategy -> {locator.by}")


class PlaywrightAlert:
    """
    An already answered Playwright dialog seen through the Alert protocol.

    accept() and dismiss() acknowledge the alert; the page received the
    driver's dialog_response when the dialog opened.
    """

    def __init__(self, dialog: Dialog, answer: DialogResponse, on_close):
        self._dialog = dialog
        self._answer = answer
        self._on_close = on_close

    @property
    def text(self) -> str:
        return self._dialog.message

    @property
    def answer(self) -> DialogResponse:
        """How the page's dialog was answered."""
        return self._answer

    def _acknowledge(self, requested: DialogResponse) -> None:
        if requested != self._answer:
            logger.debug(
                "%s dialog was answered with %s before %s -> %s",
                self._dialog.type,
                self._answer,
                requested,
                self._dialog.message,
            )
        self._on_close()

    def accept(self) -> None:
        self._acknowledge("accept")

    def dismiss(self) -> None:
        self._acknowledge("dismiss")


class PlaywrightDriver:
    """
    Driver facade backed by a Playwright sync Page.

    Usage:
        >>> with sync_playwright() as p:
        ...     page = p.chromium.launch().new_page()
        ...     driver = PlaywrightDriver(page)
        ...     driver.navigate("https://example.com")
    """

    def __init__(
        self,
        page: Page,
        implicit_wait: float = 0.0,
        action_timeout: float = 5.0,
        dialog_response: DialogResponse = "accept",
    ):
        """
        Initialize the adapter.

        Args:
            page: Page the session starts on
            implicit_wait: Initial implicit wait in seconds
            action_timeout: Per-action timeout in seconds for click/type/hover
            dialog_response: How dialogs are answered when they open; prompts
                receive their default value on accept
        """
        if dialog_response not in ("accept", "dismiss"):
            raise ValueError(f"dialog_response must be accept or dismiss, got {dialog_response!r}")

        self._implicit_wait = implicit_wait
        self.action_timeout = action_timeout
        self.dialog_response: DialogResponse = dialog_response

        self._handle_ids = itertools.count(1)
        self._handles: dict[Page, str] = {}
        # Answered dialogs per page, oldest first, until the caller acknowledges them
        self._dialogs: dict[Page, list[tuple[Dialog, DialogResponse]]] = {}

        self._page = page
        self._frame: Frame = page.main_frame
        self._watch(page)

    @property
    def page(self) -> Page:
        """The page currently switched to."""
        return self._page

    @property
    def current_frame(self) -> Frame:
        """The frame lookups currently run in."""
        return self._frame

    @property
    def _timeout_ms(self) -> float:
        return self.action_timeout * 1000

    def _watch(self, page: Page) -> None:
        if page in self._handles:
            return

        self._handles[page] = f"page-{next(self._handle_ids)}"

        def answer_dialog(dialog: Dialog) -> None:
            logger.debug("%s dialog opened -> %s", dialog.type, dialog.message)
            answer = self.dialog_response
            self._dialogs.setdefault(page, []).append((dialog, answer))

            # The action that opened the dialog stays blocked until it is answered
            if answer == "accept":
                dialog.accept()
            else:
                dialog.dismiss()

        def forget_page(closed: Page) -> None:
            self._handles.pop(closed, None)
            self._dialogs.pop(closed, None)

        page.on("dialog", answer_dialog)
        page.on("close", forget_page)

    def _pump_events(self) -> None:
        # Sync Playwright only dispatches events while a call is in flight
        self._page.wait_for_timeout(0)

    def navigate(self, url: str) -> None:
        logger.debug("Load page -> %s", url)
        with _translated():
            self._page.goto(url)
        self._frame = self._page.main_frame

    def find_element(self, locator: Locator, context: Optional[Any] = None) -> ElementHandle:
        elements = self.find_elements(locator, context)
        if not elements:
            raise NoSuchElementError(f"No element matches -> {locator}")
        return elements[0]

    def find_elements(self, locator: Locator, context: Optional[Any] = None) -> list[ElementHandle]:
        selector = to_selector(locator)
        root: Union[Frame, ElementHandle] = self._frame if context is None else context
        deadline = time.monotonic() + self._implicit_wait

        with _translated():
            while True:
                elements = root.query_selector_all(selector)
                if elements or time.monotonic() >= deadline:
                    return elements
                self._page.wait_for_timeout(FIND_POLL_MS)

    def get_attribute(self, element: ElementHandle, name: str) -> Optional[str]:
        with _translated():
            return element.evaluate(_GET_ATTRIBUTE_JS, name)

    def get_text(self, element: ElementHandle) -> str:
        with _translated():
            return element.inner_text()

    def click(self, element: ElementHandle) -> None:
        with _translated():
            element.click(timeout=self._timeout_ms)

    def send_keys(self, element: ElementHandle, keys: str) -> None:
        with _translated():
            text = ""
            for char in keys:
                if char not in _KEY_NAMES:
                    text += char
                    continue
                if text:
                    element.type(text, timeout=self._timeout_ms)
                    text = ""
                element.press(_KEY_NAMES[char], timeout=self._timeout_ms)
            if text:
                element.type(text, timeout=self._timeout_ms)

    def clear(self, element: ElementHandle) -> None:
        with _translated():
            element.fill("", timeout=self._timeout_ms)

    def move_to_element(self, element: ElementHandle) -> None:
        with _translated():
            element.hover(timeout=self._timeout_ms)

    def get_implicit_wait(self) -> float:
        return self._implicit_wait

    def set_implicit_wait(self, seconds: float) -> None:
        self._implicit_wait = seconds

    @property
    def window_handles(self) -> list[str]:
        pages = self._page.context.pages
        for page in pages:
            self._watch(page)
        return [self._handles[page] for page in pages]

    def switch_to_window(self, handle: str) -> None:
        for page in self._page.context.pages:
            self._watch(page)
            if self._handles[page] == handle:
                self._page = page
                self._frame = page.main_frame
                with _translated():
                    page.bring_to_front()
                return

        raise NoSuchElementError(f"No window with handle -> {handle}")

    def switch_to_frame(self, frame: Union[str, int, ElementHandle]) -> None:
        with _translated():
            if isinstance(frame, int):
                children = self._frame.child_frames
                if frame >= len(children):
                    raise NoSuchElementError(f"No frame at index -> {frame}")
                self._frame = children[frame]
                return

            if isinstance(frame, str):
                quoted = _quote(frame)
                element = self._frame.query_selector(
                    f"css=frame[name={quoted}], iframe[name={quoted}], "
                    f"frame[id={quoted}], iframe[id={quoted}]"
                )
                if element is None:
                    raise NoSuchElementError(f"No frame named -> {frame}")
            else:
                element = frame

            content = element.content_frame()

        if content is None:
            raise NoSuchElementError("Element is not a frame")
        self._frame = content

    def switch_to_parent_frame(self) -> None:
        if self._frame.parent_frame is not None:
            self._frame = self._frame.parent_frame

    def switch_to_default_content(self) -> None:
        self._frame = self._page.main_frame

    def switch_to_alert(self) -> PlaywrightAlert:
        with _translated():
            self._pump_events()

        pending = self._dialogs.get(self._page)
        if not pending:
            raise NoAlertPresentError("No dialog is open")

        entry = pending[0]

        def acknowledged() -> None:
            if entry in pending:
                pending.remove(entry)

        dialog, answer = entry
        return PlaywrightAlert(dialog, answer, on_close=acknowledged)

    def execute_script(self, script: str, *args: Any) -> Any:
        # WebDriver scripts are function bodies receiving positional arguments
        wrapper = "(args) => (function() {\n" + script + "\n}).apply(null, args)"
        with _translated():
            return self._frame.evaluate(wrapper, list(args))
