"""
Driver Facade

The minimal browser-session capability set the synchronization layer is
built on. Anything that implements the Driver protocol (the bundled
SeleniumDriver and PlaywrightDriver adapters, or a test double) can be
handed to the waits, the frame resolver, the interaction helpers and the
page components.

Adapters must raise the steadydriver.exceptions failure kinds, never their
backend's own exception types.
"""

from typing import Any, Optional, Protocol, Union, runtime_checkable

from .locators import Locator


class Keys:
    """Key code points understood by WebDriver send_keys."""

    BACKSPACE = "\ue003"
    TAB = "\ue004"
    ENTER = "\ue007"
    ESCAPE = "\ue00c"
    END = "\ue010"
    HOME = "\ue011"
    DELETE = "\ue017"


@runtime_checkable
class Alert(Protocol):
    """An open alert/confirm/prompt dialog."""

    @property
    def text(self) -> str: ...

    def accept(self) -> None: ...

    def dismiss(self) -> None: ...


@runtime_checkable
class Driver(Protocol):
    """
    Browser session operations used by steadydriver.

    Element handles are opaque: they are only ever passed back to the
    driver that produced them. A context of None means the current
    document (the top-level page or the frame currently switched into).
    """

    def navigate(self, url: str) -> None: ...

    def find_element(self, locator: Locator, context: Optional[Any] = None) -> Any: ...

    def find_elements(self, locator: Locator, context: Optional[Any] = None) -> list[Any]: ...

    def get_attribute(self, element: Any, name: str) -> Optional[str]: ...

    def get_text(self, element: Any) -> str: ...

    def click(self, element: Any) -> None: ...

    def send_keys(self, element: Any, keys: str) -> None: ...

    def clear(self, element: Any) -> None: ...

    def move_to_element(self, element: Any) -> None: ...

    def get_implicit_wait(self) -> float: ...

    def set_implicit_wait(self, seconds: float) -> None: ...

    @property
    def window_handles(self) -> list[str]: ...

    def switch_to_window(self, handle: str) -> None: ...

    def switch_to_frame(self, frame: Union[str, Any]) -> None: ...

    def switch_to_parent_frame(self) -> None: ...

    def switch_to_default_content(self) -> None: ...

    def switch_to_alert(self) -> Alert: ...

    def execute_script(self, script: str, *args: Any) -> Any: ...
