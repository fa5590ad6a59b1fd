"""
Page Component

Base type for page objects. A component is bound either to a fixed search
context (the driver or an element) or to a locator. A locator-bound
component re-runs its lookup on every access instead of holding on to an
element handle that a navigation or DOM update could turn stale.
"""

from typing import Any, Optional

from ..browser.facade import Driver
from ..browser.locators import Locator
from ..tools.wait import Wait


class PageComponent:
    """
    Base class for all web page components and web pages.

    Usage:
        >>> class SearchBox(PageComponent):
        ...     INPUT = Locator.css("input[type=search]")
        ...
        ...     def search(self, query):
        ...         set_value(self.driver, self.find(self.INPUT), query)
        >>> box = SearchBox.from_locator(driver, Locator.id("search"))
    """

    def __init__(
        self,
        driver: Driver,
        context: Optional[Any] = None,
        locator: Optional[Locator] = None,
    ):
        """
        Initialize the component.

        Args:
            driver: Driver session
            context: Fixed search context (the driver or an element)
            locator: Locator re-resolved on every access

        Raises:
            ValueError: Not exactly one of context and locator was given
        """
        if (context is None) == (locator is None):
            raise ValueError("Provide exactly one of context or locator")

        self._driver = driver
        self._context = context
        self._locator = locator

    @classmethod
    def from_locator(cls, driver: Driver, locator: Locator, **kwargs) -> "PageComponent":
        """Create a component that re-finds its element through locator."""
        return cls(driver, locator=locator, **kwargs)

    @classmethod
    def from_context(cls, driver: Driver, context: Any, **kwargs) -> "PageComponent":
        """Create a component bound to a fixed search context."""
        return cls(driver, context=context, **kwargs)

    def __repr__(self) -> str:
        bound = self._locator if self._locator is not None else type(self._context).__name__
        return f"<{type(self).__name__} {bound}>"

    @property
    def driver(self) -> Driver:
        return self._driver

    @property
    def locator(self) -> Optional[Locator]:
        """The construction locator, or None for a context-bound component."""
        return self._locator

    @property
    def context(self) -> Any:
        """
        The component's search context.

        For a locator-bound component this runs a fresh lookup on every
        read, so two reads may return different elements.

        Raises:
            NoSuchElementError: The locator no longer matches anything
        """
        if self._locator is not None:
            return self._driver.find_element(self._locator)
        return self._context

    @property
    def as_element(self) -> Any:
        """
        The context as a single element handle.

        Raises:
            TypeError: The context is the driver rather than an element
        """
        context = self.context
        if context is self._driver:
            raise TypeError(f"{type(self).__name__} is bound to the driver, not an element")
        return context

    @property
    def wait(self) -> Wait:
        """
        A Wait bound to this component's driver.

        Example:
            self.wait.until(lambda d: d.find_element(SAVED_BANNER))
        """
        return Wait(self._driver)

    def _search_root(self) -> Optional[Any]:
        context = self.context
        return None if context is self._driver else context

    def find(self, locator: Locator) -> Any:
        """
        Find the first element matching locator inside this component.

        Raises:
            NoSuchElementError: Nothing matched
        """
        return self._driver.find_element(locator, self._search_root())

    def find_all(self, locator: Locator) -> list[Any]:
        """Find every element matching locator inside this component."""
        return self._driver.find_elements(locator, self._search_root())
