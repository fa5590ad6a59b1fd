"""
Web Page

A page component spanning the whole document, with the URL it lives at.
"""

from ..browser.facade import Driver
from .component import PageComponent


class WebPage(PageComponent):
    """Page object whose search context is the driver itself."""

    def __init__(self, driver: Driver, url: str):
        super().__init__(driver, context=driver)
        self._url = url

    @property
    def url(self) -> str:
        return self._url

    def go_to_page(self) -> None:
        """
        Navigate the driver to this page's URL.

        Override for pages that need extra waiting after navigation.
        """
        self.driver.navigate(self._url)
