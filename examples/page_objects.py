#!/usr/bin/env python
"""
Page Object Example

Builds a small page object on WebPage/PageComponent for a Selenium session.
The results component re-finds its element on every access, so it keeps
working after the search re-renders the results list.

Usage:
    python examples/page_objects.py

Requirements:
    - steadydriver installed: pip install -e .
    - Chrome and a matching chromedriver on PATH
"""

from selenium import webdriver

from steadydriver.browser import Locator, SeleniumDriver
from steadydriver.config import configure_logging
from steadydriver.pages import PageComponent, WebPage
from steadydriver.tools import set_value, wait_for_page_loaded


class Results(PageComponent):
    """Search result list."""

    ITEM = Locator.css("li")

    def titles(self) -> list[str]:
        return [self.driver.get_text(item) for item in self.find_all(self.ITEM)]


class SearchPage(WebPage):
    """A search page with a query box and a result list."""

    QUERY = Locator.name("q")
    RESULTS = Locator.id("results")

    def go_to_page(self) -> None:
        super().go_to_page()
        wait_for_page_loaded(self.driver)

    @property
    def results(self) -> Results:
        return Results.from_locator(self.driver, self.RESULTS)

    def search(self, query: str) -> list[str]:
        set_value(self.driver, self.find(self.QUERY), query)
        self.wait.until(lambda d: self.results.find_all(Results.ITEM))
        return self.results.titles()


def main():
    """Run a search through the page object."""
    configure_logging(verbose=True)

    session = webdriver.Chrome()
    try:
        page = SearchPage(SeleniumDriver(session), "https://example.com/search")
        page.go_to_page()
        print(page.search("python"))
    finally:
        session.quit()


if __name__ == "__main__":
    main()
