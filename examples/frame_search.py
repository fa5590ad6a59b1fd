#!/usr/bin/env python
"""
Frame Search Example

Loads a page with nested iframes, finds a frame by name anywhere in the
tree, and fills in a field inside it.

Usage:
    python examples/frame_search.py

Requirements:
    - steadydriver installed: pip install -e .
    - Chromium for Playwright: playwright install chromium
"""

from steadydriver.browser import BrowserController, Locator
from steadydriver.config import configure_logging
from steadydriver.tools import patient_click, set_value, switch_to_frame

PAGE = """<!DOCTYPE html>
<html>
<body>
    <h1>Checkout</h1>
    <iframe name="payment" srcdoc="<iframe name='card' srcdoc='<input id=&quot;number&quot;><button id=&quot;pay&quot;>Pay</button>'></iframe>"></iframe>
</body>
</html>"""


def main():
    """Find the card frame and fill it in."""
    configure_logging(verbose=True)

    with BrowserController() as browser:
        driver = browser.driver
        driver.page.set_content(PAGE)

        if not switch_to_frame(driver, "card", frame_locator=Locator.css("frame, iframe")):
            print("Card frame not found")
            return

        set_value(driver, driver.find_element(Locator.id("number")), "4111 1111 1111 1111")
        clicked = patient_click(driver, driver.find_element(Locator.id("pay")))

        print(f"Card number entered, pay clicked: {clicked}")


if __name__ == "__main__":
    main()
