"""
Integration tests against a real Chromium page through PlaywrightDriver.

This module covers:
- Frame search through nested iframes
- Text entry helpers on a live input
- Lazy component re-resolution after a DOM replacement
- Alerts raised by page script, from timers, click handlers and evaluated scripts
- Implicit wait restoration around soft lookups

Tests are skipped when no Chromium build can be launched.
"""

import pytest

from steadydriver.browser import BrowserConfig, BrowserController, Locator
from steadydriver.exceptions import NoAlertPresentError
from steadydriver.pages import PageComponent
from steadydriver.tools import (
    attempt_click,
    enter_text_try_hard_mode,
    find_element,
    patient_click,
    set_value,
    switch_to_frame,
    wait_for_alert,
    wait_for_alert_and_accept,
    wait_for_page_loaded,
)

pytestmark = pytest.mark.integration

ANY_FRAME = Locator.css("frame, iframe")


@pytest.fixture
def session():
    """A driver on a fresh headless Chromium page."""
    config = BrowserConfig(browser_type="chromium", headless=True, implicit_wait=0.0)
    controller = BrowserController(config)

    try:
        controller.initialize()
    except Exception as e:
        controller.close()
        pytest.skip(f"Chromium not available: {e}")

    try:
        yield controller.driver
    finally:
        controller.close()


class TestFrameSearch:
    """Frame search over nested same-origin iframes."""

    NESTED_FRAMES = """<!DOCTYPE html>
<html>
<body>
    <iframe name="outer" srcdoc="<p>outer</p><iframe name='inner' srcdoc='<input id=&quot;deep&quot; value=&quot;found me&quot;>'></iframe>"></iframe>
    <iframe name="sibling" srcdoc="<p>sibling</p>"></iframe>
</body>
</html>"""

    def test_switches_into_nested_frame(self, session):
        session.page.set_content(self.NESTED_FRAMES)

        assert switch_to_frame(session, "inner", frame_locator=ANY_FRAME) is True

        deep = session.find_element(Locator.id("deep"))
        assert session.get_attribute(deep, "value") == "found me"

    def test_miss_returns_to_top_level(self, session):
        session.page.set_content(self.NESTED_FRAMES)
        session.set_implicit_wait(1.5)

        assert switch_to_frame(session, "nowhere", frame_locator=ANY_FRAME) is False

        assert session.current_frame is session.page.main_frame
        assert session.get_implicit_wait() == 1.5


class TestTextEntry:
    """Text helpers on a live input."""

    FORM = """<!DOCTYPE html>
<html><body><input id="name" value="old value"></body></html>"""

    def test_set_value_replaces_content(self, session):
        session.page.set_content(self.FORM)
        field = session.find_element(Locator.id("name"))

        set_value(session, field, "new")

        assert session.get_attribute(field, "value") == "new"

    def test_enter_text_try_hard_mode(self, session):
        session.page.set_content(self.FORM)
        field = session.find_element(Locator.id("name"))

        assert enter_text_try_hard_mode(session, field, "hello", max_retries=3) is True
        assert session.get_attribute(field, "value") == "hello"


class TestLazyComponent:
    """Locator-bound components follow DOM replacement."""

    def test_re_resolves_replaced_element(self, session):
        session.page.set_content('<div id="banner">first</div>')
        banner = PageComponent.from_locator(session, Locator.id("banner"))

        assert session.get_text(banner.context) == "first"

        session.execute_script(
            "document.getElementById('banner').outerHTML = '<div id=\"banner\">second</div>';"
        )

        assert session.get_text(banner.context) == "second"


class TestPageState:
    """Alerts, readiness and soft lookups."""

    def test_wait_for_page_loaded(self, session):
        session.page.set_content("<p>ready</p>")

        wait_for_page_loaded(session, timeout=5)

    def test_alert_from_script(self, session):
        session.page.set_content(
            """<button id="save" onclick="setTimeout(() => alert('Saved!'), 50)">Save</button>"""
        )

        assert attempt_click(session, session.find_element(Locator.id("save"))) is True
        assert wait_for_alert(session, timeout=5) == "Saved!"

        session.switch_to_alert().accept()

    def test_alert_opened_by_click_handler(self, session):
        session.page.set_content("""<button id="save" onclick="alert('Saved now')">Save</button>""")

        assert attempt_click(session, session.find_element(Locator.id("save"))) is True
        assert wait_for_alert(session, timeout=5) == "Saved now"

        wait_for_alert_and_accept(session, timeout=5)
        with pytest.raises(NoAlertPresentError):
            session.switch_to_alert()

    def test_alert_opened_by_script(self, session):
        session.page.set_content("<p>script</p>")

        assert session.execute_script("alert('from script'); return 42;") == 42
        assert wait_for_alert(session, timeout=5) == "from script"

    def test_confirm_receives_configured_answer(self, session):
        session.page.set_content(
            """<button id="go" onclick="document.body.dataset.answer = confirm('Sure?')">Go</button>"""
        )

        assert patient_click(session, session.find_element(Locator.id("go")), max_tries=1) is True

        assert wait_for_alert(session, timeout=5) == "Sure?"
        assert session.execute_script("return document.body.dataset.answer") == "true"

    def test_soft_lookup_restores_implicit_wait(self, session):
        session.page.set_content("<p>nothing here</p>")
        session.set_implicit_wait(2.0)

        assert find_element(session, "#missing", timeout=0.1) is None
        assert session.get_implicit_wait() == 2.0
