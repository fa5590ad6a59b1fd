"""
Synchronization Tools

- Wait: polling wait, alerts, page load, hover
- Frames: recursive frame search, window switching
- Interactions: resilient click and text entry, soft lookups
- Timeouts: scoped implicit-wait override
"""

from .models import (
    AttemptLog,
    ClickOutcome,
    InteractionAttempt,
    InteractionStatus,
    LookupResult,
)
from .timeouts import implicit_wait, set_implicit_wait
from .wait import (
    Wait,
    waiter,
    is_alert_present,
    wait_for_alert,
    wait_for_alert_and_accept,
    wait_for_page_loaded,
    hover_over_element,
)
from .frames import FRAME_LOCATOR, switch_to_frame, switch_to_window
from .interactions import (
    attempt_click,
    click_outcome,
    patient_click,
    enter_text_try_hard_mode,
    clear_with_backspace,
    set_value,
    get_value,
    find_elements_by_css,
    lookup,
    find_element,
)

__all__ = [
    # Models
    "AttemptLog",
    "ClickOutcome",
    "InteractionAttempt",
    "InteractionStatus",
    "LookupResult",
    # Timeouts
    "implicit_wait",
    "set_implicit_wait",
    # Wait
    "Wait",
    "waiter",
    "is_alert_present",
    "wait_for_alert",
    "wait_for_alert_and_accept",
    "wait_for_page_loaded",
    "hover_over_element",
    # Frames
    "FRAME_LOCATOR",
    "switch_to_frame",
    "switch_to_window",
    # Interactions
    "attempt_click",
    "click_outcome",
    "patient_click",
    "enter_text_try_hard_mode",
    "clear_with_backspace",
    "set_value",
    "get_value",
    "find_elements_by_css",
    "lookup",
    "find_element",
]
