"""
Frame Tools

Locates a frame by name anywhere in the (possibly nested) frame tree and
switches the driver into it, plus window switching by index.

The search is a recursive depth-first, pre-order walk. The driver's frame
stack is the only record of the current position: the walk switches into
a child to search it and back to the parent frame when that subtree misses.
"""

from typing import Optional

from ..browser.facade import Driver
from ..browser.locators import Locator
from ..config import get_config, get_logger
from .timeouts import implicit_wait

logger = get_logger(__name__)

# Frame elements enumerated at each level of the search
FRAME_LOCATOR = Locator.tag_name("frame")


def switch_to_frame(
    driver: Driver,
    frame_name: str,
    frame_locator: Locator = FRAME_LOCATOR,
    probe_wait: Optional[float] = None,
) -> bool:
    """
    Search the frame tree for a frame and switch into it.

    Starts from the top-level document. The first frame whose name attribute
    equals frame_name, in document order depth-first, wins.

    Frames are entered by element handle, so frames without a name attribute
    are still searched (they can never match themselves).

    Args:
        driver: Driver session
        frame_name: Value of the target frame's name attribute
        frame_locator: Locator enumerating frame elements at each level
            (e.g. Locator.css("frame, iframe") to include iframes)
        probe_wait: Implicit wait in seconds while enumerating each level
            (default: SyncConfig.frame_probe_wait)

    Returns:
        True with the driver inside the frame, or False with the driver at
        the top-level document
    """
    if probe_wait is None:
        probe_wait = get_config().frame_probe_wait

    driver.switch_to_default_content()
    found = _search_for_frame(driver, frame_name, frame_locator, probe_wait, depth=0)

    if not found:
        logger.debug("Frame not found -> %s", frame_name)
    return found


def _search_for_frame(
    driver: Driver,
    frame_name: str,
    frame_locator: Locator,
    probe_wait: float,
    depth: int,
) -> bool:
    # Each level restores the implicit wait it found, whichever way it exits
    with implicit_wait(driver, probe_wait):
        frames = driver.find_elements(frame_locator)

        for frame in frames:
            name = driver.get_attribute(frame, "name")
            if name == frame_name:
                driver.switch_to_frame(frame)
                logger.debug("Switched to frame -> %s (depth %d)", frame_name, depth)
                return True

            driver.switch_to_frame(frame)
            if _search_for_frame(driver, frame_name, frame_locator, probe_wait, depth + 1):
                return True
            driver.switch_to_parent_frame()

        return False


def switch_to_window(driver: Driver, window_index: int) -> None:
    """
    Switch to the window at a position in the driver's window handle list.

    Args:
        driver: Driver session
        window_index: Index into driver.window_handles

    Raises:
        IndexError: No window at that index
    """
    driver.switch_to_window(driver.window_handles[window_index])
