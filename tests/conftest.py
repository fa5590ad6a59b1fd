"""
Shared fixtures for steadydriver tests.

- fast_config: short timings so waits and retry loops finish quickly
- FrameTreeDriver: in-memory driver whose document is a tree of named frames
"""

from typing import Optional
from unittest.mock import MagicMock

import pytest

from steadydriver.browser.facade import Driver
from steadydriver.config import SyncConfig, set_config
from steadydriver.exceptions import DriverCommunicationError


@pytest.fixture(autouse=True)
def fast_config():
    """Install fast timing defaults for every test."""
    config = SyncConfig(
        wait_timeout=1.0,
        poll_interval=0.01,
        frame_probe_wait=0.01,
        click_max_tries=5,
        click_interval_ms=0,
        text_max_retries=10,
    )
    set_config(config)
    yield config
    set_config(None)


@pytest.fixture
def driver():
    """A Driver spy that records every call."""
    return MagicMock(spec=Driver)


class FakeFrame:
    """A frame element; children are the frames of its document."""

    def __init__(self, name: Optional[str], *children: "FakeFrame"):
        self.name = name
        self.children = list(children)
        self.parent: Optional[FakeFrame] = None
        for child in self.children:
            child.parent = self

    def __repr__(self) -> str:
        return f"<FakeFrame {self.name}>"


class FrameTreeDriver:
    """
    Driver whose current document is one node of a frame tree.

    Only the operations the frame resolver uses are implemented.
    """

    def __init__(self, *frames: FakeFrame, implicit_wait: float = 5.0, broken: Optional[str] = None):
        self.root = FakeFrame("<top>", *frames)
        self.current = self.root
        self.implicit_wait = implicit_wait
        self.implicit_wait_history: list[float] = []
        self.entered: list[FakeFrame] = []
        self.broken = broken

    def get_implicit_wait(self) -> float:
        return self.implicit_wait

    def set_implicit_wait(self, seconds: float) -> None:
        self.implicit_wait = seconds
        self.implicit_wait_history.append(seconds)

    def switch_to_default_content(self) -> None:
        self.current = self.root

    def find_elements(self, locator, context=None) -> list:
        if self.broken is not None and self.current.name == self.broken:
            raise DriverCommunicationError("session lost")
        return list(self.current.children)

    def get_attribute(self, element: FakeFrame, name: str) -> Optional[str]:
        assert name == "name"
        return element.name

    def switch_to_frame(self, frame: FakeFrame) -> None:
        assert frame in self.current.children, f"{frame} is not a child of {self.current}"
        self.current = frame
        self.entered.append(frame)

    def switch_to_parent_frame(self) -> None:
        if self.current.parent is not None:
            self.current = self.current.parent


@pytest.fixture
def frame_tree():
    """Factory for FrameTreeDriver instances."""
    return FrameTreeDriver


@pytest.fixture
def frame():
    """Factory for FakeFrame nodes."""
    return FakeFrame
