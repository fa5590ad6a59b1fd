"""
Page Object Base Types
"""

from .component import PageComponent
from .web_page import WebPage

__all__ = [
    "PageComponent",
    "WebPage",
]
