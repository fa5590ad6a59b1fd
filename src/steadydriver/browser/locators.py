"""
Locator value type.

A Locator pairs a selection strategy with a selector string. It is immutable
and compares by value, so page components can keep one around and re-run the
lookup whenever they need a fresh element handle.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class By(str, Enum):
    """Element selection strategies (WebDriver wire names)."""

    CSS_SELECTOR = "css selector"
    TAG_NAME = "tag name"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    ID = "id"
    NAME = "name"
    CLASS_NAME = "class name"


class Locator(BaseModel):
    """Selection strategy + selector string.

    Validation Rules:
    - value must be non-empty
    - instances are frozen (hashable, equal iff by and value match)
    """

    model_config = ConfigDict(frozen=True)

    by: By
    """Strategy used to interpret value."""

    value: str = Field(min_length=1)
    """Selector string."""

    def __init__(self, by: By, value: str, **data):
        super().__init__(by=by, value=value, **data)

    def __str__(self) -> str:
        return f"{self.by.value}={self.value}"

    @classmethod
    def css(cls, selector: str) -> "Locator":
        return cls(By.CSS_SELECTOR, selector)

    @classmethod
    def tag_name(cls, tag: str) -> "Locator":
        return cls(By.TAG_NAME, tag)

    @classmethod
    def xpath(cls, expression: str) -> "Locator":
        return cls(By.XPATH, expression)

    @classmethod
    def id(cls, element_id: str) -> "Locator":
        return cls(By.ID, element_id)

    @classmethod
    def name(cls, name: str) -> "Locator":
        return cls(By.NAME, name)

    @classmethod
    def class_name(cls, class_name: str) -> "Locator":
        return cls(By.CLASS_NAME, class_name)

    @classmethod
    def link_text(cls, text: str) -> "Locator":
        return cls(By.LINK_TEXT, text)
