"""
Data models for resilient interaction results.

This module defines Pydantic models that keep failure kinds apart where a
plain bool or None would blur them:
- InteractionStatus: Tagged outcome kind (ok / not_found / obstructed / failed)
- ClickOutcome: Result of a single click attempt
- LookupResult: Result of a soft element lookup
- InteractionAttempt: Record of a single attempt inside a retry loop
- AttemptLog: Attempt history of one retrying operation
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class InteractionStatus(str, Enum):
    """Outcome kind of an interaction or lookup."""

    OK = "ok"
    NOT_FOUND = "not_found"
    OBSTRUCTED = "obstructed"
    FAILED = "failed"


class ClickOutcome(BaseModel):
    """Result of one click attempt.

    Validation Rules:
    - status is OK or OBSTRUCTED (other failures propagate as exceptions)
    - error is None when status is OK
    """

    status: InteractionStatus
    """What happened."""

    error: Optional[str] = None
    """Driver message for an obstructed click."""

    @property
    def succeeded(self) -> bool:
        return self.status == InteractionStatus.OK


class LookupResult(BaseModel):
    """Result of a soft element lookup.

    element is the backend's element handle (stored as Any), set only when
    status is OK.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    status: InteractionStatus
    """OK, NOT_FOUND, or FAILED for any other driver failure."""

    element: Optional[Any] = None
    """First matching element."""

    selector: str
    """CSS selector that was looked up."""

    error: Optional[str] = None
    """Driver message when status is FAILED."""

    @property
    def found(self) -> bool:
        return self.status == InteractionStatus.OK


class InteractionAttempt(BaseModel):
    """Record of a single attempt.

    Validation Rules:
    - number starts at 1
    - duration_ms must be >= 0
    """

    number: int = Field(ge=1)
    """1-based attempt number."""

    status: InteractionStatus
    """Outcome of this attempt."""

    duration_ms: int = Field(ge=0)
    """Time taken for this attempt in milliseconds."""

    error: Optional[str] = None
    """Error message if failed."""


class AttemptLog(BaseModel):
    """Attempt history of one retrying operation (patient_click, text entry)."""

    action: str
    """Operation name, e.g. "patient_click"."""

    max_attempts: int = Field(ge=0)
    """Attempt budget."""

    attempts: list[InteractionAttempt] = Field(default_factory=list)
    """History of all attempts."""

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def succeeded(self) -> bool:
        """Check if any attempt has succeeded."""
        return any(attempt.status == InteractionStatus.OK for attempt in self.attempts)

    @property
    def is_exhausted(self) -> bool:
        """Check if the attempt budget is used up."""
        return len(self.attempts) >= self.max_attempts

    def add_attempt(
        self,
        status: InteractionStatus,
        duration_ms: int,
        error: Optional[str] = None,
    ) -> InteractionAttempt:
        """Record the next attempt.

        Args:
            status: Outcome of the attempt
            duration_ms: Time taken in milliseconds
            error: Error message if failed

        Returns:
            The recorded attempt
        """
        attempt = InteractionAttempt(
            number=len(self.attempts) + 1,
            status=status,
            duration_ms=max(duration_ms, 0),
            error=error,
        )
        self.attempts.append(attempt)
        return attempt

    def to_dict(self) -> dict:
        """Convert the log to a plain dictionary for reporting."""
        return {
            "action": self.action,
            "max_attempts": self.max_attempts,
            "attempts": [attempt.model_dump(mode="json") for attempt in self.attempts],
            "exhausted": self.is_exhausted,
            "succeeded": self.succeeded,
        }
