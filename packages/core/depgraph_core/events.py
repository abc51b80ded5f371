"""Outcome records reported by the installation tracker."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventKind(str, Enum):
    """What happened to a component during an install or remove call."""

    INSTALLED = "installed"
    ALREADY_INSTALLED = "already_installed"
    REFERENCE_ADDED = "reference_added"  # Cascade found it installed; count += 1
    STILL_NEEDED = "still_needed"  # Remove found dependents; count -= 1
    REMOVED = "removed"
    NOT_INSTALLED = "not_installed"


@dataclass(frozen=True)
class Event:
    """
    A single informational outcome.

    Attributes:
        kind: Outcome type
        component: Component the outcome applies to
        is_dependency: True when produced by a cascade rather than a direct request
        reference_count: Count after the event, None when the component is not installed
    """

    kind: EventKind
    component: str
    is_dependency: bool = False
    reference_count: Optional[int] = None

    @property
    def message(self) -> Optional[str]:
        """Human-readable status line, or None for silent bookkeeping events."""
        if self.kind == EventKind.INSTALLED:
            return f"Installing {self.component}"
        if self.kind == EventKind.ALREADY_INSTALLED:
            return f"{self.component} is already installed"
        if self.kind == EventKind.STILL_NEEDED:
            return f"{self.component} is still needed"
        if self.kind == EventKind.REMOVED:
            return f"Removing {self.component}"
        if self.kind == EventKind.NOT_INSTALLED:
            return f"{self.component} is not installed"
        return None
