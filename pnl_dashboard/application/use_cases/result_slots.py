"""Result slots holding the latest load of each dashboard section.

Each section of a screen (periods, P&L, companies, income) owns one
``ResultSlot``. A load starts with ``begin`` which hands out a ticket; only
the ticket of the most recent ``begin`` may store a value or an error, so a
slow response for an earlier selection never replaces the current one.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Sized
from dataclasses import dataclass, field
from enum import Enum
import threading
from typing import Any

from pnl_dashboard.application.ports.reporting_api import ReportingApiError
from pnl_dashboard.infrastructure.logging.logger import get_app_logger


class LoadStatus(str, Enum):
    """Lifecycle of a slot."""

    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    EMPTY = "empty"
    ERROR = "error"


@dataclass(frozen=True)
class SlotTicket:
    """Handle returned by ``ResultSlot.begin``."""

    generation: int
    key: Hashable


@dataclass
class ResultSlot:
    """Latest-wins holder for one asynchronously loaded value.

    Attributes:
        name: Section name used in logs.
        status: Current load status.
        value: Last stored value.
        error: Single error message of the last failed load.
        key: Selection key of the load currently owning the slot.
    """

    name: str
    status: LoadStatus = LoadStatus.IDLE
    value: Any = None
    error: str | None = None
    key: Hashable | None = None
    _generation: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock,
        repr=False,
        compare=False,
    )

    def begin(self, key: Hashable = None) -> SlotTicket:
        """Start a load for ``key`` and supersede any load in flight."""
        with self._lock:
            self._generation += 1
            self.key = key
            self.status = LoadStatus.LOADING
            self.error = None
            return SlotTicket(generation=self._generation, key=key)

    def is_current(self, ticket: SlotTicket) -> bool:
        """Return True when ``ticket`` belongs to the latest load."""
        with self._lock:
            return ticket.generation == self._generation

    def holds(self, key: Hashable) -> bool:
        """Return True when a successful load for ``key`` is stored."""
        with self._lock:
            return self.key == key and self.status in (
                LoadStatus.SUCCESS,
                LoadStatus.EMPTY,
            )

    def resolve(self, ticket: SlotTicket, value: Any) -> bool:
        """Store ``value`` if the ticket is still current.

        Empty sized values mark the slot as ``EMPTY`` rather than
        ``SUCCESS``.

        Returns:
            bool: True when the value was stored.
        """
        with self._lock:
            if ticket.generation != self._generation:
                return False
            self.value = value
            self.error = None
            if isinstance(value, Sized) and len(value) == 0:
                self.status = LoadStatus.EMPTY
            else:
                self.status = LoadStatus.SUCCESS
            return True

    def fail(self, ticket: SlotTicket, message: str) -> bool:
        """Record a failure if the ticket is still current.

        Returns:
            bool: True when the failure was recorded.
        """
        with self._lock:
            if ticket.generation != self._generation:
                return False
            self.status = LoadStatus.ERROR
            self.error = message
            return True

    def reset(self) -> None:
        """Clear the slot and invalidate loads in flight."""
        with self._lock:
            self._generation += 1
            self.status = LoadStatus.IDLE
            self.value = None
            self.error = None
            self.key = None


def load_into_slot(
    slot: ResultSlot,
    key: Hashable,
    loader: Callable[[], Any],
    error_message: str,
    logger=None,
) -> bool:
    """Run ``loader`` and store its outcome in ``slot``.

    API failures become the slot's single error message. Any other
    exception also marks the slot as failed, then propagates.

    Args:
        slot: Slot receiving the result.
        key: Selection key of this load.
        loader: Zero-argument callable performing the fetch.
        error_message: Message shown when the API fails.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        bool: True when the outcome was stored (the load was still current).
    """
    resolved_logger = logger or get_app_logger()
    ticket = slot.begin(key)
    try:
        value = loader()
    except ReportingApiError as exc:
        resolved_logger.error(f"{error_message}: {exc}")
        return slot.fail(ticket, error_message)
    except Exception:
        resolved_logger.error(f"{error_message}: unexpected loader failure")
        slot.fail(ticket, error_message)
        raise
    stored = slot.resolve(ticket, value)
    if not stored:
        resolved_logger.info(
            f"Discarded stale {slot.name} result for key={key!r}"
        )
    return stored


__all__ = [
    "LoadStatus",
    "ResultSlot",
    "SlotTicket",
    "load_into_slot",
]
