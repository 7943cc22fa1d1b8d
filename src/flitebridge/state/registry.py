"""Insertion-ordered registry of tracked SimVars."""

from __future__ import annotations

import logging
import threading

from flitebridge.models.subscription import Subscription

_logger = logging.getLogger(__name__)


class SubscriptionRegistry:
    """Ordered set of ``(name, unit)`` subscriptions keyed by name.

    Entries are never removed. Registering a name that is already present
    replaces its unit in place and keeps its original position, so the
    registry never holds two entries for one name.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        # dict preserves insertion order; re-assigning an existing key keeps its slot.
        self._subscriptions: dict[str, Subscription] = {}

    def register(self, name: str, unit: str) -> bool:
        """Insert or update a subscription.

        Returns ``True`` when a new entry was created, ``False`` when an
        existing entry was kept (its unit updated if it differed).
        """
        subscription = Subscription(name=name, unit=unit)
        with self._lock:
            existing = self._subscriptions.get(name)
            self._subscriptions[name] = subscription
        if existing is None:
            _logger.debug("Registered subscription name=%r unit=%r", name, unit)
            return True
        if existing.unit != unit:
            _logger.debug("Updated subscription unit name=%r unit=%r->%r", name, existing.unit, unit)
        return False

    def list(self) -> list[Subscription]:
        """Return all subscriptions in insertion order."""
        with self._lock:
            return list(self._subscriptions.values())

    def get(self, name: str) -> Subscription | None:
        with self._lock:
            return self._subscriptions.get(name)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._subscriptions

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)
