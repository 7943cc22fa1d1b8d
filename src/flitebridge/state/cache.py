"""Thread-safe cache of last-known SimVar values.

The poll loop writes here once per frame from whatever thread the host
uses for its frame callback, while request handlers read and write from
the server's event loop. One lock guards the whole table, so a snapshot
is always taken between two complete writes: a tick applied through
:meth:`ValueCache.update` is observed entirely or not at all.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType

from flitebridge._constants import INITIAL_VALUE
from flitebridge.exceptions import UnknownVariableError

_logger = logging.getLogger(__name__)


class ValueCache:
    """Mapping of SimVar name to last fetched or last written value."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._values: dict[str, float] = {}

    def set(self, name: str, value: float) -> None:
        """Overwrite (or insert) the value for *name*. No range checks."""
        with self._lock:
            self._values[name] = value

    def update(self, values: Mapping[str, float]) -> None:
        """Apply several values as one atomic step."""
        if not values:
            return
        with self._lock:
            self._values.update(values)

    def seed(self, name: str, value: float = INITIAL_VALUE) -> bool:
        """Insert *value* only if *name* has no entry yet.

        Returns ``True`` when an entry was created.
        """
        with self._lock:
            if name in self._values:
                return False
            self._values[name] = value
            return True

    def get(self, name: str) -> float | None:
        """Return the cached value, or ``None`` if *name* was never set."""
        with self._lock:
            return self._values.get(name)

    def require(self, name: str) -> float:
        """Return the cached value or raise :class:`UnknownVariableError`."""
        value = self.get(name)
        if value is None:
            raise UnknownVariableError(name)
        return value

    def snapshot(self) -> Mapping[str, float]:
        """Return a read-only copy of the whole cache taken at one instant."""
        with self._lock:
            copied = dict(self._values)
        return MappingProxyType(copied)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._values

    def __len__(self) -> int:
        with self._lock:
            return len(self._values)
