"""Per-frame poll loop that refreshes the value cache from the host."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from flitebridge.exceptions import HostFetchError
from flitebridge.host import SimHost
from flitebridge.state.cache import ValueCache
from flitebridge.state.registry import SubscriptionRegistry

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class TickResult:
    """Outcome of one poll pass."""

    updated: tuple[str, ...] = ()
    failed: tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failed


class Poller:
    """Fetches every registered subscription from the host on each tick.

    The poller has no timer. Whoever owns the frame cadence (a simulator
    frame callback, or :class:`flitebridge.server.FrameDriver`) calls
    :meth:`tick`.
    """

    def __init__(
        self,
        registry: SubscriptionRegistry,
        cache: ValueCache,
        host: SimHost | None = None,
    ) -> None:
        self._registry = registry
        self._cache = cache
        self._host = host
        self._ticks = 0

    @property
    def ticks(self) -> int:
        """Number of completed ticks, including no-op ticks without a host."""
        return self._ticks

    def tick(self) -> TickResult:
        """Run one poll pass.

        Each subscription is read independently. A read that returns
        ``None`` or raises is skipped for this tick and logged; the rest
        still update. Fetched values are committed to the cache in a
        single step. Never raises.
        """
        self._ticks += 1
        host = self._host
        if host is None:
            return TickResult()

        fetched: dict[str, float] = {}
        failed: list[str] = []
        for subscription in self._registry.list():
            name = subscription.name
            try:
                value = host.read(name, subscription.unit)
            except HostFetchError as exc:
                _logger.debug("Fetch of %r unavailable: %s", name, exc)
                failed.append(name)
                continue
            except Exception:
                _logger.warning("Fetch of %r raised; skipping this tick", name, exc_info=True)
                failed.append(name)
                continue
            if value is None:
                _logger.debug("Fetch of %r unavailable", name)
                failed.append(name)
                continue
            try:
                number = float(value)
            except (TypeError, ValueError):
                _logger.warning("Fetch of %r returned non-numeric %r", name, value)
                failed.append(name)
                continue
            if not math.isfinite(number):
                _logger.warning("Fetch of %r returned non-finite %r", name, value)
                failed.append(name)
                continue
            fetched[name] = number

        self._cache.update(fetched)
        if failed:
            _logger.debug("Tick %d updated=%d failed=%s", self._ticks, len(fetched), failed)
        return TickResult(updated=tuple(fetched), failed=tuple(failed))
