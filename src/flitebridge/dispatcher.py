"""Request dispatcher: the bridge operations exposed to the HTTP layer.

Every operation is synchronous and maps one inbound request onto the
registry, the cache and the host. Host failures of any kind are reported as
``False`` rather than raised, so a disconnected simulator never takes the request
path down.

Writes are optimistic: :meth:`RequestDispatcher.set_value` updates the
cache before forwarding to the host and does not roll back if the host
refuses the write. The next poll tick overwrites the value for
subscribed names; unsubscribed names keep the written value.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from flitebridge._constants import INITIAL_VALUE, RAW_NUMERIC_UNIT
from flitebridge.exceptions import HostError
from flitebridge.host import SimHost
from flitebridge.models.responses import StatusResponse
from flitebridge.state.cache import ValueCache
from flitebridge.state.registry import SubscriptionRegistry

_logger = logging.getLogger(__name__)


class RequestDispatcher:
    """Translate inbound requests into registry, cache and host operations."""

    def __init__(
        self,
        registry: SubscriptionRegistry,
        cache: ValueCache,
        host: SimHost | None = None,
        *,
        simulator: str = "",
    ) -> None:
        self._registry = registry
        self._cache = cache
        self._host = host
        self._simulator = simulator

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def status(self) -> StatusResponse:
        """Report liveness and whether the host is connected.

        The simulator name comes from the host when one is attached, and
        from configuration otherwise.
        """
        host = self._host
        if host is None:
            return StatusResponse(simulator=self._simulator, connected=False)
        return StatusResponse(simulator=host.name or self._simulator, connected=bool(host.is_connected))

    def get_snapshot(self) -> Mapping[str, float]:
        return self._cache.snapshot()

    def get_value(self, name: str) -> float:
        """Return one cached value.

        Raises :class:`flitebridge.exceptions.UnknownVariableError` if the
        name was never polled, seeded or written.
        """
        return self._cache.require(name)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_value(self, name: str, value: float) -> bool:
        """Write *value* to the cache and forward it to the host.

        Subscribed names are written with their registered unit, anything
        else with the raw numeric unit. A name outside the registry gets a
        cache entry but is not registered, so polling will not refresh it.
        """
        self._cache.set(name, value)

        subscription = self._registry.get(name)
        unit = subscription.unit if subscription is not None else RAW_NUMERIC_UNIT
        _logger.debug("Setting %r = %s (unit=%r)", name, value, unit)

        host = self._host
        if host is None:
            _logger.debug("No host attached; write of %r kept in cache only", name)
            return False
        try:
            accepted = bool(host.write(name, unit, value))
        except HostError as exc:
            _logger.warning("Host write of %r failed: %s", name, exc)
            return False
        except Exception:
            _logger.warning("Host write of %r raised", name, exc_info=True)
            return False
        if not accepted:
            _logger.warning("Host rejected write of %r = %s", name, value)
        return accepted

    def run_command(self, event: str) -> bool:
        """Forward a K: event to the host."""
        _logger.debug("Executing: %s", event)
        host = self._host
        if host is None:
            _logger.debug("No host attached; command %r dropped", event)
            return False
        try:
            accepted = bool(host.execute(event))
        except HostError as exc:
            _logger.warning("Host command %r failed: %s", event, exc)
            return False
        except Exception:
            _logger.warning("Host command %r raised", event, exc_info=True)
            return False
        if not accepted:
            _logger.warning("Host rejected command %r", event)
        return accepted

    def add_subscription(self, name: str, unit: str) -> bool:
        """Start tracking *name*; seeds its cache entry at 0 if absent.

        Adding an already tracked name succeeds and leaves a single entry.
        """
        created = self._registry.register(name, unit)
        self._cache.seed(name, INITIAL_VALUE)
        if created:
            _logger.info("Subscribed to %r (%s)", name, unit)
        return True
