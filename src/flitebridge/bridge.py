"""The SimVar bridge: shared state, poll loop and dispatcher in one owner."""

from __future__ import annotations

import enum
import logging
import threading
from collections.abc import Iterable

from flitebridge.config import BridgeConfig
from flitebridge.dispatcher import RequestDispatcher
from flitebridge.exceptions import HostError
from flitebridge.host import SimHost
from flitebridge.poller import Poller, TickResult
from flitebridge.state.cache import ValueCache
from flitebridge.state.registry import SubscriptionRegistry

_logger = logging.getLogger(__name__)


class BridgeState(enum.StrEnum):
    UNINITIALIZED = "uninitialized"
    RUNNING = "running"


class SimBridge:
    """Owns the registry and cache and wires them to a host.

    The poller and the dispatcher receive the same registry, cache and
    host at construction; nothing is shared through module globals, so
    several bridges (e.g. one per test) can coexist in a process.

    Usage::

        bridge = SimBridge(host=my_host)
        bridge.start()
        bridge.tick()                      # once per simulator frame
        bridge.dispatcher.get_snapshot()
    """

    def __init__(
        self,
        host: SimHost | None = None,
        *,
        config: BridgeConfig | None = None,
        registry: SubscriptionRegistry | None = None,
        cache: ValueCache | None = None,
    ) -> None:
        self._config = config or BridgeConfig()
        self._host = host
        self._registry = registry or SubscriptionRegistry()
        self._cache = cache or ValueCache()
        self._poller = Poller(self._registry, self._cache, host)
        self._dispatcher = RequestDispatcher(
            self._registry,
            self._cache,
            host,
            simulator=self._config.simulator,
        )
        self._state = BridgeState.UNINITIALIZED
        self._state_lock = threading.Lock()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def config(self) -> BridgeConfig:
        return self._config

    @property
    def host(self) -> SimHost | None:
        return self._host

    @property
    def registry(self) -> SubscriptionRegistry:
        return self._registry

    @property
    def cache(self) -> ValueCache:
        return self._cache

    @property
    def poller(self) -> Poller:
        return self._poller

    @property
    def dispatcher(self) -> RequestDispatcher:
        return self._dispatcher

    @property
    def state(self) -> BridgeState:
        return self._state

    @property
    def is_running(self) -> bool:
        return self._state is BridgeState.RUNNING

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self, subscriptions: Iterable[tuple[str, str]] | None = None) -> None:
        """Register the startup subscriptions, connect the host and go live.

        Uses ``config.subscriptions`` unless *subscriptions* is given.
        Calling ``start`` on a running bridge does nothing. A host that
        fails to connect is logged and the bridge still starts; reads and
        writes then fail per call until the host comes up.
        """
        with self._state_lock:
            if self._state is BridgeState.RUNNING:
                return
            _logger.info("Initializing bridge")
            initial = self._config.subscriptions if subscriptions is None else tuple(subscriptions)
            for name, unit in initial:
                self._dispatcher.add_subscription(name, unit)

            host = self._host
            if host is None:
                _logger.info("No simulator host attached; running with cached values only")
            elif not host.is_connected:
                try:
                    host.connect()
                except HostError as exc:
                    _logger.warning("Simulator host failed to connect: %s", exc)

            self._state = BridgeState.RUNNING
            _logger.info("Bridge running with %d subscriptions", len(self._registry))

    def tick(self) -> TickResult:
        """Run one poll pass. Intended to be called once per host frame."""
        return self._poller.tick()
