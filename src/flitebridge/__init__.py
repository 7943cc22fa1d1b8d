"""flitebridge - HTTP bridge between a flight simulator's SimVars and outside clients."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("flitebridge")
except PackageNotFoundError:
    __version__ = "0+local"
from flitebridge.bridge import BridgeState, SimBridge
from flitebridge.config import BridgeConfig
from flitebridge.dispatcher import RequestDispatcher
from flitebridge.exceptions import (
    BridgeConfigError,
    BridgeError,
    HostCommandError,
    HostError,
    HostFetchError,
    HostWriteError,
    UnknownVariableError,
)
from flitebridge.host import SimHost
from flitebridge.models import Subscription
from flitebridge.poller import Poller, TickResult
from flitebridge.state.cache import ValueCache
from flitebridge.state.registry import SubscriptionRegistry

__all__ = [
    "__version__",
    "BridgeConfig",
    "BridgeConfigError",
    "BridgeError",
    "BridgeState",
    "HostCommandError",
    "HostError",
    "HostFetchError",
    "HostWriteError",
    "Poller",
    "RequestDispatcher",
    "SimBridge",
    "SimHost",
    "Subscription",
    "SubscriptionRegistry",
    "TickResult",
    "UnknownVariableError",
    "ValueCache",
]
