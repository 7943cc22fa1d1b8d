"""Custom exception hierarchy for flitebridge."""

from __future__ import annotations


class BridgeError(Exception):
    """Base exception for all flitebridge errors."""


class BridgeConfigError(BridgeError):
    """Invalid or missing configuration."""


class UnknownVariableError(BridgeError):
    """A read against a name that was never set in the cache."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown variable: {name!r}")


class HostError(BridgeError):
    """The simulator host rejected or failed a capability call."""

    def __init__(self, message: str, *, name: str = "") -> None:
        self.name = name
        super().__init__(message)


class HostFetchError(HostError):
    """A SimVar could not be read from the host (unavailable this frame)."""


class HostWriteError(HostError):
    """The host refused a SimVar write."""


class HostCommandError(HostError):
    """The host refused to execute a K: event."""
