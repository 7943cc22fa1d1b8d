"""Bridge configuration for flitebridge."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from flitebridge._constants import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_SIMULATOR,
    DEFAULT_SIMVARS,
    DEFAULT_TICK_INTERVAL,
)
from flitebridge.exceptions import BridgeConfigError


def _env_int(env_key: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise BridgeConfigError(f"{env_key} must be an integer, got {value!r}") from exc


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value.strip())
    except ValueError as exc:
        raise BridgeConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class BridgeConfig:
    """Bridge configuration.

    Parameters
    ----------
    host : str
        Interface the HTTP server binds to.
    port : int
        Listening port for the HTTP server. Defaults to ``8080``.
    simulator : str
        Simulator identifier reported by ``GET /status`` when the host
        does not name itself.
    tick_interval : float
        Seconds between poll ticks when the bridge is driven by the
        built-in asyncio frame driver instead of a simulator callback.
    subscriptions : tuple of (name, unit)
        SimVars registered at startup.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    simulator: str = DEFAULT_SIMULATOR
    tick_interval: float = DEFAULT_TICK_INTERVAL
    subscriptions: tuple[tuple[str, str], ...] = DEFAULT_SIMVARS

    def __post_init__(self) -> None:
        if not 0 < self.port < 65536:
            raise BridgeConfigError(f"port must be between 1 and 65535, got {self.port}")
        if self.tick_interval <= 0:
            raise BridgeConfigError(f"tick_interval must be positive, got {self.tick_interval}")

    @classmethod
    def from_env(cls, **overrides: Any) -> BridgeConfig:
        """Create configuration from environment variables.

        Reads ``FLITEBRIDGE_HOST``, ``FLITEBRIDGE_PORT``,
        ``FLITEBRIDGE_SIMULATOR`` and ``FLITEBRIDGE_TICK_INTERVAL``.
        Explicit keyword arguments override environment values.

        Raises
        ------
        BridgeConfigError
            If a numeric variable cannot be parsed or is out of range.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        host_env = env.get("FLITEBRIDGE_HOST")
        if host_env is not None:
            config_kwargs["host"] = host_env.strip()

        simulator_env = env.get("FLITEBRIDGE_SIMULATOR")
        if simulator_env is not None:
            config_kwargs["simulator"] = simulator_env.strip()

        port_env = env.get("FLITEBRIDGE_PORT")
        if port_env is not None and "port" not in overrides:
            config_kwargs["port"] = _env_int("FLITEBRIDGE_PORT", port_env)

        interval_env = env.get("FLITEBRIDGE_TICK_INTERVAL")
        if interval_env is not None and "tick_interval" not in overrides:
            config_kwargs["tick_interval"] = _env_float("FLITEBRIDGE_TICK_INTERVAL", interval_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
