"""Offline host that fabricates plausible SimVar values.

Used by the command line entry point when no simulator binding is
available, and handy for exercising clients against a live HTTP surface.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

from flitebridge.exceptions import HostCommandError, HostFetchError, HostWriteError

_logger = logging.getLogger(__name__)

_COUNTER_STEP = 0.1

# Base values per SimVar; anything unknown reads as the counter alone.
_BASELINES: dict[str, float] = {
    "INDICATED ALTITUDE": 1000.0,
    "AIRSPEED INDICATED": 120.0,
    "HEADING INDICATOR": 90.0,
    "NAV1 ACTIVE FREQUENCY": 110.5,
    "COM1 ACTIVE FREQUENCY": 118.0,
    "TRANSPONDER CODE": 1200.0,
}


@dataclass(slots=True)
class DummyHost:
    """In-memory stand-in for a simulator.

    Values drift with an internal counter that advances once per full
    poll pass (detected when the first registered name is read again).
    Writes are stored and read back verbatim; commands are only logged.
    """

    simulator: str = "dummy"
    connected: bool = False
    counter: float = 0.0
    written: dict[str, float] = field(default_factory=dict)
    commands: list[str] = field(default_factory=list)
    _first_read: str | None = None

    @property
    def name(self) -> str:
        return self.simulator

    @property
    def is_connected(self) -> bool:
        return self.connected

    def connect(self) -> None:
        self.connected = True
        _logger.info("DummyHost connected")

    def disconnect(self) -> None:
        self.connected = False
        _logger.info("DummyHost disconnected")

    def read(self, name: str, unit: str) -> float | None:
        if not self.connected:
            raise HostFetchError("DummyHost is not connected", name=name)
        if self._first_read is None:
            self._first_read = name
        elif name == self._first_read:
            self.counter += _COUNTER_STEP

        if name in self.written:
            return self.written[name]
        if name == "GEAR HANDLE POSITION":
            return 100.0 if self.counter % 20.0 > 10.0 else 0.0
        if unit == "bool":
            return 0.0
        return _BASELINES.get(name, 0.0) + math.sin(self.counter) * 10.0

    def write(self, name: str, unit: str, value: float) -> bool:
        if not self.connected:
            raise HostWriteError("DummyHost is not connected", name=name)
        self.written[name] = value
        _logger.debug("DummyHost write name=%r unit=%r value=%s", name, unit, value)
        return True

    def execute(self, event: str) -> bool:
        if not self.connected:
            raise HostCommandError("DummyHost is not connected", name=event)
        self.commands.append(event)
        _logger.info("DummyHost executing command: %s", event)
        return True
