"""Simulator host capability interface.

The bridge never talks to a simulator directly. Everything it needs from
the simulator goes through an object satisfying :class:`SimHost`, which is
injected at construction. Production code passes a binding into the
simulator's own variable table; tests pass a fake.
"""

from __future__ import annotations

from typing import Protocol


class SimHost(Protocol):
    """Structural host interface used by the poller and the dispatcher.

    All calls are expected to be fast, in-process calls. The core applies
    no timeouts of its own.

    ``read`` returns ``None`` when the variable is unavailable this frame
    and may also raise :class:`flitebridge.exceptions.HostFetchError`.
    ``write`` and ``execute`` return ``False`` (or raise a
    :class:`flitebridge.exceptions.HostError` subclass) when the simulator
    refuses the call.
    """

    @property
    def name(self) -> str:
        ...

    @property
    def is_connected(self) -> bool:
        ...

    def connect(self) -> None:
        ...

    def disconnect(self) -> None:
        ...

    def read(self, name: str, unit: str) -> float | None:
        ...

    def write(self, name: str, unit: str, value: float) -> bool:
        ...

    def execute(self, event: str) -> bool:
        ...
