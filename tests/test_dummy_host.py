from __future__ import annotations

import pytest

from flitebridge import SimBridge
from flitebridge.exceptions import HostCommandError, HostFetchError, HostWriteError
from flitebridge.hosts import DummyHost


def test_disconnected_dummy_refuses_calls() -> None:
    host = DummyHost()
    with pytest.raises(HostFetchError):
        host.read("INDICATED ALTITUDE", "feet")
    with pytest.raises(HostWriteError):
        host.write("INDICATED ALTITUDE", "feet", 1.0)
    with pytest.raises(HostCommandError):
        host.execute("GEAR_TOGGLE")


def test_dummy_values_drift_between_passes() -> None:
    bridge = SimBridge(DummyHost())
    bridge.start()

    bridge.tick()
    first = bridge.cache.get("INDICATED ALTITUDE")
    bridge.tick()
    second = bridge.cache.get("INDICATED ALTITUDE")

    assert first is not None and second is not None
    assert first != second


def test_dummy_reads_back_writes_and_records_commands() -> None:
    host = DummyHost()
    bridge = SimBridge(host)
    bridge.start()

    assert bridge.dispatcher.set_value("HEADING INDICATOR", 270.0) is True
    assert bridge.dispatcher.run_command("AP_MASTER") is True
    bridge.tick()

    assert bridge.cache.get("HEADING INDICATOR") == 270.0
    assert host.commands == ["AP_MASTER"]


def test_disconnected_dummy_reports_failures_through_bridge() -> None:
    host = DummyHost()
    bridge = SimBridge(host)
    bridge.start()
    host.disconnect()

    result = bridge.tick()

    assert len(result.failed) == len(bridge.registry)
    assert bridge.dispatcher.set_value("HEADING INDICATOR", 90.0) is False
    assert bridge.dispatcher.run_command("AP_MASTER") is False
    assert bridge.dispatcher.status().connected is False
