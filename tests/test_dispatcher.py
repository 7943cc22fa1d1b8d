from __future__ import annotations

import pytest

from flitebridge.dispatcher import RequestDispatcher
from flitebridge.exceptions import HostCommandError, HostWriteError, UnknownVariableError
from flitebridge.state.cache import ValueCache
from flitebridge.state.registry import SubscriptionRegistry


class _FakeHost:
    def __init__(self, *, accept: bool = True, raise_errors: bool = False, connected: bool = True) -> None:
        self.accept = accept
        self.raise_errors = raise_errors
        self.connected = connected
        self.writes: list[tuple[str, str, float]] = []
        self.commands: list[str] = []

    @property
    def name(self) -> str:
        return "fake-sim"

    @property
    def is_connected(self) -> bool:
        return self.connected

    def write(self, name: str, unit: str, value: float) -> bool:
        self.writes.append((name, unit, value))
        if self.raise_errors:
            raise HostWriteError("refused", name=name)
        return self.accept

    def execute(self, event: str) -> bool:
        self.commands.append(event)
        if self.raise_errors:
            raise HostCommandError("refused", name=event)
        return self.accept


def _dispatcher(host: _FakeHost | None = None) -> tuple[RequestDispatcher, SubscriptionRegistry, ValueCache]:
    registry = SubscriptionRegistry()
    cache = ValueCache()
    dispatcher = RequestDispatcher(registry, cache, host, simulator="msfs")  # type: ignore[arg-type]
    return dispatcher, registry, cache


def test_status_reports_host_connection() -> None:
    dispatcher, _registry, _cache = _dispatcher(_FakeHost(connected=True))
    status = dispatcher.status()
    assert status.status == "ok"
    assert status.simulator == "fake-sim"
    assert status.connected is True


def test_status_without_host_uses_configured_simulator() -> None:
    dispatcher, _registry, _cache = _dispatcher(None)
    status = dispatcher.status()
    assert status.model_dump() == {"status": "ok", "simulator": "msfs", "connected": False}


def test_set_value_writes_through_with_registered_unit() -> None:
    host = _FakeHost()
    dispatcher, registry, cache = _dispatcher(host)
    registry.register("HEADING INDICATOR", "degrees")

    assert dispatcher.set_value("HEADING INDICATOR", 270.0) is True

    assert cache.get("HEADING INDICATOR") == 270.0
    assert host.writes == [("HEADING INDICATOR", "degrees", 270.0)]


def test_set_value_on_unsubscribed_name_uses_raw_unit_and_does_not_register() -> None:
    host = _FakeHost()
    dispatcher, registry, cache = _dispatcher(host)

    assert dispatcher.set_value("L:MY_LVAR", 1.0) is True

    assert host.writes == [("L:MY_LVAR", "number", 1.0)]
    assert cache.get("L:MY_LVAR") == 1.0
    assert "L:MY_LVAR" not in registry


def test_set_value_rejected_by_host_keeps_cached_value() -> None:
    host = _FakeHost(accept=False)
    dispatcher, _registry, cache = _dispatcher(host)

    assert dispatcher.set_value("TRANSPONDER CODE", 7700.0) is False
    assert cache.get("TRANSPONDER CODE") == 7700.0


def test_set_value_host_error_reports_failure() -> None:
    host = _FakeHost(raise_errors=True)
    dispatcher, _registry, cache = _dispatcher(host)

    assert dispatcher.set_value("TRANSPONDER CODE", 7700.0) is False
    assert cache.get("TRANSPONDER CODE") == 7700.0


def test_set_value_without_host_updates_cache_only() -> None:
    dispatcher, _registry, cache = _dispatcher(None)

    assert dispatcher.set_value("HEADING INDICATOR", 180.0) is False
    assert cache.get("HEADING INDICATOR") == 180.0


def test_set_value_accepts_empty_name() -> None:
    host = _FakeHost()
    dispatcher, _registry, cache = _dispatcher(host)

    assert dispatcher.set_value("", 1.0) is True
    assert cache.get("") == 1.0


def test_run_command_forwards_event() -> None:
    host = _FakeHost()
    dispatcher, _registry, _cache = _dispatcher(host)

    assert dispatcher.run_command("GEAR_TOGGLE") is True
    assert host.commands == ["GEAR_TOGGLE"]


def test_run_command_failures_report_false() -> None:
    assert _dispatcher(_FakeHost(accept=False))[0].run_command("AP_MASTER") is False
    assert _dispatcher(_FakeHost(raise_errors=True))[0].run_command("AP_MASTER") is False
    assert _dispatcher(None)[0].run_command("AP_MASTER") is False


def test_add_subscription_is_idempotent_and_seeds_zero() -> None:
    dispatcher, registry, cache = _dispatcher(_FakeHost())

    assert dispatcher.add_subscription("FUEL TOTAL QUANTITY", "gallons") is True
    assert dispatcher.add_subscription("FUEL TOTAL QUANTITY", "gallons") is True

    assert len(registry) == 1
    assert dict(dispatcher.get_snapshot()) == {"FUEL TOTAL QUANTITY": 0.0}
    assert cache.get("FUEL TOTAL QUANTITY") == 0.0


def test_add_subscription_does_not_reset_existing_value() -> None:
    dispatcher, _registry, cache = _dispatcher(_FakeHost())
    dispatcher.set_value("FUEL TOTAL QUANTITY", 55.0)

    dispatcher.add_subscription("FUEL TOTAL QUANTITY", "gallons")

    assert cache.get("FUEL TOTAL QUANTITY") == 55.0


def test_get_value_unknown_vs_registered() -> None:
    dispatcher, _registry, _cache = _dispatcher(None)
    dispatcher.add_subscription("INDICATED ALTITUDE", "feet")

    assert dispatcher.get_value("INDICATED ALTITUDE") == 0.0
    with pytest.raises(UnknownVariableError):
        dispatcher.get_value("DOES NOT EXIST")


class _CrashingHost:
    name = "crashing"
    is_connected = True

    def write(self, name: str, unit: str, value: float) -> bool:
        raise RuntimeError("sim gone")

    def execute(self, event: str) -> bool:
        raise OSError("sim gone")


def test_unexpected_host_exceptions_report_failure() -> None:
    registry = SubscriptionRegistry()
    cache = ValueCache()
    dispatcher = RequestDispatcher(registry, cache, _CrashingHost())  # type: ignore[arg-type]

    assert dispatcher.set_value("HEADING INDICATOR", 270.0) is False
    assert dispatcher.run_command("GEAR_TOGGLE") is False
    # Optimistic cache write survives the crash.
    assert cache.get("HEADING INDICATOR") == 270.0
