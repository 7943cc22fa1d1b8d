from __future__ import annotations

from flitebridge.state.registry import SubscriptionRegistry


def test_register_preserves_insertion_order() -> None:
    registry = SubscriptionRegistry()
    registry.register("INDICATED ALTITUDE", "feet")
    registry.register("AIRSPEED INDICATED", "knots")
    registry.register("HEADING INDICATOR", "degrees")

    assert [s.name for s in registry.list()] == [
        "INDICATED ALTITUDE",
        "AIRSPEED INDICATED",
        "HEADING INDICATOR",
    ]


def test_duplicate_register_keeps_single_entry() -> None:
    registry = SubscriptionRegistry()

    assert registry.register("AUTOPILOT MASTER", "bool") is True
    assert registry.register("AUTOPILOT MASTER", "bool") is False

    assert len(registry) == 1
    assert [s.name for s in registry.list()] == ["AUTOPILOT MASTER"]


def test_duplicate_register_updates_unit_in_place() -> None:
    registry = SubscriptionRegistry()
    registry.register("INDICATED ALTITUDE", "feet")
    registry.register("AIRSPEED INDICATED", "knots")

    registry.register("INDICATED ALTITUDE", "meters")

    subscriptions = registry.list()
    assert [s.name for s in subscriptions] == ["INDICATED ALTITUDE", "AIRSPEED INDICATED"]
    assert subscriptions[0].unit == "meters"


def test_empty_name_is_accepted() -> None:
    registry = SubscriptionRegistry()

    assert registry.register("", "number") is True
    assert "" in registry
    assert registry.get("") is not None


def test_list_returns_a_copy() -> None:
    registry = SubscriptionRegistry()
    registry.register("TRANSPONDER CODE", "number")

    listed = registry.list()
    listed.clear()

    assert len(registry) == 1


def test_get_unknown_returns_none() -> None:
    registry = SubscriptionRegistry()
    assert registry.get("DOES NOT EXIST") is None
    assert "DOES NOT EXIST" not in registry
