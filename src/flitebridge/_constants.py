"""Internal constants shared across the library."""

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_SIMULATOR = "msfs"
DEFAULT_TICK_INTERVAL = 1.0 / 30.0

#: Unit used when writing a name that has no registered subscription.
RAW_NUMERIC_UNIT = "number"

#: Value seeded into the cache when a subscription is first registered.
INITIAL_VALUE = 0.0

# ------------------------------------------------------------------
# Default SimVar subscriptions, tracked from startup
# ------------------------------------------------------------------

DEFAULT_SIMVARS: tuple[tuple[str, str], ...] = (
    ("INDICATED ALTITUDE", "feet"),
    ("AIRSPEED INDICATED", "knots"),
    ("HEADING INDICATOR", "degrees"),
    ("GEAR HANDLE POSITION", "percent"),
    ("AUTOPILOT MASTER", "bool"),
    ("FLAPS HANDLE PERCENT", "percent"),
    ("NAV1 ACTIVE FREQUENCY", "mhz"),
    ("COM1 ACTIVE FREQUENCY", "mhz"),
    ("TRANSPONDER CODE", "number"),
)
