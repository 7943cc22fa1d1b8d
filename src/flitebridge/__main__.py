"""Command line entry point: serve a bridge over HTTP.

Without a simulator binding the bridge runs against
:class:`flitebridge.hosts.DummyHost`, which fabricates drifting values.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from typing import Any

from aiohttp import web

from flitebridge import __version__
from flitebridge.bridge import SimBridge
from flitebridge.config import BridgeConfig
from flitebridge.exceptions import BridgeConfigError
from flitebridge.hosts.dummy import DummyHost
from flitebridge.server import FrameDriver, create_app

_logger = logging.getLogger("flitebridge")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flitebridge",
        description="Expose simulator SimVars over HTTP.",
    )
    parser.add_argument("--host", help="Interface to bind (env FLITEBRIDGE_HOST, default 127.0.0.1)")
    parser.add_argument("--port", type=int, help="Port to listen on (env FLITEBRIDGE_PORT, default 8080)")
    parser.add_argument("--simulator", help="Simulator name reported by /status (env FLITEBRIDGE_SIMULATOR)")
    parser.add_argument(
        "--tick-interval",
        type=float,
        help="Seconds between poll ticks (env FLITEBRIDGE_TICK_INTERVAL, default 1/30)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    overrides: dict[str, Any] = {}
    if args.host is not None:
        overrides["host"] = args.host
    if args.port is not None:
        overrides["port"] = args.port
    if args.simulator is not None:
        overrides["simulator"] = args.simulator
    if args.tick_interval is not None:
        overrides["tick_interval"] = args.tick_interval

    try:
        config = BridgeConfig.from_env(**overrides)
    except BridgeConfigError as exc:
        print(f"flitebridge: {exc}", file=sys.stderr)
        return 2

    bridge = SimBridge(DummyHost(simulator=config.simulator), config=config)
    app = create_app(bridge, driver=FrameDriver(bridge, config.tick_interval))
    _logger.info("Serving SimVars on http://%s:%d", config.host, config.port)
    web.run_app(app, host=config.host, port=config.port, print=None)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
