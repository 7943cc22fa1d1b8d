#!/usr/bin/env python3
"""Dump the status and SimVar snapshot of a running flitebridge server.

Usage
-----
Start a bridge (``flitebridge`` or ``python -m flitebridge``), then::

    python scripts/dump_simvars.py

Options::

    --url URL            Bridge base URL (default: http://127.0.0.1:8080)
    --json               Output as machine-readable JSON
    --watch SECONDS      Re-fetch every SECONDS until interrupted
    --subscribe NAME:UNIT
                         Subscribe to an extra SimVar before dumping
                         (may be given more than once)
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from typing import Any

import aiohttp

_logger = logging.getLogger("dump_simvars")


async def _fetch(session: aiohttp.ClientSession, url: str) -> Any:
    async with session.get(url) as resp:
        resp.raise_for_status()
        return await resp.json()


async def _subscribe(session: aiohttp.ClientSession, base_url: str, entry: str) -> None:
    name, sep, unit = entry.rpartition(":")
    if not sep or not name:
        raise ValueError(f"--subscribe expects NAME:UNIT, got {entry!r}")
    async with session.post(f"{base_url}/subscribe", json={"simvar": name, "unit": unit}) as resp:
        body = await resp.json()
        _logger.debug("Subscribe %s -> %s %s", entry, resp.status, body)
        if resp.status != 200 or not body.get("success"):
            print(f"warning: subscribe {entry!r} failed: {body}", file=sys.stderr)


def _print_human(status: dict[str, Any], simvars: dict[str, float]) -> None:
    state = "connected" if status.get("connected") else "disconnected"
    print(f"{status.get('simulator', '?')} ({state}) status={status.get('status')}")
    if not simvars:
        print("  (no SimVars cached)")
        return
    width = max(len(name) for name in simvars)
    for name in sorted(simvars):
        print(f"  {name:<{width}}  {simvars[name]}")


async def _dump(session: aiohttp.ClientSession, base_url: str, json_mode: bool) -> None:
    status = await _fetch(session, f"{base_url}/status")
    simvars = await _fetch(session, f"{base_url}/simvars")
    if json_mode:
        print(json.dumps({"status": status, "simvars": simvars}, indent=2, sort_keys=True))
    else:
        _print_human(status, simvars)


async def main() -> int:
    parser = argparse.ArgumentParser(description="Dump a flitebridge server's SimVars")
    parser.add_argument("--url", default="http://127.0.0.1:8080", help="Bridge base URL")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output machine-readable JSON")
    parser.add_argument("--watch", type=float, metavar="SECONDS", help="Re-fetch every SECONDS")
    parser.add_argument("--subscribe", action="append", default=[], metavar="NAME:UNIT")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    base_url = args.url.rstrip("/")

    async with aiohttp.ClientSession() as session:
        try:
            for entry in args.subscribe:
                await _subscribe(session, base_url, entry)
            await _dump(session, base_url, args.json_mode)
            while args.watch:
                await asyncio.sleep(args.watch)
                print()
                await _dump(session, base_url, args.json_mode)
        except (aiohttp.ClientError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    try:
        raise SystemExit(asyncio.run(main()))
    except KeyboardInterrupt:
        pass
