"""aiohttp HTTP surface and asyncio frame driver for a :class:`SimBridge`.

Routes::

    GET  /status           {"status": "ok", "simulator": str, "connected": bool}
    GET  /simvars          {name: value, ...}
    GET  /simvars/{name}   {"name": str, "value": float}   (404 if unknown)
    POST /simvar           {"name": str, "value": number}  -> {"success": bool}
    POST /command          {"event": str}                  -> {"success": bool}
    POST /subscribe        {"simvar": str, "unit": str}    -> {"success": bool}

Bodies are validated here; the dispatcher only ever sees well-formed
requests.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from typing import Any, TypeVar

from aiohttp import web
from pydantic import BaseModel, ValidationError

from flitebridge.bridge import SimBridge
from flitebridge.exceptions import UnknownVariableError
from flitebridge.models.requests import CommandRequest, SetSimVarRequest, SubscribeRequest
from flitebridge.models.responses import ErrorResponse, SimVarValue, SuccessResponse

_logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class FrameDriver:
    """Calls :meth:`SimBridge.tick` on a fixed interval from an asyncio task.

    Stands in for a simulator frame callback when the bridge runs as a
    standalone process. The bridge core itself has no timer.
    """

    def __init__(self, bridge: SimBridge, interval: float) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._bridge = bridge
        self._interval = interval
        self._task: asyncio.Task[None] | None = None

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.is_running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run(), name="flitebridge-frames")
        _logger.debug("Frame driver started interval=%.4fs", self._interval)

    async def stop(self) -> None:
        task = self._task
        self._task = None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        _logger.debug("Frame driver stopped")

    async def _run(self) -> None:
        while True:
            self._bridge.tick()
            await asyncio.sleep(self._interval)


BRIDGE_KEY: web.AppKey[SimBridge] = web.AppKey("bridge", SimBridge)
DRIVER_KEY: web.AppKey[FrameDriver] = web.AppKey("frame_driver", FrameDriver)


# ----------------------------------------------------------------------
# Request helpers
# ----------------------------------------------------------------------


def _json(model: BaseModel, *, status: int = 200) -> web.Response:
    return web.json_response(model.model_dump(), status=status)


def _bad_request(message: str) -> web.Response:
    return _json(ErrorResponse(error=message), status=400)


async def _parse_body(request: web.Request, model: type[M]) -> M | web.Response:
    """Validate a JSON body against *model*, or build the 400 response."""
    try:
        payload: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        _logger.debug("Rejected %s %s: body is not JSON", request.method, request.path)
        return _bad_request("request body must be a JSON object")
    if not isinstance(payload, dict):
        return _bad_request("request body must be a JSON object")
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        _logger.debug("Rejected %s %s: %s", request.method, request.path, exc)
        fields = ", ".join(".".join(str(p) for p in err["loc"]) or "body" for err in exc.errors())
        return _bad_request(f"invalid or missing fields: {fields}")


# ----------------------------------------------------------------------
# Handlers
# ----------------------------------------------------------------------


async def handle_status(request: web.Request) -> web.Response:
    return _json(request.app[BRIDGE_KEY].dispatcher.status())


async def handle_get_simvars(request: web.Request) -> web.Response:
    snapshot = request.app[BRIDGE_KEY].dispatcher.get_snapshot()
    return web.json_response(dict(snapshot))


async def handle_get_simvar(request: web.Request) -> web.Response:
    name = request.match_info["name"]
    try:
        value = request.app[BRIDGE_KEY].dispatcher.get_value(name)
    except UnknownVariableError as exc:
        return _json(ErrorResponse(error=str(exc)), status=404)
    return _json(SimVarValue(name=name, value=value))


async def handle_set_simvar(request: web.Request) -> web.Response:
    body = await _parse_body(request, SetSimVarRequest)
    if isinstance(body, web.Response):
        return body
    success = request.app[BRIDGE_KEY].dispatcher.set_value(body.name, body.value)
    return _json(SuccessResponse(success=success))


async def handle_command(request: web.Request) -> web.Response:
    body = await _parse_body(request, CommandRequest)
    if isinstance(body, web.Response):
        return body
    success = request.app[BRIDGE_KEY].dispatcher.run_command(body.event)
    return _json(SuccessResponse(success=success))


async def handle_subscribe(request: web.Request) -> web.Response:
    body = await _parse_body(request, SubscribeRequest)
    if isinstance(body, web.Response):
        return body
    success = request.app[BRIDGE_KEY].dispatcher.add_subscription(body.name, body.unit)
    return _json(SuccessResponse(success=success))


# ----------------------------------------------------------------------
# Application factory
# ----------------------------------------------------------------------


def create_app(bridge: SimBridge, *, driver: FrameDriver | None = None) -> web.Application:
    """Build the aiohttp application for *bridge*.

    The bridge is started if it is not running yet. When *driver* is
    given it is started with the app and stopped on cleanup; without one
    the caller is responsible for calling :meth:`SimBridge.tick`.
    """
    bridge.start()

    app = web.Application()
    app[BRIDGE_KEY] = bridge
    app.add_routes(
        [
            web.get("/status", handle_status),
            web.get("/simvars", handle_get_simvars),
            web.get("/simvars/{name}", handle_get_simvar),
            web.post("/simvar", handle_set_simvar),
            web.post("/command", handle_command),
            web.post("/subscribe", handle_subscribe),
        ]
    )

    if driver is not None:
        app[DRIVER_KEY] = driver

        async def _start_driver(_app: web.Application) -> None:
            driver.start()

        async def _stop_driver(_app: web.Application) -> None:
            await driver.stop()

        app.on_startup.append(_start_driver)
        app.on_cleanup.append(_stop_driver)

    async def _disconnect_host(_app: web.Application) -> None:
        host = bridge.host
        if host is not None and host.is_connected:
            host.disconnect()

    app.on_cleanup.append(_disconnect_host)
    return app
