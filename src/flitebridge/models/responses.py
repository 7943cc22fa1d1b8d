"""Typed response bodies for the bridge HTTP surface."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StatusResponse(BaseModel):
    """Liveness and host-connection report for ``GET /status``."""

    model_config = ConfigDict(frozen=True)

    status: str = "ok"
    simulator: str
    connected: bool


class SuccessResponse(BaseModel):
    """Generic acknowledgement for write/command/subscribe requests."""

    model_config = ConfigDict(frozen=True)

    success: bool


class SimVarValue(BaseModel):
    """A single cached SimVar value for ``GET /simvars/{name}``."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: float


class ErrorResponse(BaseModel):
    """Error body returned for rejected or unresolvable requests."""

    model_config = ConfigDict(frozen=True)

    success: bool = False
    error: str
