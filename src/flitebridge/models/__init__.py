"""Data models for the bridge state and HTTP surface."""

from flitebridge.models.requests import CommandRequest, SetSimVarRequest, SubscribeRequest
from flitebridge.models.responses import ErrorResponse, SimVarValue, StatusResponse, SuccessResponse
from flitebridge.models.subscription import Subscription

__all__ = [
    "CommandRequest",
    "ErrorResponse",
    "SetSimVarRequest",
    "SimVarValue",
    "StatusResponse",
    "SubscribeRequest",
    "Subscription",
    "SuccessResponse",
]
