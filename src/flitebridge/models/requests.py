"""Pydantic models for inbound request bodies.

These models give the HTTP layer a consistent "validate → dispatch" flow.
A body that fails validation is rejected before it reaches
:class:`flitebridge.dispatcher.RequestDispatcher`.
"""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt, StrictStr, field_validator


class _RequestBody(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        validate_default=True,
    )


class SetSimVarRequest(_RequestBody):
    """Body of ``POST /simvar``."""

    name: StrictStr
    # JSON numbers only; strings and booleans are rejected.
    value: StrictFloat | StrictInt

    @field_validator("value")
    @classmethod
    def _value_finite(cls, value: float | int) -> float:
        try:
            number = float(value)
        except OverflowError as exc:
            raise ValueError("value must be a finite number") from exc
        if not math.isfinite(number):
            raise ValueError("value must be a finite number")
        return number


class CommandRequest(_RequestBody):
    """Body of ``POST /command``."""

    event: StrictStr


class SubscribeRequest(_RequestBody):
    """Body of ``POST /subscribe``.

    The wire field is ``simvar``; it is exposed as ``name`` to match
    :class:`flitebridge.models.subscription.Subscription`.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: StrictStr = Field(alias="simvar")
    unit: StrictStr
