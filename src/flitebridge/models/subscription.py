"""SimVar subscription model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Subscription(BaseModel):
    """A tracked SimVar.

    ``unit`` is an opaque tag handed to the host unchanged; it is never
    validated or converted. ``name`` is not validated either, an empty
    string is a legal (if useless) key.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    unit: str
