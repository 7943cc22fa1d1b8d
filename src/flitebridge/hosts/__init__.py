"""Bundled :class:`flitebridge.host.SimHost` implementations."""

from flitebridge.hosts.dummy import DummyHost

__all__ = ["DummyHost"]
