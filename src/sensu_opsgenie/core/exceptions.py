"""Base exception hierarchy shared by every handler stage."""

from __future__ import annotations


class HandlerError(Exception):
    """Base exception for all handler errors. Every one is terminal."""


class UsageError(HandlerError):
    """The handler was invoked with unexpected positional arguments."""


class ConfigError(HandlerError):
    """Settings could not be loaded or are incomplete."""
