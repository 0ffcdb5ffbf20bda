"""Exception types raised by ruby2js."""
from __future__ import annotations


class Ruby2JSError(Exception):
    """Base class for errors raised by this package."""


class ValidationError(Ruby2JSError, ValueError):
    """A version component or dotted version string was rejected."""


__all__ = ["Ruby2JSError", "ValidationError"]
