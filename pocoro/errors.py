"""Exception types raised by PocoRo."""

from __future__ import annotations

from typing import Any


class PocoroError(Exception):
    """Base exception for PocoRo."""


class AlreadySettled(PocoroError, RuntimeError):
    """Raised when a Deferred is settled a second time."""


class NotCallable(PocoroError, TypeError):
    """Raised when a non-callable handler is subscribed to a Deferred."""


class NotSettled(PocoroError):
    """Raised when reading the outcome of a Deferred that is still pending."""


class DependencyError(PocoroError):
    """Carries a non-exception error value so it can be thrown into a generator.

    The wrapped object is kept on ``error``.
    """

    def __init__(self, error: Any):
        super().__init__(f"Deferred failed with {error!r}")
        self.error = error
