"""PocoRo Deferred — single-assignment result with Node-style completion.

Design
------
A Deferred is handed to an asynchronous collaborator (an I/O layer, a
thread pool, a timer) which later calls it exactly once, error first:

    d = create_deferred()
    start_io(on_done=d)          # collaborator calls d(None, data) or d(exc)

Arguments are decoded into an ``(error, value)`` pair:

    d()                →  (None, None)
    d(exc)             →  (exc,  None)
    d(None, 5)         →  (None, 5)
    d(None, 1, 2, 3)   →  (None, [1, 2, 3])
    d(err, 1)          →  (err,  [1])

Consumers subscribe with ``handler(error, value)``.  Handlers registered
while pending run at settlement time in registration order; handlers
registered afterwards run immediately with the stored outcome.  There is
no callback chaining: coroutines driven by :mod:`pocoro.driver` replace it.
"""

from __future__ import annotations

import threading
from typing import Any, Callable

from pocoro.errors import AlreadySettled, DependencyError, NotCallable, NotSettled
from pocoro.logging import get_logger

_log = get_logger("deferred")

Handler = Callable[[Any, Any], Any]


def _decode(args: tuple) -> tuple[Any, Any]:
    if not args:
        return None, None
    if len(args) == 1:
        return args[0], None
    if len(args) == 2 and args[0] is None:
        return None, args[1]
    return args[0], list(args[1:])


class Deferred:
    """A value (or error) that becomes available at most once.

    Attributes
    ----------
    settled :
        True once the producer has called :meth:`settle`.
    error :
        The stored error, ``None`` on success or while pending.
    value :
        The stored value, ``None`` on failure or while pending.
    """

    def __init__(self):
        self._settled = False
        self._error: Any = None
        self._value: Any = None
        self._subscribers: list[Handler] = []
        self._done = threading.Event()

    # ── Outcome ───────────────────────────────────────────────────────────────

    @property
    def settled(self) -> bool:
        return self._settled

    @property
    def error(self) -> Any:
        return self._error

    @property
    def value(self) -> Any:
        return self._value

    def __repr__(self) -> str:
        if not self._settled:
            return f"Deferred(pending, subscribers={len(self._subscribers)})"
        if self._error is not None:
            return f"Deferred(failed, error={self._error!r})"
        return f"Deferred(settled, value={self._value!r})"

    # ── Producer side ─────────────────────────────────────────────────────────

    def settle(self, *args: Any) -> None:
        """Store the outcome decoded from *args* and notify subscribers.

        Raises
        ------
        AlreadySettled
            If this Deferred already holds an outcome.
        """
        error, value = _decode(args)
        self._resolve(error, value)

    __call__ = settle

    def _resolve(self, error: Any, value: Any) -> None:
        if self._settled:
            raise AlreadySettled(f"{self!r} was already settled")
        self._settled = True
        self._error = error
        self._value = value

        # handlers subscribing from inside this pass take the replay path
        pending, self._subscribers = self._subscribers, []
        _log.debug("%r settled, notifying %d subscriber(s)", self, len(pending))
        self._done.set()
        for handler in pending:
            handler(error, value)

    # ── Consumer side ─────────────────────────────────────────────────────────

    def subscribe(self, handler: Handler) -> Any:
        """Register ``handler(error, value)``.

        If the outcome is already stored the handler runs right away and its
        return value is passed back; otherwise returns ``None``.

        Raises
        ------
        NotCallable
            If *handler* is not callable.
        """
        if not callable(handler):
            raise NotCallable(f"Object {handler!r} is not callable")
        if self._settled:
            return handler(self._error, self._value)
        self._subscribers.append(handler)
        return None

    add = subscribe

    def result(self) -> Any:
        """Return the stored value, or raise the stored error.

        Errors that are not exceptions are raised wrapped in
        :class:`DependencyError`.

        Raises
        ------
        NotSettled
            If the Deferred is still pending.
        """
        if not self._settled:
            raise NotSettled(f"{self!r} has no outcome yet")
        if self._error is not None:
            if isinstance(self._error, BaseException):
                raise self._error
            raise DependencyError(self._error)
        return self._value

    def wait(self, timeout: float | None = None) -> Any:
        """Block until settled, then behave like :meth:`result`.

        Only useful when the producer settles from another thread; on the
        thread that owns the coroutine nothing could settle it meanwhile.

        Raises
        ------
        TimeoutError
            If *timeout* elapses before the Deferred is settled.
        """
        if not self._done.wait(timeout=timeout):
            raise TimeoutError(f"{self!r} was not settled within {timeout}s")
        return self.result()


def create_deferred() -> Deferred:
    """Return a fresh, unsettled Deferred."""
    return Deferred()


def defer(error: Any = None, value: Any = None) -> Deferred:
    """Return a Deferred already settled with exactly ``(error, value)``."""
    d = Deferred()
    d._resolve(error, value)
    return d
