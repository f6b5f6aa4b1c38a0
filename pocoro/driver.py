"""PocoRo Driver — the trampoline that pumps a generator-based coroutine.

Design
------
A coroutine is a plain generator function.  Every ``yield`` is a step:

    yield deferred          → suspend until *deferred* settles, then resume
                              with its value (or have its error raised at
                              the ``yield``)
    yield Return(value)     → finish now; the output settles with *value*
    yield anything_else     → no-op step, resumes with ``None``

The Driver loops instead of recursing, so a run of already-settled
Deferreds never grows the call stack.  It only hands control back to its
caller when the coroutine yields a Deferred that is still pending; the
collaborator that later settles it re-enters :meth:`Driver.drive`.

Final value
-----------
A coroutine that simply runs off its end (or ``return``s) resolves to the
value yielded by the *previous step of the current drive pass*, not to its
own return value.  After a fast-path Deferred that is the Deferred object
itself; right after resuming from a pending Deferred it is ``None``.
Use ``yield Return(value)`` to finish with a specific value.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from pocoro.deferred import Deferred
from pocoro.errors import DependencyError
from pocoro.logging import get_logger

_log = get_logger("driver")

RUNNING = "running"
WAITING = "waiting_on_dependency"
COMPLETED = "completed"
FAILED = "failed"


class Return:
    """Yield ``Return(value)`` from a coroutine to finish with *value*."""

    __slots__ = ("value",)

    def __init__(self, value: Any = None):
        self.value = value

    def __repr__(self) -> str:
        return f"Return({self.value!r})"


class Driver:
    """Drive one generator to completion, settling *output* at the end.

    Parameters
    ----------
    gen :
        The generator to step.
    output :
        Deferred that receives the coroutine's outcome.  A fresh one is
        created when omitted.

    Attributes
    ----------
    phase :
        ``"running"`` | ``"waiting_on_dependency"`` | ``"completed"`` |
        ``"failed"``.
    steps :
        Number of times the generator has been resumed.
    """

    def __init__(self, gen: Generator, output: Deferred | None = None):
        self.gen = gen
        self.output = output if output is not None else Deferred()
        self.phase = RUNNING
        self.steps = 0
        self.name = getattr(gen, "__qualname__", type(gen).__name__)

    def __repr__(self) -> str:
        return f"Driver({self.name!r}, phase={self.phase!r}, steps={self.steps})"

    def drive(self, value: Any = None, error: Any = None) -> Deferred:
        """Resume the generator until it suspends on a pending Deferred or ends.

        *error*, when not ``None``, is raised inside the generator at the
        ``yield`` it is suspended on; otherwise *value* is sent in.

        Returns the output Deferred.
        """
        self.phase = RUNNING
        yielded: Any = None
        while True:
            previous = yielded
            self.steps += 1
            try:
                if error is not None:
                    yielded = self.gen.throw(_as_exception(error))
                else:
                    yielded = self.gen.send(value)
            except StopIteration:
                return self._finish(previous)
            except Exception as exc:
                self.phase = FAILED
                _log.warning("%r raised %s: %s", self, type(exc).__name__, exc)
                self.output.settle(exc)
                return self.output

            value = error = None
            if isinstance(yielded, Return):
                return self._finish(yielded.value)
            if isinstance(yielded, Deferred):
                if not yielded.settled:
                    self.phase = WAITING
                    _log.debug("%r suspended on %r", self, yielded)
                    yielded.subscribe(self._resume)
                    return self.output
                if yielded.error is not None:
                    error = yielded.error
                else:
                    value = yielded.value

    def _resume(self, error: Any, value: Any) -> None:
        _log.debug("%r resuming (error=%r)", self, error)
        self.drive(value, error)

    def _finish(self, result: Any) -> Deferred:
        self.phase = COMPLETED
        _log.debug("%r completed with %r", self, result)
        self.output.settle(None, result)
        return self.output


def _as_exception(error: Any) -> BaseException:
    if isinstance(error, BaseException):
        return error
    return DependencyError(error)
