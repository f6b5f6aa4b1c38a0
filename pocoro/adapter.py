"""PocoRo adapter — turn a generator function into one that returns a Deferred.

    @adapt
    def fetch_user(db, user_id):
        row = yield db.get(user_id)        # db.get returns a Deferred
        yield Return(User(**row))

    d = fetch_user(db, 42)                 # Deferred, pending or settled

Calling the adapted function never raises: a failure before the first
``yield`` comes back as an already-failed Deferred.
"""

from __future__ import annotations

import functools
from collections.abc import Generator
from typing import Any, Callable

from pocoro.deferred import Deferred, defer
from pocoro.driver import Driver
from pocoro.logging import get_logger

_log = get_logger("adapter")


def adapt(fn: Callable[..., Any]) -> Callable[..., Deferred]:
    """Wrap *fn* so that calling it returns a :class:`Deferred`.

    * *fn* returns a generator → it is driven by a new :class:`Driver` and
      the driver's output Deferred is returned.
    * *fn* returns a Deferred → returned unchanged.
    * *fn* returns anything else → an already-settled Deferred with it.
    * *fn* raises → an already-failed Deferred with the exception.

    Works as a decorator on functions and methods alike.
    """

    @functools.wraps(fn)
    def adapted(*args: Any, **kwargs: Any) -> Deferred:
        try:
            result = fn(*args, **kwargs)
        except Exception as exc:
            _log.warning("'%s' failed before its first step: %s", _name(fn), exc)
            return defer(exc)

        if isinstance(result, Generator):
            return Driver(result).drive()
        if isinstance(result, Deferred):
            return result
        return defer(None, result)

    return adapted


def _name(fn: Callable) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)
