"""PocoRo Runner — start coroutines from ordinary code.

Usage
-----
    d = launch(fetch_user, db, 42)     # adapted fn, plain fn, or Deferred-returning fn
    d.subscribe(lambda err, user: ...)

    # define and start an anonymous coroutine bound to an object
    def body(self):
        rows = yield self.db.query("select 1")
        yield Return(len(rows))

    d = run(body, service)             # body receives *service* as self

    # from a thread that is not settling anything itself
    user = d.wait(timeout=5)
"""

from __future__ import annotations

import types
from typing import Any, Callable

from pocoro.adapter import adapt
from pocoro.deferred import Deferred
from pocoro.driver import Return
from pocoro.logging import get_logger

_log = get_logger("runner")


@adapt
def launch(fn: Callable[..., Any], *args: Any, **kwargs: Any):
    """Call ``fn(*args, **kwargs)`` and return its outcome as a Deferred.

    A plain return value settles the result at once; a returned Deferred is
    waited on and its value (or error) becomes the result.
    """
    _log.debug("launching %s", getattr(fn, "__qualname__", fn))
    result = fn(*args, **kwargs)
    if not isinstance(result, Deferred):
        yield Return(result)
    value = yield result
    yield Return(value)


def run(fn: Callable[..., Any], bind_target: Any = None) -> Deferred:
    """Adapt *fn*, bind it to *bind_target* and launch it with no arguments.

    When *bind_target* is given, *fn* is called as a method of it, so it
    receives *bind_target* as its first argument.
    """
    if bind_target is not None:
        fn = types.MethodType(fn, bind_target)
    return launch(adapt(fn))
