"""PocoRo — generator coroutines over error-first callbacks.

Write sequential-looking code that suspends on asynchronous results:
  a Deferred is a single-assignment (error, value) slot  →  callable as a completion function
  yielding a Deferred suspends the coroutine  →  it resumes when the Deferred settles
  yield Return(value) finishes early  →  the caller's Deferred settles with value

Everything runs on one logical thread; nothing here does I/O or scheduling.

Public API
----------
from pocoro import Deferred, Return, adapt, launch, run
"""

from pocoro.deferred import Deferred, create_deferred, defer
from pocoro.driver   import Driver, Return
from pocoro.adapter  import adapt
from pocoro.runner   import launch, run
from pocoro.errors   import (
    AlreadySettled,
    DependencyError,
    NotCallable,
    NotSettled,
    PocoroError,
)

# short names
o_0 = o0 = adapt
oR = Return
oC = callback = create_deferred

__all__ = [
    "Deferred", "create_deferred", "defer", "Driver", "Return",
    "adapt", "launch", "run",
    "PocoroError", "AlreadySettled", "NotCallable", "NotSettled", "DependencyError",
    "o_0", "o0", "oR", "oC", "callback",
]
__version__ = "0.1.0"
