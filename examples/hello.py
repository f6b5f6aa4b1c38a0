"""PocoRo — minimal hello-world example.

A background thread stands in for an I/O layer: it calls the Deferred it
was handed, error first, once its "work" is done.

Run:
    python examples/hello.py
"""

import threading

from pocoro import Return, adapt, create_deferred, launch


def slowly(value, delay=0.2):
    d = create_deferred()
    threading.Timer(delay, d, args=(None, value)).start()
    return d


@adapt
def greet(name):
    greeting = yield slowly(f"Hello, {name}!")
    shouted = yield slowly(greeting.upper(), delay=0.1)
    yield Return((greeting, shouted))


if __name__ == "__main__":
    print("Running hello coroutine...")
    done = launch(greet, "PocoRo")
    print(f"  launched: {done!r}")
    greeting, shouted = done.wait(timeout=5)
    print(f"greeting : {greeting}")
    print(f"shouted  : {shouted}")
