"""PocoRo logging — thin wrapper around dd-logging for consistent log format.

Usage
-----
In every pocoro module:
    from pocoro.logging import get_logger
    _log = get_logger("driver")   # → pocoro.driver logger

To capture the runtime's debug trace in a file:
    from pocoro.logging import setup_logging
    setup_logging("my_run", log_level="debug")
    # → logs/my_run-<YYYYMMDD-HHMMSS>.log under pocoro.*

Arguments left out fall back to :class:`pocoro.config.Settings`
(``POCORO_LOG_LEVEL``, ``POCORO_LOG_DIR``, ``POCORO_LOG_CONSOLE``).

Log hierarchy
-------------
    pocoro              ← root (FileHandler attached by setup_logging)
    ├── pocoro.deferred
    ├── pocoro.driver
    ├── pocoro.adapter
    └── pocoro.runner
"""

from __future__ import annotations

import logging
from pathlib import Path

from dd_logging import (
    disable_logging as _disable,
    get_logger as _get,
    setup_logging as _setup,
)

from pocoro.config import Settings

_ROOT = "pocoro"


def get_logger(name: str) -> logging.Logger:
    """Return a child logger under the pocoro namespace.

    Parameters
    ----------
    name :
        Dotted sub-path, e.g. ``"driver"`` → ``pocoro.driver``.
    """
    return _get(name, _ROOT)


def setup_logging(
    run_name: str = "pocoro",
    *,
    log_level: str | None = None,
    log_dir: str | Path | None = None,
    console: bool | None = None,
) -> Path:
    """Attach a timestamped FileHandler to the pocoro root logger.

    Parameters
    ----------
    run_name :
        Short label used in the log filename.
    log_level :
        ``"debug"`` | ``"info"`` | ``"warning"`` | ``"error"``.
        Defaults to ``POCORO_LOG_LEVEL``.
    log_dir :
        Directory for log files.  Defaults to ``POCORO_LOG_DIR`` or
        ``./logs`` relative to CWD.
    console :
        Also attach a StreamHandler.  Defaults to ``POCORO_LOG_CONSOLE``.

    Returns
    -------
    Path
        Absolute path of the created log file.
    """
    settings = Settings.from_env()
    return _setup(
        run_name,
        root_name=_ROOT,
        log_level=log_level or settings.log_level,
        log_dir=log_dir or settings.log_dir or (Path.cwd() / "logs"),
        console=settings.log_console if console is None else console,
    )


def disable_logging() -> None:
    """Remove all handlers from the pocoro root logger (silent mode)."""
    _disable(_ROOT)
