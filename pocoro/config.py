"""PocoRo configuration — environment-driven settings.

Environment variables
---------------------
POCORO_LOG_LEVEL    Level used by ``setup_logging()`` (default: ``"warning"``).
POCORO_LOG_DIR      Directory for log files (default: ``./logs``).
POCORO_LOG_CONSOLE  ``1`` / ``true`` / ``yes`` also logs to stderr.

A ``.env`` file in the CWD (or the closest parent) is loaded first.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime settings resolved from the environment."""

    log_level: str = "warning"
    log_dir: Path | None = None
    log_console: bool = False

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        log_dir = os.environ.get("POCORO_LOG_DIR")
        return cls(
            log_level=os.environ.get("POCORO_LOG_LEVEL", cls.log_level).lower(),
            log_dir=Path(log_dir) if log_dir else None,
            log_console=os.environ.get("POCORO_LOG_CONSOLE", "").strip().lower() in _TRUTHY,
        )
