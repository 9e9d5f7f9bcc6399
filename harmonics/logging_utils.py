"""Package logging: a stderr console handler and an append-only log file."""

from __future__ import annotations

import logging
import os
import traceback
from datetime import datetime
from pathlib import Path

LOG_DIR_ENV = "HARMONICS_LOG_DIR"
DEBUG_ENV = "HARMONICS_DEBUG"
LOG_FILENAME = "harmonics.log"

_LOGGER = logging.getLogger("harmonics.logging")
_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_configured = False


def log_file() -> Path:
    configured = os.environ.get(LOG_DIR_ENV)
    base = Path(configured).expanduser() if configured else Path.home() / ".cache" / "harmonics" / "logs"
    return base / LOG_FILENAME


def configure_logging(*, force: bool = False) -> None:
    """Attach handlers to the ``harmonics`` logger once (again with ``force``).

    The console handler is skipped when the host application already configured
    the root logger; records still propagate to it.
    """
    global _configured
    if _configured and not force:
        return

    package_logger = logging.getLogger("harmonics")
    package_logger.setLevel(logging.DEBUG)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(_FORMAT)
    if force or not logging.getLogger().handlers:
        console = logging.StreamHandler()
        console.setLevel(logging.DEBUG if os.environ.get(DEBUG_ENV) else logging.INFO)
        console.setFormatter(formatter)
        package_logger.addHandler(console)

    path = log_file()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as exc:
        _LOGGER.warning("File logging disabled, cannot open %s: %s", path, exc)
    else:
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    _configured = True


def log_exception(context: str, exc: BaseException) -> Path | None:
    """Append ``exc`` with its traceback to the log file; returns the file or None."""
    path = log_file()
    lines = traceback.format_exception(type(exc), exc, exc.__traceback__)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(f"[{datetime.now().isoformat()}] {context} failed: {type(exc).__name__}: {exc}\n")
            handle.writelines(lines)
            handle.write("\n")
    except OSError as log_exc:
        _LOGGER.warning("Failed to write log file %s: %s", path, log_exc, exc_info=True)
        return None
    return path
