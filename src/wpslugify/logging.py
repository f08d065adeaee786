"""Logging for the wpslugify command line.

Slugs go to stdout, so stderr is kept quiet by default: the stderr
handler passes WARNING and above, and ``-v`` opens it up to DEBUG via
:func:`set_verbosity`.  The package logger itself always passes DEBUG,
which leaves each handler free to pick its own threshold.

Modules log through ``logging.getLogger(__name__)`` and propagate to the
package logger.  :func:`configure_file_logging` attaches a per-run file
named after the subcommand, e.g. ``wpslugify-batch_2026-01-31T09-15-00.log``;
:func:`remove_file_logging` detaches and closes it.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("wpslugify")
logger.setLevel(logging.DEBUG)

QUIET_LEVEL = logging.WARNING
VERBOSE_LEVEL = logging.DEBUG

handler = logging.StreamHandler(sys.stderr)
handler.setLevel(QUIET_LEVEL)

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

formatter = logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT)
handler.setFormatter(formatter)

logger.addHandler(handler)

DEFAULT_LOG_DIR = "data/logs"


def set_verbosity(verbose: bool) -> None:
    """Show DEBUG records on stderr when *verbose*, else only warnings and errors."""
    handler.setLevel(VERBOSE_LEVEL if verbose else QUIET_LEVEL)


def log_file_name(command: str | None = None, *, now: datetime | None = None) -> str:
    """Return the file name for a run of *command*.

    >>> log_file_name("batch", now=datetime(2026, 1, 31, 9, 15))
    'wpslugify-batch_2026-01-31T09-15-00.log'
    >>> log_file_name(now=datetime(2026, 1, 31, 9, 15))
    'wpslugify_2026-01-31T09-15-00.log'
    """
    prefix = f"wpslugify-{command}" if command else "wpslugify"
    timestamp = (now or datetime.now()).strftime("%Y-%m-%dT%H-%M-%S")
    return f"{prefix}_{timestamp}.log"


def configure_file_logging(
    log_dir: str | Path = DEFAULT_LOG_DIR,
    *,
    command: str | None = None,
    level: int = logging.INFO,
) -> logging.FileHandler:
    """Attach a timestamped file handler for one run of *command*.

    Creates ``log_dir`` if it does not exist.  The file records *level*
    and above regardless of the stderr verbosity.

    Returns:
        The :class:`logging.FileHandler` that was added; pass it to
        :func:`remove_file_logging` when the run ends.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    file_handler = logging.FileHandler(str(log_path / log_file_name(command)), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))

    logger.addHandler(file_handler)
    logger.debug("Logging %s run to %s", command or "wpslugify", file_handler.baseFilename)
    return file_handler


def remove_file_logging(file_handler: logging.Handler) -> None:
    """Detach *file_handler* from the package logger and close its file."""
    logger.removeHandler(file_handler)
    file_handler.close()


__all__ = [
    "configure_file_logging",
    "log_file_name",
    "logger",
    "remove_file_logging",
    "set_verbosity",
]
