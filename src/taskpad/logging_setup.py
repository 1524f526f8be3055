# src/taskpad/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FILE_NAME = "taskpad.log"

# Per-logger floors on the console. Storage writes happen on every mutation,
# so their DEBUG/INFO lines only go to the log file.
CONSOLE_FLOORS: dict[str, int] = {
    "taskpad.storage.": logging.WARNING,
    "py.warnings": logging.ERROR,
}

# Marks handlers installed here, so a second setup_logging() swaps only ours.
_HANDLER_TAG = "_taskpad_handler"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Decide which records reach stderr while the task prompt is open.

    taskpad records pass unless CONSOLE_FLOORS raises the bar for their logger;
    records from other libraries need ERROR+.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        for prefix, floor in CONSOLE_FLOORS.items():
            if name == prefix or name.startswith(prefix):
                return record.levelno >= floor

        if name == "taskpad" or name.startswith("taskpad."):
            return True

        return record.levelno >= logging.ERROR


def _tagged(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(
    *,
    log_dir: str | Path = ".local/taskpad",
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path:
    """
    Send taskpad logs to stderr (short lines, filtered) and to <log_dir>/taskpad.log (everything).

    The file sits next to state.json in the data dir. Returns the log file path.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG, False):
            root.removeHandler(h)
            h.close()

    # No timestamps on stderr: these lines are printed between task listings.
    ch = _tagged(logging.StreamHandler(sys.stderr))
    ch.setLevel(console_level)
    ch.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = _tagged(logging.FileHandler(str(log_file), encoding="utf-8"))
    fh.setLevel(file_level)
    fh.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(fh)

    logging.captureWarnings(True)
    return log_file
