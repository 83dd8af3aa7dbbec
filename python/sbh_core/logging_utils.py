"""Logging setup shared by the command line and scripts."""

from __future__ import annotations

import logging
import sys
import time
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = "%(runtime)s - %(levelname)s - [%(name)s] - %(message)s"


def format_runtime(seconds: float) -> str:
    hours = int(seconds // 3600)
    minutes = int((seconds % 3600) // 60)
    seconds = int(seconds % 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"


class RuntimeFormatter(logging.Formatter):
    """Stamp every record with the time elapsed since logging was set up."""

    def __init__(self, fmt: Optional[str] = None, start_time: Optional[float] = None) -> None:
        super().__init__(fmt)
        self.start_time = time.time() if start_time is None else start_time

    def format(self, record: logging.LogRecord) -> str:
        record.runtime = format_runtime(time.time() - self.start_time)
        return super().format(record)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    *,
    file_level: int = logging.DEBUG,
) -> logging.Logger:
    """Log to stderr at ``level`` and, when ``log_file`` is given, to that file too.

    Handlers installed by an earlier call are replaced, so calling this twice
    does not duplicate output.
    """

    start_time = time.time()
    logger = logging.getLogger("sbh_core")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(min(level, file_level) if log_file else level)
    logger.propagate = False

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(RuntimeFormatter(LOG_FORMAT, start_time))
    console.setLevel(level)
    logger.addHandler(console)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w")
        file_handler.setFormatter(RuntimeFormatter(LOG_FORMAT, start_time))
        file_handler.setLevel(file_level)
        logger.addHandler(file_handler)
    return logger
