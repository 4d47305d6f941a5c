# arz/config/logging_config.py

"""Per-run logging for arz snapshots.

Each run writes ``logs/run_YYYYMMDD_HHMMSS.log`` at DEBUG. The three
sources log under ``arz.currency``, ``arz.gold`` and ``arz.crypto`` from
their own worker threads, so both the file and the console lines carry
the logger name and the file lines the thread as well.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path

from arz.config.settings import Settings

_FILE_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(threadName)s | %(name)s | "
    "%(module)s:%(funcName)s:%(lineno)d | %(message)s"
)

# "arz.gold" is shown as "gold"
_CONSOLE_FORMAT = "%(levelname)-8s | %(source)-8s | %(message)s"

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class _SourceFilter(logging.Filter):
    """Expose the logger name without the ``arz.`` prefix as ``source``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.source = record.name.removeprefix("arz.")
        return True


def setup_logging(console_level: int = logging.WARNING) -> Path:
    """Attach the run's file and stderr handlers to the ``arz`` logger.

    Repeated calls keep the handlers of the first call and only return a
    fresh path name.
    """
    logs_dir: Path = Settings.LOGS_DIR
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_file = logs_dir / f"run_{timestamp}.log"

    arz_logger = logging.getLogger("arz")
    arz_logger.setLevel(logging.DEBUG)

    if arz_logger.handlers:
        return log_file

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(_FILE_FORMAT, datefmt=_DATE_FORMAT)
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.addFilter(_SourceFilter())
    console_handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))

    arz_logger.addHandler(file_handler)
    arz_logger.addHandler(console_handler)

    arz_logger.info("Logging initialised, log file: %s", log_file)

    return log_file
