"""Logging configuration for the speed reader"""

import json
import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# extra_data keys the console line shows after the message
TIMING_FIELDS = ("delay_ms", "drift_ms")


class JSONFormatter(logging.Formatter):
    """One JSON object per record, for the optional log file"""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        # Structured fields from extra={"extra_data": {...}}
        entry.update(getattr(record, "extra_data", {}))

        return json.dumps(entry, default=str)


class ConsoleFormatter(logging.Formatter):
    """Compact stderr formatter, colored when writing to a terminal"""

    LEVEL_COLORS = {
        "DEBUG": "\033[36m",  # Cyan
        "INFO": "\033[32m",  # Green
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[35m",  # Magenta
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = True) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        level = f"[{record.levelname}]"
        if self.use_color and record.levelname in self.LEVEL_COLORS:
            level = f"{self.LEVEL_COLORS[record.levelname]}{level}{self.RESET}"

        line = f"{level} {record.name} - {record.getMessage()}"

        extra_data = getattr(record, "extra_data", {})
        timings = [
            f"{field[:-3]} {extra_data[field]:.1f}ms"
            for field in TIMING_FIELDS
            if field in extra_data
        ]
        if timings:
            line += f" ({', '.join(timings)})"

        if record.exc_info:
            line += f"\n{self.formatException(record.exc_info)}"

        return line


def setup_logging(
    log_level: str = "INFO",
    log_file: Optional[Path] = None,
    enable_console_logging: bool = True,
) -> None:
    """
    Setup logging configuration for the application.

    Console output goes to stderr so it never mixes with the word line the
    terminal reader redraws on stdout.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path of a rotating JSON log file
        enable_console_logging: Enable logging to stderr
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.handlers.clear()

    if enable_console_logging:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(ConsoleFormatter(use_color=sys.stderr.isatty()))
        root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"  # 5MB
        )
        file_handler.setFormatter(JSONFormatter())
        root_logger.addHandler(file_handler)
