"""
Logging for the dice roller.

Provides the unified logging configuration for the whole application, so
the Textual log, the log file, and every module logger share one
timestamp format, plus a session logger that records categorized entries
for session start/end and die face changes.
"""

import json
import logging
import sys
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class UnifiedFormatter(logging.Formatter):
    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        ct = datetime.fromtimestamp(record.created)
        return ct.strftime("%Y-%m-%d %H:%M:%S") + f".{int(record.msecs):03d}"


def setup_unified_logging(
    level: str = "INFO",
    log_file: str | None = None,
    console_handler: logging.Handler | None = None,
) -> None:
    """
    Configure the root logger with the unified format.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_file: Optional file path for persistent logs
        console_handler: Handler for interactive output. Defaults to stdout;
            the TUI passes Textual's handler so output does not corrupt the screen.
    """
    formatter = UnifiedFormatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    root_logger.handlers.clear()

    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


class LogCategory(str, Enum):
    SESSION = "SESSION"
    STATE_CHANGE = "STATE_CHANGE"
    ERROR = "ERROR"


class SessionLogger:
    """Categorized log entries for one UI session."""

    def __init__(self, session_id: str | None = None, logger_name: str = "dice_roller.session"):
        self.session_id = session_id or datetime.now().strftime("%Y%m%d_%H%M%S")
        self._logger = logging.getLogger(logger_name)

    def _format_entry(
        self,
        category: LogCategory,
        message: str,
        data: dict[str, Any] | None = None,
    ) -> str:
        entry = f"[{category.value}] [{self.session_id}] {message}"
        if data:
            entry += " " + json.dumps(data, ensure_ascii=False, sort_keys=True)
        return entry

    def log_session_start(self, face: int, seed: int | None = None) -> None:
        self._logger.info(
            self._format_entry(
                LogCategory.SESSION,
                f"Session started on face {face}",
                {"seed": seed} if seed is not None else None,
            )
        )

    def log_session_end(self, rolls: int) -> None:
        self._logger.info(
            self._format_entry(LogCategory.SESSION, f"Session ended after {rolls} roll(s)")
        )

    def log_state_change(
        self,
        field: str,
        old_value: Any,
        new_value: Any,
        reason: str = "",
    ) -> None:
        self._logger.debug(
            self._format_entry(
                LogCategory.STATE_CHANGE,
                f"Field: {field} | {old_value} -> {new_value}",
                {"reason": reason} if reason else None,
            )
        )

    def log_error(self, context: str, error: str, data: dict[str, Any] | None = None) -> None:
        self._logger.error(
            self._format_entry(LogCategory.ERROR, f"Context: {context} | Error: {error}", data)
        )


_logger: SessionLogger | None = None


def get_session_logger() -> SessionLogger:
    global _logger
    if _logger is None:
        _logger = SessionLogger()
    return _logger


def init_session_logger(session_id: str | None = None) -> SessionLogger:
    global _logger
    _logger = SessionLogger(session_id=session_id)
    return _logger
