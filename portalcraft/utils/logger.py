# portalcraft/utils/logger.py
import datetime
import sys
from collections import deque
from typing import List, NamedTuple, Optional

class LogLevel:
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4
    SILENT = 5 # Suppresses printing; history still records

LEVEL_NAMES = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARN",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRIT"
}

HISTORY_SIZE = 200


class LogRecord(NamedTuple):
    timestamp: str
    level: int
    source: str
    message: str

    def format(self) -> str:
        level_name = LEVEL_NAMES.get(self.level, "LOG")
        return f"[{self.timestamp}] [{level_name:<5}] [{self.source}] {self.message}"


class Logger:
    """
    Process-wide logger. Messages at or above the print level go to the
    stream; warnings and worse are also kept in a short history so the
    game screen (and tests) can show what went wrong with a roll.
    """
    _level = LogLevel.WARNING
    _history_level = LogLevel.WARNING
    _history: deque = deque(maxlen=HISTORY_SIZE)
    _stream = None

    @classmethod
    def set_level(cls, level: int):
        """Sets the minimum level that gets printed."""
        cls._level = level

    @classmethod
    def get_level(cls) -> int:
        return cls._level

    @classmethod
    def set_stream(cls, stream):
        """Redirects printed output. None means the current sys.stdout."""
        cls._stream = stream

    @classmethod
    def is_enabled(cls, level: int) -> bool:
        return level >= cls._level

    @classmethod
    def recent(cls, min_level: int = LogLevel.WARNING, source: Optional[str] = None) -> List[LogRecord]:
        return [
            record for record in cls._history
            if record.level >= min_level and (source is None or record.source == source)
        ]

    @classmethod
    def clear_history(cls):
        cls._history.clear()

    @classmethod
    def _log(cls, level: int, source: str, message: str):
        record = LogRecord(datetime.datetime.now().strftime("%H:%M:%S"), level, source, message)
        if level >= cls._history_level:
            cls._history.append(record)
        if cls.is_enabled(level):
            print(record.format(), file=cls._stream or sys.stdout)

    @classmethod
    def debug(cls, source: str, message: str):
        cls._log(LogLevel.DEBUG, source, message)

    @classmethod
    def info(cls, source: str, message: str):
        cls._log(LogLevel.INFO, source, message)

    @classmethod
    def warning(cls, source: str, message: str):
        cls._log(LogLevel.WARNING, source, message)

    @classmethod
    def error(cls, source: str, message: str):
        cls._log(LogLevel.ERROR, source, message)

    @classmethod
    def critical(cls, source: str, message: str):
        cls._log(LogLevel.CRITICAL, source, message)
