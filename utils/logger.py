# utils/logger.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Console logging for clock queries and index support decisions

import logging
import sys
from enum import Enum
from typing import Optional, Union


class LogLevel(Enum):
    """Verbosity levels accepted by the vectime logger."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    @classmethod
    def parse(cls, level: Union["LogLevel", str]) -> "LogLevel":
        if isinstance(level, cls):
            return level
        try:
            return cls[str(level).upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {level}") from None


class _StdoutHandler(logging.StreamHandler):
    """Writes to the current `sys.stdout`, not the one seen at construction."""

    def __init__(self):
        super().__init__(sys.stdout)

    @property
    def stream(self):
        return sys.stdout

    @stream.setter
    def stream(self, value):
        pass


class VectimeFormatter(logging.Formatter):
    """Bare messages for progress output, tagged lines for everything else."""

    def format(self, record):
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


class VectimeLogger:
    """Single console logger shared by the model, index and parser packages.

    Besides the level methods it has one helper per index decision worth
    tracing, so call sites stay one line long and the trace format lives in
    one place.
    """

    def __init__(self, name: str = "vectime", level: LogLevel = LogLevel.INFO):
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        self.logger.propagate = False

        handler = _StdoutHandler()
        handler.setFormatter(VectimeFormatter())
        self.logger.addHandler(handler)
        self.set_level(level)

    def set_level(self, level: LogLevel):
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        return self.logger.isEnabledFor(logging.DEBUG)

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        self.logger.error(message, **kwargs)

    # Index support trace
    def strategy_dispatch(self, strategy: str, entry: str, query: str, matched: bool):
        """One consistency check: entry, query and whether the strategy held."""
        verdict = "match" if matched else "no match"
        self.debug(f"  consistent[{strategy}] {entry} vs {query}: {verdict}")

    def split_start(self, entry_count: int, min_fill: int):
        self.debug(f"pick_split over {entry_count} entries, at least {min_fill} per side")

    def split_seeds(self, left: int, right: int, reason: str):
        self.debug(f"  seeds #{left} and #{right}: {reason}")

    def split_assignment(self, position: int, side: str, forced: bool = False):
        if forced:
            self.debug(f"    #{position} -> {side} (other side full)")
        else:
            self.debug(f"    #{position} -> {side}")

    def split_result(self, left: str, right: str):
        self.debug(f"  unions: left {left}, right {right}")

    def query_result(self, query: str, result: object):
        """Evaluated query and its value, at INFO for -v runs."""
        self.info(f"{query} => {result}")


_global_logger: Optional[VectimeLogger] = None


def get_logger(name: str = "vectime") -> VectimeLogger:
    """Return the process-wide logger, creating it on first use.

    `name` only matters for that first call.
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = VectimeLogger(name)
    return _global_logger


def set_log_level(level: Union[LogLevel, str]):
    get_logger().set_level(LogLevel.parse(level))


def configure_logging(verbose: bool = False, debug: bool = False):
    """Map the CLI flags onto a level: --debug beats -v, default is WARNING."""
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
