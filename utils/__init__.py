# utils/__init__.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Utility module exports

from .clock_reader import read_clocks, load_clocks, ClockFileError
from .logger import LogLevel, get_logger, set_log_level, configure_logging

__all__ = [
    "read_clocks",
    "load_clocks",
    "ClockFileError",
    "LogLevel",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
