# utils/clock_reader.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# CSV reader for collections of labelled vector clocks

import csv
from pathlib import Path
from typing import Iterator, List, Tuple

from model.codec import parse_compact
from model.exceptions import ClockFormatError
from model.vector_clock import VectorClock
from utils.logger import get_logger


class ClockFileError(Exception):
    """Exception raised when clock files contain invalid format or data."""

    pass


def read_clocks(filepath: str) -> Iterator[Tuple[str, VectorClock]]:
    """Read labelled clocks from a CSV file.

    Expected CSV format:
        id,vc
        c1,A:1;B:2
        c2,A:3

    Args:
        filepath: Path to the CSV clock file

    Yields:
        (id, VectorClock) pairs in file order

    Raises:
        ClockFileError: If the file is missing or unreadable, is not UTF-8 CSV,
            lacks headers or a row is invalid
    """
    logger = get_logger()
    path = Path(filepath)

    if not path.exists():
        raise ClockFileError(f"Clock file not found: {filepath}")

    logger.debug(f"Reading clock file: {filepath}")

    try:
        with open(path, "r", newline="", encoding="utf-8") as file:
            reader = csv.DictReader(file)

            required_headers = {"id", "vc"}
            if not required_headers.issubset(set(reader.fieldnames or [])):
                missing = required_headers - set(reader.fieldnames or [])
                raise ClockFileError(f"Missing required headers: {sorted(missing)}")

            for row_num, row in enumerate(reader, start=2):
                yield _parse_clock_row(row, row_num)

    except ClockFileError:
        raise
    except UnicodeDecodeError as e:
        raise ClockFileError(f"Clock file is not valid UTF-8: {filepath}: {e}")
    except csv.Error as e:
        raise ClockFileError(f"Malformed CSV in clock file: {filepath}: {e}")
    except OSError as e:
        raise ClockFileError(f"Cannot open clock file: {filepath}: {e}")


def load_clocks(filepath: str) -> List[Tuple[str, VectorClock]]:
    """Read a whole clock file into memory."""
    clocks = list(read_clocks(filepath))
    get_logger().debug(f"Loaded {len(clocks)} clocks from {filepath}")
    return clocks


def _parse_clock_row(row: dict, row_num: int) -> Tuple[str, VectorClock]:
    label = (row.get("id") or "").strip()
    if not label:
        raise ClockFileError(f"Error parsing row {row_num}: empty id")
    try:
        return label, parse_compact(row.get("vc") or "")
    except ClockFormatError as e:
        raise ClockFileError(f"Error parsing row {row_num}: {e}")
