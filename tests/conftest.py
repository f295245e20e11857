# tests/conftest.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for vectime tests.

The configuration handles:
- Python path setup for module imports
- Common fixtures for clocks and index entries
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from model.vector_clock import VectorClock  # noqa: E402


@pytest.fixture
def sample_clocks():
    """A small collection mixing ordered and concurrent clocks.

    Returns:
        List[Tuple[str, VectorClock]]: (label, clock) pairs
    """
    return [
        ("c1", VectorClock({"A": 1})),
        ("c2", VectorClock({"A": 2, "B": 1})),
        ("c3", VectorClock({"B": 3})),
        ("c4", VectorClock({"A": 2, "B": 3, "C": 1})),
        ("c5", VectorClock({"A": 1})),
    ]


@pytest.fixture
def clock_file(tmp_path, sample_clocks):
    """Write `sample_clocks` to a CSV clock file.

    Returns:
        Path: Location of the written file
    """
    path = tmp_path / "clocks.csv"
    lines = ["id,vc"]
    for label, clock in sample_clocks:
        lines.append(f"{label},{';'.join(f'{k}:{v}' for k, v in clock.items())}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return path
