# model/codec.py
# This file is part of Vectime - Causal Indexing for Vector Clocks
#
# Text and byte encodings of vector clock values

"""Serialization of VectorClock values.

Three forms are supported:

- text: canonical JSON object with sorted keys, e.g. ``{"A": 1, "B": 2}``
- bytes: UTF-8 encoding of the text form (the stored representation)
- compact: the trace-file column form ``A:1;B:2``

Every decoder validates its input and raises ClockFormatError on malformed
data, so ``decode(encode(v)) == v`` for every valid clock. The compact form
only carries ids without `:`, `;` or surrounding whitespace; `to_compact`
refuses any other id rather than write text that reads back differently.
"""

import json
from typing import Union

from .exceptions import ClockFormatError
from .vector_clock import VectorClock


def to_text(clock: VectorClock) -> str:
    """Render a clock as canonical JSON."""
    return json.dumps(clock.as_dict(), sort_keys=True)


def from_text(text: str) -> VectorClock:
    """Parse a clock from its JSON text form.

    Raises:
        ClockFormatError: If the text is not a JSON object of id → integer
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ClockFormatError(f"Invalid clock JSON: {e}") from e
    except RecursionError as e:
        raise ClockFormatError("Clock JSON is nested too deeply") from e

    if not isinstance(data, dict):
        raise ClockFormatError(f"Clock must be a JSON object, got {type(data).__name__}")

    return VectorClock(data)


def encode(clock: VectorClock) -> bytes:
    return to_text(clock).encode("utf-8")


def decode(raw: Union[bytes, bytearray, memoryview]) -> VectorClock:
    """Inverse of `encode`.

    Raises:
        ClockFormatError: If the bytes are not UTF-8 clock JSON
    """
    try:
        text = bytes(raw).decode("utf-8")
    except UnicodeDecodeError as e:
        raise ClockFormatError(f"Clock bytes are not valid UTF-8: {e}") from e
    return from_text(text)


def to_compact(clock: VectorClock) -> str:
    """Render `clock` as `A:1;B:2`.

    Raises:
        ClockFormatError: If an id is empty, has surrounding whitespace or
            contains `:` or `;`, none of which the compact form can carry
    """
    for pid in clock.keys():
        if not pid or pid != pid.strip() or ":" in pid or ";" in pid:
            raise ClockFormatError(f"Id cannot be written in compact form: {pid!r}")
    return ";".join(f"{pid}:{ts}" for pid, ts in clock.items())


def parse_compact(vc_str: str) -> VectorClock:
    """Parse semicolon-separated clock components.

    Args:
        vc_str: String like 'PA:1;PB:2;PC:0'

    Returns:
        VectorClock object

    Raises:
        ClockFormatError: If a component is not of the form id:counter or an
            id appears twice
    """
    if not vc_str.strip():
        return VectorClock({})

    clock = {}
    for component in vc_str.split(";"):
        component = component.strip()
        if not component:
            continue

        try:
            pid, ts_str = component.split(":", 1)
            pid = pid.strip()
            ts = int(ts_str.strip())
        except ValueError:
            raise ClockFormatError(f"Invalid vector clock component: {component}")

        if not pid:
            raise ClockFormatError(f"Missing id in vector clock component: {component}")
        if pid in clock:
            raise ClockFormatError(f"Duplicate id in vector clock: {pid}")
        clock[pid] = ts

    return VectorClock(clock)
