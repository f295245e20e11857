# index/entry.py

"""
IndexEntry
==========

One key slot of a tree page: either a stored clock (leaf) or the merged
summary of a subtree (internal). The key may arrive from the host still in
its encoded byte form; `clock()` decodes it on demand. Entries are never
modified in place; `with_key` builds a replacement.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

from model.codec import decode
from model.exceptions import ClockFormatError
from model.vector_clock import VectorClock
from utils.logger import get_logger

logger = get_logger()

EntryKey = Union[VectorClock, bytes, None]


@dataclass(frozen=True, slots=True)
class IndexEntry:
    key: EntryKey
    leaf: bool = True

    def clock(self) -> Optional[VectorClock]:
        """Decoded clock of this entry, or None if absent or undecodable."""
        if self.key is None or isinstance(self.key, VectorClock):
            return self.key
        try:
            return decode(self.key)
        except ClockFormatError as e:
            logger.debug(f"Undecodable index entry: {e}")
            return None

    def with_key(self, key: EntryKey) -> IndexEntry:
        return IndexEntry(key, self.leaf)

    def __str__(self) -> str:
        kind = "leaf" if self.leaf else "node"
        return f"{kind}:{self.clock()}"
