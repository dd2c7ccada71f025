# Mansion/suspects.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from Mansion.rooms import MAX_TEXT, bounded

DEFAULT_BUCKETS = 7


@dataclass(frozen=True)
class SuspectBinding:
    clue: str
    suspect: str
    next: Optional["SuspectBinding"] = None   # rest of the bucket chain


def hash_clue(key: str, bucket_count: int = DEFAULT_BUCKETS) -> int:
    """
    Sum of the key's byte values modulo the bucket count.
    Weak on purpose: anagrams share a bucket.
    """
    return sum(key.encode("utf-8")) % bucket_count


class SuspectTable:
    """
    Chained hash table from clue text to suspect name.

    Inserts push onto the head of the bucket chain and never update in place,
    so the most recent binding for a key shadows older ones on lookup.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKETS, *, limit: int = MAX_TEXT) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be >= 1, got {bucket_count}")
        self.bucket_count = bucket_count
        self.limit = limit
        self._buckets: List[Optional[SuspectBinding]] = [None] * bucket_count
        self._size = 0

    def bucket_of(self, clue: str) -> int:
        return hash_clue(clue, self.bucket_count)

    def insert(self, clue: str, suspect: str) -> None:
        clue = bounded(clue, self.limit)
        idx = self.bucket_of(clue)
        self._buckets[idx] = SuspectBinding(clue, bounded(suspect, self.limit), self._buckets[idx])
        self._size += 1

    def lookup(self, clue: str) -> Optional[str]:
        clue = bounded(clue, self.limit)
        binding = self._buckets[self.bucket_of(clue)]
        while binding is not None:
            if binding.clue == clue:
                return binding.suspect
            binding = binding.next
        return None

    def chain(self, index: int) -> List[str]:
        """Keys stored in one bucket, head first."""
        out: List[str] = []
        binding = self._buckets[index]
        while binding is not None:
            out.append(binding.clue)
            binding = binding.next
        return out

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def destroy(self) -> int:
        """Drop every chain. Returns how many bindings were released."""
        released = 0
        for idx in range(self.bucket_count):
            released += len(self.chain(idx))
            self._buckets[idx] = None
        self._size = 0
        return released


def build_suspect_table(
    facts: Iterable[Tuple[str, str]],
    bucket_count: int = DEFAULT_BUCKETS,
    *,
    limit: int = MAX_TEXT,
) -> SuspectTable:
    table = SuspectTable(bucket_count, limit=limit)
    for clue, suspect in facts:
        table.insert(clue, suspect)
    return table
