# termindex/TermTable.py
"""
Term table module.

A fixed-capacity hash table from normalized term to its occurrence records.
Collisions are resolved by chaining: each bucket is a list of distinct
term entries that is scanned linearly for an exact string match, so a
lookup costs O(chain length) rather than O(1) in the worst case.

The table can optionally grow (rehash into 2 * capacity + 1 buckets) once
the number of terms per bucket passes `max_load`.
"""

from typing import Callable, Dict, Iterator, List, Optional, Union

import numpy as np

TABLE_SIZE = 1007
BKDR_SEED = 131


def bkdr_hash(term: str) -> int:
    """
    BKDR string hash over code points, wrapped to 32 bits.
    """
    h = 0
    for ch in term:
        h = (h * BKDR_SEED + ord(ch)) & 0xFFFFFFFF
    return h


class Occurrence:
    """
    One term's presence in one document.
    """
    __slots__ = ("doc_id", "doc_name", "frequency")

    def __init__(self, doc_id: int, doc_name: str, frequency: int = 1):
        self.doc_id = doc_id
        self.doc_name = doc_name
        self.frequency = frequency

    def __repr__(self):
        return f"Occurrence({self.doc_id!r}, {self.doc_name!r}, {self.frequency!r})"


class TermEntry:
    """
    A term in a bucket chain and the occurrences it owns, keyed by doc_id.
    """
    __slots__ = ("term", "occurrences")

    def __init__(self, term: str):
        self.term = term
        self.occurrences: Dict[int, Occurrence] = {}

    def __repr__(self):
        return f"TermEntry({self.term!r}, {list(self.occurrences.values())!r})"


class TermTable:
    def __init__(self, capacity: int = TABLE_SIZE,
                 hash_func: Callable[[str], int] = bkdr_hash,
                 max_load: Optional[float] = None):
        # - hash_func: any deterministic str -> int, reduced modulo capacity here
        # - max_load: terms per bucket that triggers growth, None keeps the size fixed
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        if max_load is not None and max_load <= 0:
            raise ValueError("max_load must be positive")
        self.hash_func = hash_func
        self.max_load = max_load
        self._buckets: List[List[TermEntry]] = [[] for _ in range(capacity)]
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buckets)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, term: str) -> bool:
        return self.find_term(term) is not None

    def bucket_index(self, term: str) -> int:
        return self.hash_func(term) % len(self._buckets)

    # --- Chain scanning --- #

    def find_term(self, term: str) -> Optional[TermEntry]:
        """
        Read-only lookup. Returns None when the term is absent.
        """
        for entry in self._buckets[self.bucket_index(term)]:
            if entry.term == term:
                return entry
        return None

    def find_or_create_term(self, term: str) -> TermEntry:
        """
        Returns the entry for `term`, appending a new empty one to the end
        of its chain if it is not there yet.
        """
        entry = self.find_term(term)
        if entry is None:
            entry = TermEntry(term)
            self.add_term(entry)
        return entry

    def add_term(self, entry: TermEntry) -> None:
        """
        Link an entry whose term is not in the table yet. Growth, if due,
        happens first, so a failure leaves the table as it was.
        """
        if self.max_load is not None and (self._size + 1) / len(self._buckets) > self.max_load:
            self._grow()
        self._buckets[self.bucket_index(entry.term)].append(entry)
        self._size += 1

    def _grow(self):
        """
        Rehash every entry into 2 * capacity + 1 buckets, keeping chain order
        for entries that land together. The new buckets replace the old ones
        only once every entry has been placed.
        """
        buckets = [[] for _ in range(2 * len(self._buckets) + 1)]
        for chain in self._buckets:
            for entry in chain:
                buckets[self.hash_func(entry.term) % len(buckets)].append(entry)
        self._buckets = buckets

    # --- Iteration and diagnostics --- #

    def terms(self) -> Iterator[TermEntry]:
        for chain in self._buckets:
            yield from chain

    def chain(self, index: int) -> List[TermEntry]:
        return list(self._buckets[index])

    def chain_lengths(self) -> np.ndarray:
        return np.fromiter((len(c) for c in self._buckets), dtype=np.int64,
                           count=len(self._buckets))

    def stats(self) -> Dict[str, Union[int, float]]:
        lengths = self.chain_lengths()
        used = lengths[lengths > 0]
        return {
            "capacity": self.capacity,
            "terms": self._size,
            "load_factor": self._size / float(self.capacity),
            "used_buckets": int(used.size),
            "longest_chain": int(lengths.max()) if lengths.size else 0,
            "mean_chain": float(used.mean()) if used.size else 0.0,
        }
