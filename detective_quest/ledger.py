"""Clue -> suspect association table with per-suspect evidence counts.

A fixed number of buckets, indexed by the sum of the clue's character codes.
Each bucket chains one entry per distinct clue text, and each entry chains
the suspects that clue pointed at, with a count per suspect.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_BUCKET_COUNT = 10


def hash_key(key: str, size: int = DEFAULT_BUCKET_COUNT) -> int:
    """Sum of the key's character codes, modulo the bucket count."""
    return sum(ord(ch) for ch in key) % size


@dataclass
class SuspectTally:
    """Evidence count for one suspect, linked to the next tally in the chain."""
    suspect_name: str
    count: int = 1
    next: Optional["SuspectTally"] = None


@dataclass
class LedgerBucket:
    """One clue key and the chain of suspects associated with it.

    `next_entry` links clues whose texts hash to the same bucket index.
    """
    clue_text: str
    suspects: Optional[SuspectTally] = None
    next_entry: Optional["LedgerBucket"] = None

    def iter_tallies(self) -> Iterator[SuspectTally]:
        tally = self.suspects
        while tally is not None:
            yield tally
            tally = tally.next


class SuspectLedger:
    """Hash table mapping clue texts to suspect tallies.

    Counts only ever increase during a session.
    """

    def __init__(self, bucket_count: int = DEFAULT_BUCKET_COUNT):
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self.buckets: List[Optional[LedgerBucket]] = [None] * bucket_count
        self._entries = 0

    def _index(self, clue: str) -> int:
        return hash_key(clue, self.bucket_count)

    def _find_entry(self, clue: str) -> Optional[LedgerBucket]:
        entry = self.buckets[self._index(clue)]
        while entry is not None:
            if entry.clue_text == clue:
                return entry
            entry = entry.next_entry
        return None

    def _iter_entries(self) -> Iterator[LedgerBucket]:
        for head in self.buckets:
            entry = head
            while entry is not None:
                yield entry
                entry = entry.next_entry

    def associate(self, clue: str, suspect: str) -> int:
        """Record that `clue` points at `suspect`.

        Creates the clue entry on first use. A suspect already on the clue's
        chain has its count incremented; otherwise a new tally with count 1
        is appended at the tail. Returns the suspect's updated count for
        this clue.
        """
        index = self._index(clue)
        entry = self._find_entry(clue)
        if entry is None:
            entry = LedgerBucket(clue_text=clue)
            # Append so the first clue stays at the head of the bucket
            if self.buckets[index] is None:
                self.buckets[index] = entry
            else:
                tail = self.buckets[index]
                while tail.next_entry is not None:
                    tail = tail.next_entry
                tail.next_entry = entry
                logger.debug(f"Bucket {index} collision: '{clue}' chained after '{tail.clue_text}'")
            self._entries += 1

        previous = None
        tally = entry.suspects
        while tally is not None:
            if tally.suspect_name == suspect:
                tally.count += 1
                logger.debug(f"'{suspect}' now has {tally.count} mark(s) from '{clue}'")
                return tally.count
            previous = tally
            tally = tally.next

        new_tally = SuspectTally(suspect_name=suspect)
        if previous is None:
            entry.suspects = new_tally
        else:
            previous.next = new_tally
        logger.debug(f"'{clue}' associated with '{suspect}' (bucket {index})")
        return new_tally.count

    def find_primary_suspect(self, clue: str) -> Optional[str]:
        """Name at the head of the clue's suspect chain, or None if unknown."""
        entry = self._find_entry(clue)
        if entry is None or entry.suspects is None:
            return None
        return entry.suspects.suspect_name

    def suspects_for(self, clue: str) -> List[Tuple[str, int]]:
        """All (suspect, count) pairs recorded for a clue, in chain order."""
        entry = self._find_entry(clue)
        if entry is None:
            return []
        return [(tally.suspect_name, tally.count) for tally in entry.iter_tallies()]

    def total_for(self, suspect: str) -> int:
        """Total evidence for a suspect across every clue in the ledger."""
        total = 0
        for entry in self._iter_entries():
            for tally in entry.iter_tallies():
                if tally.suspect_name == suspect:
                    total += tally.count
        return total

    def totals(self) -> Dict[str, int]:
        """Evidence totals for every suspect seen, in bucket order."""
        result: Dict[str, int] = {}
        for entry in self._iter_entries():
            for tally in entry.iter_tallies():
                result[tally.suspect_name] = result.get(tally.suspect_name, 0) + tally.count
        return result

    def __len__(self) -> int:
        """Number of distinct clues recorded."""
        return self._entries
