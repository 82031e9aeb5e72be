from __future__ import annotations
from typing import List, Optional
import logging

from code_trie import CodeTrie
from ingest import IngestResult, IngestState
from record_parser import CharRecord

logger = logging.getLogger(__name__)

def rank_results(matches: List[CharRecord], query: str, limit: int = 100) -> List[CharRecord]:
    # stable sort, so identical codes keep trie traversal order
    ordered = sorted(matches, key=lambda r: (r.code != query, r.code))
    return ordered[:limit]

class LookupSession:
    """Query state plus the currently published index."""

    def __init__(self, max_query_length: int = 5, max_results: int = 100):
        self.max_query_length = max_query_length
        self.max_results = max_results
        self.index: Optional[CodeTrie] = None
        self.count = 0
        self.error: Optional[str] = None
        self.needs_manual_input = False
        self.query = ""
        self._generation = 0

    def begin_load(self) -> int:
        self._generation += 1
        return self._generation

    def publish(self, ticket: int, result: IngestResult) -> bool:
        if ticket != self._generation:
            logger.info("Discarding stale load result (ticket %d, current %d)", ticket, self._generation)
            return False
        if result.state is IngestState.READY:
            self.index, self.count = result.index, result.count
            self.error, self.needs_manual_input = None, False
        else:
            self.error = result.error
            self.needs_manual_input = result.needs_manual_input
        return True

    def submit_digit(self, d) -> None:
        d = str(d)
        if len(d) != 1 or d not in "0123456789":
            raise ValueError(f"Not a digit: {d!r}")
        if len(self.query) < self.max_query_length:
            self.query += d

    def delete_last_digit(self) -> None:
        self.query = self.query[:-1]

    def clear_query(self) -> None:
        self.query = ""

    @property
    def results(self) -> List[CharRecord]:
        if self.index is None or not self.query: return []
        return rank_results(self.index.search(self.query), self.query, self.max_results)
