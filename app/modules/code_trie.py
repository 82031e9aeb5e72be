from __future__ import annotations
from typing import Dict, List

from record_parser import CharRecord

class TrieNode:
    __slots__ = ("children", "records")

    def __init__(self):
        self.children: Dict[str, TrieNode] = {}
        self.records: List[CharRecord] = []

class CodeTrie:
    """Prefix index over Four Corner codes, one edge per code character."""

    def __init__(self):
        self.root = TrieNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def insert(self, code: str, record: CharRecord) -> None:
        if not code: return
        node = self.root
        for ch in code:
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode()
            node = child
        node.records.append(record)
        self._size += 1

    def _find(self, prefix: str):
        node = self.root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None: return None
        return node

    def search(self, prefix: str) -> List[CharRecord]:
        if not prefix: return []
        node = self._find(prefix)
        if node is None: return []
        # pre-order: a node's own records, then its children in insertion order
        out: List[CharRecord] = []
        stack = [node]
        while stack:
            cur = stack.pop()
            out.extend(cur.records)
            stack.extend(reversed(list(cur.children.values())))
        return out
