"""Prefix tree over lowercase ASCII words."""

from __future__ import annotations

import string
from dataclasses import dataclass, field

_ALPHABET = frozenset(string.ascii_lowercase)


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """A set of words made of the letters a-z."""

    def __init__(self) -> None:
        self._root = _Node()

    def insert(self, word: str) -> None:
        """Add ``word``; raise ValueError if it holds a character outside a-z."""
        bad = set(word) - _ALPHABET
        if bad:
            raise ValueError(f"unsupported characters: {''.join(sorted(bad))!r}")
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Return True if ``word`` was inserted as a whole word."""
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                return False
            node = nxt
        return node.is_end

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)