"""Prefix trees for word lookup and counting."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    is_end: bool = False


@dataclass
class _CountingNode:
    children: dict[str, _CountingNode] = field(default_factory=dict)
    ends: int = 0
    prefixes: int = 0


class Trie:
    """A set of words supporting exact and prefix lookup."""

    def __init__(self) -> None:
        self._root = _Node()

    def _walk(self, word: str) -> _Node | None:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add ``word`` to the trie."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.is_end = True

    def search(self, word: str) -> bool:
        """Whether ``word`` was inserted."""
        node = self._walk(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """Whether any inserted word begins with ``prefix``."""
        return self._walk(prefix) is not None


class CountingTrie:
    """A multiset of words counting exact occurrences and prefixes."""

    def __init__(self) -> None:
        self._root = _CountingNode()

    def _walk(self, word: str) -> _CountingNode | None:
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add one occurrence of ``word``."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _CountingNode())
            node.prefixes += 1
        node.ends += 1

    def count_words_equal_to(self, word: str) -> int:
        """Number of stored occurrences of ``word``."""
        node = self._walk(word)
        return 0 if node is None else node.ends

    def count_words_starting_with(self, prefix: str) -> int:
        """Number of stored words that begin with ``prefix``."""
        node = self._walk(prefix)
        return 0 if node is None else node.prefixes

    def erase(self, word: str) -> None:
        """Remove one occurrence of ``word``."""
        node = self._root
        for ch in word:
            node = node.children.get(ch)
            if node is None:
                return
            node.prefixes -= 1
        node.ends -= 1