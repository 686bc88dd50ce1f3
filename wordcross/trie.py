"""A lowercase trie holding words with their hints."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from itertools import islice
from typing import Iterator, Protocol


class _RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass(eq=False)
class TrieNode:
    """One letter position in the trie."""

    children: dict[str, TrieNode] = field(default_factory=dict)
    is_end: bool = False
    hint: str = ""
    index: int | None = None
    used: bool = False

    def count_words(self) -> int:
        """Number of words ending at or below this node, used or not."""
        return int(self.is_end) + sum(
            child.count_words() for child in self.children.values()
        )

    def _walk(self, prefix: str) -> Iterator[tuple[str, TrieNode]]:
        yield prefix, self
        for letter in sorted(self.children):
            yield from self.children[letter]._walk(prefix + letter)

    def _nodes(self) -> Iterator[TrieNode]:
        yield self
        for child in self.children.values():
            yield from child._nodes()


class Trie:
    """Words of lowercase letters, each with a hint and an optional index."""

    def __init__(self) -> None:
        self.root = TrieNode()

    def _find(self, word: str) -> TrieNode | None:
        node = self.root
        for letter in word:
            node = node.children.get(letter)
            if node is None:
                return None
        return node

    def insert(self, word: str, hint: str = "", index: int | None = None) -> None:
        """Add ``word`` with its hint; an index given is stored with it."""
        bad = [letter for letter in word if letter not in string.ascii_lowercase]
        if bad:
            raise ValueError(f"word {word!r} holds characters other than a-z")
        node = self.root
        for letter in word:
            node = node.children.setdefault(letter, TrieNode())
        node.is_end = True
        node.hint = hint
        if index is not None:
            node.index = index

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, str):
            return False
        node = self._find(word)
        return node is not None and node.is_end

    def index_of(self, word: str) -> int | None:
        """The index stored with ``word``, or None if it has none or is absent."""
        node = self._find(word)
        if node is None or not node.is_end:
            return None
        return node.index

    def count_with_prefix(self, prefix: str) -> int:
        """Number of words starting with the letter ``prefix``."""
        child = self.root.children.get(prefix)
        return child.count_words() if child is not None else 0

    def random_word(
        self, prefix: str, rng: _RandomSource, mark_used: bool = False
    ) -> tuple[str, str, int | None] | None:
        """Pick a random unused word starting with ``prefix``.

        A position is drawn among all words under the prefix, used ones
        included, and the unused word at that position in alphabetical
        order is returned as ``(word, hint, index)``. None is returned when
        there is no such word.
        """
        child = self.root.children.get(prefix)
        if child is None:
            return None
        total = child.count_words()
        if total == 0:
            return None
        target = rng.randrange(total)
        available = (
            (word, node)
            for word, node in child._walk(prefix)
            if node.is_end and not node.used
        )
        picked = next(islice(available, target, None), None)
        if picked is None:
            return None
        word, node = picked
        if mark_used:
            node.used = True
        return word, node.hint, node.index

    def reset_used(self) -> None:
        """Make every word available to ``random_word`` again."""
        for node in self.root._nodes():
            node.used = False