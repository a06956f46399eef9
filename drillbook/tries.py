"""Prefix trees: word storage, lookup, removal and prefix suggestions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class _Node:
    children: dict[str, _Node] = field(default_factory=dict)
    terminal: bool = False


def _words_under(node: _Node, prefix: str) -> Iterator[str]:
    """Yield every word stored at or below ``node``, in lexicographic order."""
    if node.terminal:
        yield prefix
    for ch in sorted(node.children):
        yield from _words_under(node.children[ch], prefix + ch)


class Trie:
    """A tree of characters in which each stored word is a path from the root."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self._root = _Node()
        for word in words:
            self.insert(word)

    def insert(self, word: str) -> None:
        """Store ``word``; inserting a word already present changes nothing."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _Node())
        node.terminal = True

    def _find(self, word: str) -> _Node | None:
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return None
            node = child
        return node

    def search(self, word: str) -> bool:
        """Return True if ``word`` itself was stored, not merely a longer word it begins."""
        node = self._find(word)
        return node is not None and node.terminal

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.search(word)

    def remove(self, word: str) -> bool:
        """Remove ``word`` and prune nodes no other word needs.

        Returns True if the word was present and has been removed.
        """
        path: list[tuple[_Node, str]] = []
        node = self._root
        for ch in word:
            child = node.children.get(ch)
            if child is None:
                return False
            path.append((node, ch))
            node = child
        if not node.terminal:
            return False
        node.terminal = False
        for parent, ch in reversed(path):
            child = parent.children[ch]
            if child.terminal or child.children:
                break
            del parent.children[ch]
        return True

    def suggestions(self, query: str) -> list[str]:
        """Return the stored words that begin with the longest stored prefix of ``query``.

        Characters of ``query`` are followed as far as the tree allows; every
        word below that point is returned in lexicographic order. A query whose
        first character matches nothing therefore yields every stored word.
        """
        node = self._root
        matched: list[str] = []
        for ch in query:
            child = node.children.get(ch)
            if child is None:
                break
            matched.append(ch)
            node = child
        return list(_words_under(node, "".join(matched)))


def phone_directory(contacts: Iterable[str], query: str) -> list[str]:
    """Return the contacts suggested for ``query``; an empty list when there are none."""
    return Trie(contacts).suggestions(query)