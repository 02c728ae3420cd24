"""Prefix trie with insert, lookup and pruning erase."""

from __future__ import annotations

import logging

from prefixtrie.node import TrieNode

log = logging.getLogger("prefixtrie")

_FACTORY_TOKEN = object()


class _RootNode(TrieNode):
    """Root of a trie. It is never terminal, whatever callers ask for."""

    __slots__ = ()

    def set_terminal(self, value: bool) -> None:
        if value:
            log.debug("Ignoring request to mark the root node terminal")


class Trie:
    """Prefix trie keyed by character sequences.

    Build one with :meth:`empty`. Every stored word is one path from
    ``root``, one edge per character.

    >>> t = Trie.empty()
    >>> t.insert("car")
    >>> t.insert("carpet")
    >>> t.erase("car")
    True
    >>> t.search("car"), t.search("carpet")
    (False, True)
    """

    __slots__ = ("root",)

    def __init__(self, _token: object = None):
        if _token is not _FACTORY_TOKEN:
            raise TypeError("Trie cannot be instantiated directly; use Trie.empty()")
        self.root: TrieNode = _RootNode()

    @classmethod
    def empty(cls) -> Trie:
        """A trie holding no words."""
        return cls(_FACTORY_TOKEN)

    # public API

    def insert(self, word: str | None) -> None:
        """Store ``word``, creating one node per missing character.

        ``None`` is ignored. The empty string walks no edges and lands on
        the root, which stays non-terminal.
        """
        if word is None:
            return
        node = self.root
        for ch in word:
            node = node.child_or_create(ch)
        node.set_terminal(True)

    def is_empty(self) -> bool:
        """True if the root has no children."""
        return self.root.is_leaf()

    def search(self, word: str | None) -> bool:
        """True if ``word`` was inserted and not erased since."""
        node = self.depth_first_search(word)
        return node is not None and node.is_terminal()

    def depth_first_search(self, word: str | None) -> TrieNode | None:
        """Follow ``word`` from the root one character at a time.

        Returns the node reached once every character is consumed, terminal
        or not, or None as soon as a character has no matching child. There
        is no backtracking. The empty string returns the root itself.
        """
        if word is None:
            return None
        node = self.root
        for ch in word:
            node = node.child_for(ch)
            if node is None:
                return None
        return node

    def erase(self, word: str | None) -> bool:
        """Remove ``word`` and prune the nodes nobody else needs.

        Returns True whenever the character path for ``word`` exists, even
        if its last node was not terminal; use :meth:`search` first to learn
        whether ``word`` was actually stored. Returns False, touching
        nothing, when the path is missing or ``word`` is None.
        """
        if self.depth_first_search(word) is None:
            return False
        self._remove_nodes(self.root, word, 0)
        return True

    # internals

    def _remove_nodes(self, node: TrieNode, word: str, index: int) -> bool:
        """Unwind ``word`` below ``node``, starting at ``word[index]``.

        Returns True if ``node`` ended up as a non-terminal leaf that its
        parent should drop. Children are only removed bottom-up, so the
        root itself is never removed.
        """
        if index == len(word):
            if not node.is_terminal():
                return False
            node.set_terminal(False)
            return node.is_leaf()

        ch = word[index]
        child = node.child_for(ch)
        if child is None:
            return False

        if self._remove_nodes(child, word, index + 1) and not child.is_terminal():
            node.remove_child(ch)
            log.debug("Pruned node %r at depth %d of %r", ch, index + 1, word)
            # a branching point still serves the other words below it
            return node.is_leaf()
        return False

    def __contains__(self, word: str | None) -> bool:
        return self.search(word)

    def __str__(self) -> str:
        children = self.root.children
        if not children:
            return "{}"
        return "\n".join(f"{{{ch} -> {child!r}}}" for ch, child in children.items())
