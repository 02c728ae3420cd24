"""Trie node: a character-keyed child map plus a terminal flag."""

from __future__ import annotations


class TrieNode:
    """Single node in the prefix trie.

    Each child is owned by exactly one node and there is no link back to
    the parent, so anything walking upwards has to remember its own path.
    """

    __slots__ = ("children", "_terminal")

    def __init__(self):
        self.children: dict[str, TrieNode] = {}
        self._terminal: bool = False

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return not self.children

    def is_terminal(self) -> bool:
        """True if a stored word ends at this node."""
        return self._terminal

    def set_terminal(self, value: bool) -> None:
        self._terminal = value

    def child_for(self, c: str | None) -> TrieNode | None:
        """Child for ``c``, or None."""
        return self.children.get(c)

    def child_or_create(self, c: str) -> TrieNode:
        """Child for ``c``, creating an empty one first if missing."""
        child = self.children.get(c)
        if child is None:
            child = TrieNode()
            self.children[c] = child
        return child

    def remove_child(self, c: str) -> TrieNode | None:
        """Detach and return the child for ``c``, or None."""
        return self.children.pop(c, None)

    def __repr__(self) -> str:
        if self.is_leaf():
            return str(self._terminal)
        return f"{self.children}, {self._terminal}"
