"""Prefix Trie -- character-per-edge trie with pruning erase."""

from prefixtrie.node import TrieNode
from prefixtrie.trie import Trie
from prefixtrie.wordlist import WordList

__all__ = [
    "Trie",
    "TrieNode",
    "WordList",
]
