"""Word list loader that fills a trie from a file or an iterable."""

from __future__ import annotations

import logging
import os
from typing import Iterable

from prefixtrie.trie import Trie

log = logging.getLogger("prefixtrie")

DEFAULT_WORD_FILES = (
    "words.txt",
    "dictionary.txt",
    "/usr/share/dict/words",
)

FALLBACK_WORDS = (
    "bat", "bar", "barn", "barm", "cat", "car", "carp", "carpet",
    "cell", "cola", "cut", "dog", "but", "button", "home", "homespun",
)


class WordList:
    """Trie-backed set of words.

    Words are taken from ``words`` when given, otherwise from the first
    existing file among ``path`` and :data:`DEFAULT_WORD_FILES`. Each line
    is stripped; blank lines are skipped.
    """

    def __init__(self, path: str | None = None, words: Iterable[str] | None = None):
        self.trie = Trie.empty()
        self.count = 0
        if words is not None:
            self._add_all(words)
        else:
            self._load(path)

    def _load(self, path: str | None) -> None:
        search_paths: list[str] = []
        if path:
            search_paths.append(path)
        search_paths.extend(DEFAULT_WORD_FILES)

        for candidate in search_paths:
            if not os.path.exists(candidate):
                log.debug("Word list %s not found, skipping", candidate)
                continue
            with open(candidate, "r", encoding="utf-8") as f:
                self._add_all(line.strip() for line in f)
            if self.count:
                log.info("Loaded %s words from %s", f"{self.count:,}", candidate)
                return

        log.warning("No word list found -- using built-in sample words.")
        self._add_all(FALLBACK_WORDS)

    def _add_all(self, words: Iterable[str]) -> None:
        for word in words:
            if word:
                self.add(word)

    def add(self, word: str | None) -> None:
        if not word or self.trie.search(word):
            return
        self.trie.insert(word)
        self.count += 1

    def remove(self, word: str | None) -> bool:
        """Erase ``word``; True only if it was actually stored."""
        if not self.trie.search(word):
            return False
        self.trie.erase(word)
        self.count -= 1
        return True

    def is_valid(self, word: str | None) -> bool:
        return self.trie.search(word)

    def __contains__(self, word: str | None) -> bool:
        return self.is_valid(word)

    def __len__(self) -> int:
        return self.count
