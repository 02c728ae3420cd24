"""Entry point: ``python -m prefixtrie``."""

from __future__ import annotations

import argparse
import logging

from prefixtrie.cli import run_cli
from prefixtrie.wordlist import WordList


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Prefix Trie -- insert, search and erase words interactively",
    )
    parser.add_argument("--words", type=str, default=None,
                        help="Path to a word list file (one word per line)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    run_cli(WordList(args.words))


if __name__ == "__main__":
    main()
