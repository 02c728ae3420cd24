"""Terminal mode for poking at a trie interactively."""

from __future__ import annotations

from prefixtrie.wordlist import WordList

COMMANDS = (
    ("insert WORD", "store a word"),
    ("search WORD", "is the word stored?"),
    ("erase WORD", "remove a word and prune unused nodes"),
    ("walk WORD", "follow the path for WORD (prefixes too)"),
    ("empty", "is the trie empty?"),
    ("show", "print the root's children"),
    ("help", "show this list"),
    ("quit", "leave"),
)


def print_help() -> None:
    print("Commands:")
    for usage, text in COMMANDS:
        print(f"  {usage:<14} -- {text}")


def handle_command(words: WordList, line: str) -> bool:
    """Run one command line against ``words``. Returns False on quit."""
    parts = line.split(maxsplit=1)
    if not parts:
        return True
    cmd = parts[0].lower()
    arg = parts[1] if len(parts) > 1 else None
    trie = words.trie

    if cmd in ("quit", "exit", "done"):
        return False
    if cmd == "help":
        print_help()
    elif cmd == "empty":
        print("  empty" if trie.is_empty() else "  not empty")
    elif cmd == "show":
        print(trie)
    elif cmd in ("insert", "search", "erase", "walk"):
        if arg is None:
            print(f"  Format: {cmd} WORD")
        elif cmd == "insert":
            words.add(arg)
            print(f"  Inserted '{arg}'")
        elif cmd == "search":
            found = trie.search(arg)
            print(f"  '{arg}' {'found' if found else 'not found'}")
        elif cmd == "erase":
            stored = trie.search(arg)
            if words.remove(arg) or trie.erase(arg):
                note = "" if stored else " (path only, was not a stored word)"
                print(f"  Erased '{arg}'{note}")
            else:
                print(f"  No path for '{arg}'")
        else:
            node = trie.depth_first_search(arg)
            if node is None:
                print(f"  No path for '{arg}'")
            else:
                kind = "terminal" if node.is_terminal() else "prefix"
                leaf = ", leaf" if node.is_leaf() else ""
                print(f"  '{arg}' reaches a {kind} node{leaf}")
    else:
        print(f"  Unknown command '{cmd}'. Type help for the list.")
    return True


def run_cli(words: WordList) -> None:
    """Run in terminal mode."""
    print("\n" + "=" * 60)
    print("  PREFIX TRIE -- Interactive Mode")
    print("=" * 60)
    print(f"\n{len(words):,} words loaded.\n")
    print_help()
    print()

    while True:
        try:
            inp = input("  trie> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not handle_command(words, inp):
            break
