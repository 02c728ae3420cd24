import pytest

from prefixtrie import Trie, TrieNode

CHARS = ["a", "1", "?", "\\", "\n", " "]


def test_new_node_is_non_terminal_leaf():
    node = TrieNode()
    assert node.is_leaf()
    assert not node.is_terminal()
    assert repr(node) == "False"


@pytest.mark.parametrize("c", CHARS)
def test_child_for_missing_is_none(c):
    assert TrieNode().child_for(c) is None


def test_child_for_none_is_none():
    assert TrieNode().child_for(None) is None


@pytest.mark.parametrize("c", CHARS)
def test_child_or_create_makes_new_node(c):
    trie = Trie.empty()
    assert trie.root.child_for(c) is None
    created = trie.root.child_or_create(c)
    assert created is not None
    assert created.is_leaf()
    assert not created.is_terminal()
    assert trie.root.child_for(c) is created


@pytest.mark.parametrize("c", CHARS)
def test_child_or_create_returns_existing(c):
    trie = Trie.empty()
    trie.insert(c)
    expected = trie.root.child_for(c)
    assert trie.root.child_or_create(c) is expected
    assert trie.root.child_or_create(c) is expected


def test_set_terminal_false():
    trie = Trie.empty()
    trie.insert("a")
    child = trie.root.child_for("a")
    assert child.is_terminal()
    child.set_terminal(False)
    assert not child.is_terminal()


def test_remove_child_detaches_only_that_child():
    node = TrieNode()
    a = node.child_or_create("a")
    b = node.child_or_create("b")
    assert node.remove_child("a") is a
    assert node.child_for("a") is None
    assert node.child_for("b") is b
    assert node.remove_child("a") is None


def test_repr_shows_children_and_flag():
    node = TrieNode()
    node.child_or_create("x").set_terminal(True)
    assert repr(node) == "{'x': True}, False"
