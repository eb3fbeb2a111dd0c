"""Tests for error nodes."""

import dataclasses

import pytest

from schemacheck.errors import ErrorNode, error, merge_errors
from schemacheck.path import Path


def test_error_snapshots_path():
    """Test that error() copies the path keys at creation time."""
    path = Path({"a": 1}, ["a"])
    errors = error("bad", path)
    path.pop()
    assert errors == (ErrorNode("bad", ("a",)),)


def test_error_accepts_key_sequence():
    """Test that a plain key list is accepted as the path."""
    (node,) = error("bad", ["a", 0])
    assert node.path == ("a", 0)
    assert str(node) == "a -> 0: bad"


def test_error_nodes_are_immutable():
    """Test that error nodes cannot be modified."""
    (node,) = error("bad", [])
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.message = "changed"


def test_empty_node_rejected():
    """Test that a node without message or children is refused."""
    with pytest.raises(ValueError):
        ErrorNode("", ())


def test_with_children_returns_new_node():
    """Test manual aggregation of children."""
    (parent,) = error("parent", [])
    (child,) = error("child", ["x"])
    extended = parent.with_children(child)
    assert parent.children == ()
    assert extended.children == (child,)
    assert [(d, n.message) for d, n in extended.walk()] == [(0, "parent"), (1, "child")]


def test_merge_errors():
    """Test merging keeps order and drops successes."""
    first = error("one", [])
    second = error("two", [])
    assert merge_errors(None, None) is None
    assert merge_errors() is None
    assert merge_errors(first, None, second) == first + second
