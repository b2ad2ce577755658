"""Tests for path resolution."""

import pytest

from vphys_core.getter import resolve, resolve_node, split_segment
from vphys_core.reader import parse
from vphys_core.values import KArray, KObject, KScalar


TREE = parse(
    """{
        name = "box"
        items = [ { v = 1 }, { v = 2 }, { v = 3 } ]
        blob = #[ 01 02 ]
        nested = { deep = { leaf = ok } }
        flat = [ a, b ]
    }"""
)


# ---------------------------------------------------------------------------
# split_segment
# ---------------------------------------------------------------------------

def test_split_plain_key():
    assert split_segment("m_hulls") == ("m_hulls", None)

def test_split_indexed_key():
    assert split_segment("m_hulls[12]") == ("m_hulls", 12)

@pytest.mark.parametrize("segment", ["a[x]", "a[1", "a[-1]", "a[1]b", "a[1]\n"])
def test_split_malformed(segment):
    assert split_segment(segment) is None


# ---------------------------------------------------------------------------
# resolve
# ---------------------------------------------------------------------------

def test_resolve_scalar():
    assert resolve(TREE, "name") == '"box"'

def test_resolve_nested():
    assert resolve(TREE, "nested.deep.leaf") == "ok"

def test_resolve_array_element_field():
    assert resolve(TREE, "items[1].v") == "2"

def test_resolve_array_scalar_element():
    assert resolve(TREE, "flat[1]") == "b"

def test_resolve_blob():
    assert resolve(TREE, "blob") == "01 02"

def test_resolve_out_of_bounds_is_empty():
    assert resolve(TREE, "items[5].v") == ""

def test_resolve_missing_key_is_empty():
    assert resolve(TREE, "nope") == ""
    assert resolve(TREE, "nested.nope.leaf") == ""

def test_resolve_container_is_empty():
    assert resolve(TREE, "nested") == ""
    assert resolve(TREE, "items") == ""

def test_resolve_index_on_non_array_is_empty():
    assert resolve(TREE, "name[0]") == ""

def test_resolve_key_on_scalar_is_empty():
    assert resolve(TREE, "name.more") == ""

def test_resolve_index_only_segment_is_empty():
    assert resolve(TREE, "[0]") == ""

def test_resolve_malformed_index_is_empty():
    assert resolve(TREE, "items[x].v") == ""

def test_resolve_last_write_wins():
    tree = parse("{ a = { k = 1 } a = { k = 2 } }")
    assert resolve(tree, "a.k") == "2"


# ---------------------------------------------------------------------------
# resolve_node
# ---------------------------------------------------------------------------

def test_resolve_node_returns_container():
    node = resolve_node(TREE, "items")
    assert isinstance(node, KArray)
    assert len(node) == 3

def test_resolve_node_object():
    assert isinstance(resolve_node(TREE, "nested.deep"), KObject)

def test_resolve_node_missing():
    assert resolve_node(TREE, "items[3]") is None

def test_resolve_node_scalar():
    assert resolve_node(TREE, "flat[0]") == KScalar("a")

def test_resolve_trailing_newline_is_empty():
    assert resolve(TREE, "items[1]\n") == ""
    assert resolve(TREE, "name\n") == ""
