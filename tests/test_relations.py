"""Tests for relationship and depth queries."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nestedtree import (
    FieldNames,
    get_children_tree,
    get_node_depth,
    get_node_depth_map,
    get_parent_tree,
    get_siblings_tree,
    includes_tree,
    is_leaf_node,
    is_root_node,
)
from nestedtree.testing import org_chart


@pytest.fixture
def forest():
    return org_chart()


def test_node_depth_map(forest):
    assert get_node_depth_map(forest) == {1: 1, 2: 2, 4: 3, 7: 4, 5: 3, 3: 2, 6: 3, 8: 1}


def test_node_depth_map_empty():
    assert get_node_depth_map([]) == {}


def test_node_depth_map_last_duplicate_wins():
    forest = [{"id": "x", "children": [{"id": "x"}]}]
    assert get_node_depth_map(forest) == {"x": 2}


def test_node_depth(forest):
    assert get_node_depth(forest, 1) == 1
    assert get_node_depth(forest, 7) == 4
    assert get_node_depth(forest, 404) is None


def test_get_parent_tree(forest):
    assert get_parent_tree(forest, 7) is forest[0]["children"][0]["children"][0]
    assert get_parent_tree(forest, 3) is forest[0]


def test_get_parent_tree_root_and_missing_are_both_none(forest):
    assert get_parent_tree(forest, 1) is None
    assert get_parent_tree(forest, 404) is None


def test_get_children_tree(forest):
    assert get_children_tree(forest, 1) is forest[0]["children"]
    assert get_children_tree(forest, 8) == []
    assert get_children_tree(forest, 404) == []
    assert get_children_tree([{"id": 1, "children": "x"}], 1) == []


def test_get_siblings_tree(forest):
    assert get_siblings_tree(forest, 5) is forest[0]["children"][0]["children"]
    assert get_siblings_tree(forest, 8) is forest
    assert get_siblings_tree(forest, 404) == []


def test_includes_tree(forest):
    assert includes_tree(forest, 7)
    assert not includes_tree(forest, 404)
    assert not includes_tree([], 1)


def test_includes_tree_strict_identity():
    forest = [{"id": 0}, {"id": ""}]
    assert includes_tree(forest, 0)
    assert includes_tree(forest, "")
    assert not includes_tree(forest, False)
    assert not includes_tree(forest, "0")


def test_is_root_node(forest):
    assert is_root_node(forest, 1)
    assert is_root_node(forest, 8)
    assert not is_root_node(forest, 2)
    assert not is_root_node(forest, 404)


def test_is_leaf_node():
    assert is_leaf_node({"id": 1})
    assert is_leaf_node({"id": 1, "children": []})
    assert is_leaf_node({"id": 1, "children": None})
    assert is_leaf_node({"id": 1, "children": "x"})
    assert not is_leaf_node({"id": 1, "children": [{"id": 2}]})


def test_custom_field_names():
    menu = [{"key": "a", "items": [{"key": "b"}]}]
    fields = FieldNames(children="items", id="key")
    assert get_node_depth_map(menu, fields) == {"a": 1, "b": 2}
    assert get_parent_tree(menu, "b", fields) is menu[0]
    assert is_leaf_node(menu[0], fields) is False


def test_node_depth_map_skips_ids_that_cannot_be_hashed():
    forest = [{"id": (1, [2]), "children": [{"id": [3]}, {"id": 4}]}]
    assert get_node_depth_map(forest) == {4: 2}
