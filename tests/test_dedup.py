"""Tests for key-based deduplication."""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nestedtree import FieldNames, dedup_tree
from nestedtree.testing import ForestInspector, org_chart


@pytest.fixture
def forest():
    return org_chart()


def test_duplicate_siblings_collapse():
    result = dedup_tree([{"id": 1, "children": [{"id": 2}, {"id": 2}]}], "id")
    assert result == [{"id": 1, "children": [{"id": 2}]}]


def test_first_occurrence_wins_across_levels(forest):
    result = dedup_tree(forest, "dept")
    # eng is first seen at the CTO, so Dev Lead, QA Lead and their subtrees go
    assert ForestInspector(result).shape() == ((1, ((2, ()), (3, ()))),)


def test_dropped_node_takes_its_subtree():
    forest = [
        {"id": 1, "tag": "a"},
        {"id": 2, "tag": "a", "children": [{"id": 3, "tag": "b"}]},
        {"id": 4, "tag": "b"},
    ]
    result = dedup_tree(forest, "tag")
    assert [node["id"] for node in result] == [1, 4]


def test_input_is_not_modified(forest):
    before = ForestInspector(forest).shape()
    result = dedup_tree(forest, "dept")
    assert ForestInspector(forest).shape() == before
    assert result[0] is not forest[0]
    assert result[0]["children"] is not forest[0]["children"]


def test_missing_key_is_always_kept():
    forest = [{"id": 1}, {"name": "x"}, {"name": "y"}, {"id": None}]
    assert len(dedup_tree(forest, "id")) == 4


def test_composite_key():
    forest = [
        {"id": 1, "first": "Ada", "last": "Lovelace"},
        {"id": 2, "first": "Ada", "last": "Byron"},
        {"id": 3, "first": "Ada", "last": "Lovelace"},
    ]
    result = dedup_tree(forest, ["first", "last"])
    assert [node["id"] for node in result] == [1, 2]


def test_composite_key_all_missing_is_kept():
    forest = [{"id": 1}, {"id": 2}]
    assert len(dedup_tree(forest, ["first", "last"])) == 2


def test_composite_key_parts_do_not_run_together():
    forest = [{"id": 1, "a": "ab", "b": "c"}, {"id": 2, "a": "a", "b": "bc"}]
    assert len(dedup_tree(forest, ["a", "b"])) == 2


def test_callable_key(forest):
    result = dedup_tree(forest, lambda node: node.get("salary", 0) // 100)
    # Dev Lead claims bucket 1 first, which drops Developer, QA Lead and CFO
    assert ForestInspector(result).ids() == [1, 2, 4, 8]


def test_true_and_one_are_distinct_keys():
    forest = [{"k": True}, {"k": 1}, {"k": 1.0}, {"k": True}]
    assert dedup_tree(forest, "k") == [{"k": True}, {"k": 1}]


def test_unhashable_keys_compare_by_identity():
    shared = ["x"]
    forest = [{"k": ["x"]}, {"k": ["x"]}, {"k": shared}, {"k": shared}]
    assert len(dedup_tree(forest, "k")) == 3


def test_seen_values_do_not_leak_between_calls():
    forest = [{"id": 1}]
    assert dedup_tree(forest, "id") == [{"id": 1}]
    assert dedup_tree(forest, "id") == [{"id": 1}]


def test_idempotent(forest):
    once = dedup_tree(forest, "dept")
    assert dedup_tree(once, "dept") == once


def test_custom_field_names():
    menu = [{"key": "a", "items": [{"key": "b"}, {"key": "b"}]}]
    result = dedup_tree(menu, "key", FieldNames(children="items", id="key"))
    assert result == [{"key": "a", "items": [{"key": "b"}]}]


def test_empty_forest():
    assert dedup_tree([], "id") == []
