"""Tests for structural validation."""

import sys
import unittest
from pathlib import Path
from types import MappingProxyType

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from nestedtree import (
    FieldNames,
    is_empty_single_tree_data,
    is_empty_tree_data,
    is_multiple_trees,
    is_safe_tree_depth,
    is_single_tree,
    is_tree_node_with_circular_check,
    is_valid_tree_node,
)
from nestedtree.testing import make_chain, org_chart


class TestSingleTree(unittest.TestCase):

    def test_valid_shapes(self):
        self.assertTrue(is_single_tree({"id": 1}))
        self.assertTrue(is_single_tree({}))
        self.assertTrue(is_single_tree({"id": 1, "children": []}))
        self.assertTrue(is_single_tree(org_chart()[0]))

    def test_non_objects(self):
        for value in (None, [], [{"id": 1}], "tree", 0, 1.5, True):
            with self.subTest(value=value):
                self.assertFalse(is_single_tree(value))

    def test_null_children_is_invalid(self):
        self.assertFalse(is_single_tree({"id": 1, "children": None}))

    def test_non_list_children_is_invalid(self):
        self.assertFalse(is_single_tree({"id": 1, "children": "x"}))
        self.assertFalse(is_single_tree({"id": 1, "children": {"id": 2}}))

    def test_invalid_descendant(self):
        tree = {"id": 1, "children": [{"id": 2, "children": [{"id": 3, "children": None}]}]}
        self.assertFalse(is_single_tree(tree))
        self.assertFalse(is_single_tree({"id": 1, "children": [1, 2]}))

    def test_custom_field_names(self):
        fields = FieldNames(children="items", id="key")
        self.assertTrue(is_single_tree({"key": 1, "children": None}, fields))
        self.assertFalse(is_single_tree({"key": 1, "items": None}, fields))


class TestMultipleTrees(unittest.TestCase):

    def test_forests(self):
        self.assertTrue(is_multiple_trees([]))
        self.assertTrue(is_multiple_trees(org_chart()))
        self.assertFalse(is_multiple_trees({"id": 1}))
        self.assertFalse(is_multiple_trees(None))
        self.assertFalse(is_multiple_trees([{"id": 1}, None]))

    def test_single_tree_implies_forest_of_one(self):
        for value in ({"id": 1}, org_chart()[0], {"id": 1, "children": None}, None):
            with self.subTest(value=value):
                if is_single_tree(value):
                    self.assertTrue(is_multiple_trees([value]))


class TestNodeChecks(unittest.TestCase):

    def test_valid_tree_node_is_shallow(self):
        self.assertTrue(is_valid_tree_node({"id": 1}))
        self.assertTrue(is_valid_tree_node({"id": 1, "children": [None]}))
        self.assertFalse(is_valid_tree_node({"id": 1, "children": None}))
        self.assertFalse(is_valid_tree_node([]))
        self.assertFalse(is_valid_tree_node(None))

    def test_circular_reference(self):
        node = {"id": 1, "children": []}
        node["children"].append(node)
        self.assertFalse(is_tree_node_with_circular_check(node))

    def test_shared_node_is_rejected(self):
        shared = {"id": 2}
        tree = {"id": 1, "children": [shared, shared]}
        self.assertTrue(is_single_tree(tree))
        self.assertFalse(is_tree_node_with_circular_check(tree))

    def test_acyclic_tree_passes(self):
        self.assertTrue(is_tree_node_with_circular_check(org_chart()[0]))
        self.assertFalse(is_tree_node_with_circular_check({"id": 1, "children": None}))

    def test_any_mapping_is_a_node(self):
        node = MappingProxyType({"id": 1, "children": [MappingProxyType({"id": 2})]})
        self.assertTrue(is_single_tree(node))
        self.assertTrue(is_valid_tree_node(node))
        self.assertTrue(is_multiple_trees([node]))
        self.assertTrue(is_tree_node_with_circular_check(node))
        self.assertFalse(is_empty_single_tree_data(node))

    def test_deep_chain_is_valid(self):
        chain = make_chain(900)
        self.assertTrue(is_single_tree(chain))
        self.assertTrue(is_multiple_trees([chain]))
        self.assertTrue(is_tree_node_with_circular_check(chain))


class TestDepthAndEmptiness(unittest.TestCase):

    def test_safe_depth(self):
        forest = org_chart()
        self.assertTrue(is_safe_tree_depth(forest, 4))
        self.assertTrue(is_safe_tree_depth(forest, 10))
        self.assertFalse(is_safe_tree_depth(forest, 3))
        self.assertFalse(is_safe_tree_depth(forest, 0))
        self.assertFalse(is_safe_tree_depth(forest, -1))

    def test_safe_depth_empty_forest(self):
        self.assertTrue(is_safe_tree_depth([], 1))

    def test_safe_depth_on_very_deep_chain(self):
        self.assertFalse(is_safe_tree_depth([make_chain(5000)], 10))

    def test_empty_forest(self):
        self.assertTrue(is_empty_tree_data([]))
        self.assertTrue(is_empty_tree_data(None))
        self.assertTrue(is_empty_tree_data({"id": 1}))
        self.assertFalse(is_empty_tree_data([{"id": 1}]))

    def test_empty_single_tree(self):
        self.assertTrue(is_empty_single_tree_data({"id": 1}))
        self.assertTrue(is_empty_single_tree_data({"id": 1, "children": []}))
        self.assertTrue(is_empty_single_tree_data({"id": 1, "children": None}))
        self.assertTrue(is_empty_single_tree_data(None))
        self.assertFalse(is_empty_single_tree_data({"id": 1, "children": [{"id": 2, "children": []}]}))


if __name__ == "__main__":
    unittest.main()
