"""Testing utilities for nestedtree consumers."""

from .fixtures import ForestInspector, make_chain, make_node, org_chart

__all__ = ['ForestInspector', 'make_chain', 'make_node', 'org_chart']
