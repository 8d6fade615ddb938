"""Core building blocks for nestedtree.

This package holds the pieces the public functions are assembled from:
node accessors, traversers, the id locator and aggregation collectors.
"""

from .node import Node, Forest, get_id, get_children, has_children, ids_equal, is_hashable
from .traverser import (
    Visit,
    TreeTraverser,
    DepthFirstPreOrderTraverser,
    LevelOrderTraverser,
    create_traverser,
)
from .locator import Location, locate
from .collector import DataCollector, create_collector

__all__ = [
    "Node",
    "Forest",
    "get_id",
    "get_children",
    "has_children",
    "ids_equal",
    "is_hashable",
    "Visit",
    "TreeTraverser",
    "DepthFirstPreOrderTraverser",
    "LevelOrderTraverser",
    "create_traverser",
    "Location",
    "locate",
    "DataCollector",
    "create_collector",
]
