"""Tree traversal strategies for nestedtree.

Traversers walk a forest of nested dicts and yield a Visit for every node.
They only know how to find children through the configured FieldNames, so
the same traverser serves any payload shape.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, List, NamedTuple, Optional, Tuple

from ..config import FieldNames
from .node import Forest, Node, get_children


class Visit(NamedTuple):
    """A node as seen by a traverser.

    Attributes:
        node: The node itself (never copied)
        index: Position of the node within ``siblings``
        depth: 1-based depth, roots are at depth 1
        parent: Parent node, None for roots
        siblings: The list holding the node (the forest for roots)
    """
    node: Node
    index: int
    depth: int
    parent: Optional[Node]
    siblings: List[Node]


class TreeTraverser(ABC):
    """Abstract base class for forest traversal strategies."""

    def __init__(self, field_names: FieldNames):
        """Initialize traverser with the field names to navigate by.

        Args:
            field_names: Resolved attribute names for children and id
        """
        self.field_names = field_names

    @abstractmethod
    def traverse(self,
                 forest: Forest,
                 max_depth: Optional[int] = None) -> Iterator[Visit]:
        """Traverse every tree of the forest.

        Args:
            forest: List of root nodes
            max_depth: Deepest level to visit (None = unlimited)

        Yields:
            Visit records
        """
        pass

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        """Check if children of a node at given depth should be visited."""
        if max_depth is None:
            return True
        return depth < max_depth


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits a node before its children, siblings left to right. Children are
    only entered when the children attribute is a non-empty list. Closing
    the iterator early stops the walk, which is what find/some/every rely on.
    """

    def traverse(self,
                 forest: Forest,
                 max_depth: Optional[int] = None) -> Iterator[Visit]:
        field_names = self.field_names

        def _traverse_recursive(nodes: List[Node],
                                depth: int,
                                parent: Optional[Node]) -> Iterator[Visit]:
            for index, node in enumerate(nodes):
                yield Visit(node, index, depth, parent, nodes)

                # Read after the yield; the consumer may have changed them
                children = get_children(node, field_names)
                if children and self._should_explore(depth, max_depth):
                    yield from _traverse_recursive(children, depth + 1, node)

        if max_depth is not None and max_depth < 1:
            return
        yield from _traverse_recursive(forest, 1, None)


class LevelOrderTraverser(TreeTraverser):
    """Level-order traversal.

    Yields every node at depth N before any node at depth N+1. Within a
    level nodes come out left to right, the same relative order a pre-order
    walk gives them.
    """

    def traverse(self,
                 forest: Forest,
                 max_depth: Optional[int] = None) -> Iterator[Visit]:
        queue: Deque[Tuple[List[Node], int, Optional[Node]]] = deque([(forest, 1, None)])

        while queue:
            nodes, depth, parent = queue.popleft()
            if max_depth is not None and depth > max_depth:
                continue

            for index, node in enumerate(nodes):
                yield Visit(node, index, depth, parent, nodes)

                children = get_children(node, self.field_names)
                if children and self._should_explore(depth, max_depth):
                    queue.append((children, depth + 1, node))


# Factory function for creating traversers by name
def create_traverser(strategy: str, field_names: FieldNames) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (dfs_pre, level)
        field_names: Resolved attribute names

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'pre_order': DepthFirstPreOrderTraverser,
        'bfs': LevelOrderTraverser,
        'level': LevelOrderTraverser,
        'level_order': LevelOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](field_names)
