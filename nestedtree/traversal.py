"""High-level traversal API for nestedtree.

These functions wrap the pre-order traverser for the everyday cases: map,
filter, find, visit, test and fold every node of a forest. All of them walk
pre-order, parent before children, siblings left to right, and descend only
into children attributes that are non-empty lists.
"""

from typing import Any, Callable, Iterator, List, Optional, TypeVar

from .config import FieldNamesLike, resolve_field_names
from .core.node import Forest, Node
from .core.traverser import DepthFirstPreOrderTraverser, Visit, create_traverser

T = TypeVar("T")


def _visits(forest: Forest, field_names: FieldNamesLike) -> Iterator[Visit]:
    return DepthFirstPreOrderTraverser(resolve_field_names(field_names)).traverse(forest)


def iter_tree(
    forest: Forest,
    strategy: str = "dfs_pre",
    max_depth: Optional[int] = None,
    field_names: FieldNamesLike = None,
) -> Iterator[Visit]:
    """Lazily walk a forest.

    Args:
        forest: List of root nodes
        strategy: Traversal strategy (dfs_pre, level)
        max_depth: Deepest level to visit, roots are level 1 (None = unlimited)
        field_names: Custom children/id attribute names

    Returns:
        Iterator of Visit records carrying node, index, depth, parent and
        siblings

    Raises:
        ValueError: If strategy is unknown, at call time

    Example:
        >>> for visit in iter_tree(forest, strategy="level"):
        ...     print(visit.depth, visit.node["id"])
    """
    traverser = create_traverser(strategy, resolve_field_names(field_names))
    return traverser.traverse(forest, max_depth=max_depth)


def map_tree(
    forest: Forest,
    callback: Callable[[Node], T],
    field_names: FieldNamesLike = None,
) -> List[T]:
    """Apply callback to every node and return the results as a flat list.

    Example:
        >>> map_tree([{"id": 1, "children": [{"id": 2}, {"id": 3}]}], lambda n: n["id"])
        [1, 2, 3]
    """
    return [callback(visit.node) for visit in _visits(forest, field_names)]


def filter_tree(
    forest: Forest,
    predicate: Callable[[Node, int], bool],
    field_names: FieldNamesLike = None,
) -> List[Node]:
    """Return every node for which predicate(node, index) is true.

    ``index`` is the node's position among its siblings. A node that fails
    the predicate does not hide its descendants; they are tested on their own.
    """
    return [
        visit.node
        for visit in _visits(forest, field_names)
        if predicate(visit.node, visit.index)
    ]


def find_tree(
    forest: Forest,
    predicate: Callable[[Node], bool],
    field_names: FieldNamesLike = None,
) -> Optional[Node]:
    """Return the first node, in pre-order, satisfying predicate, or None."""
    for visit in _visits(forest, field_names):
        if predicate(visit.node):
            return visit.node
    return None


def for_each_tree(
    forest: Forest,
    callback: Callable[[Node], Any],
    field_names: FieldNamesLike = None,
) -> None:
    """Call callback on every node."""
    for visit in _visits(forest, field_names):
        callback(visit.node)


def some_tree(
    forest: Forest,
    predicate: Callable[[Node], bool],
    field_names: FieldNamesLike = None,
) -> bool:
    """True if any node at any depth satisfies predicate. Stops at the first hit."""
    return any(predicate(visit.node) for visit in _visits(forest, field_names))


def every_tree(
    forest: Forest,
    predicate: Callable[[Node], bool],
    field_names: FieldNamesLike = None,
) -> bool:
    """True if all nodes satisfy predicate. Stops at the first miss.

    An empty forest satisfies any predicate.
    """
    return all(predicate(visit.node) for visit in _visits(forest, field_names))


def reduce_tree(
    forest: Forest,
    reducer: Callable[[T, Node], T],
    initial: T,
    field_names: FieldNamesLike = None,
) -> T:
    """Fold every node into an accumulator, in pre-order."""
    accumulator = initial
    for visit in _visits(forest, field_names):
        accumulator = reducer(accumulator, visit.node)
    return accumulator


def count_tree(
    forest: Forest,
    predicate: Optional[Callable[[Node], bool]] = None,
    field_names: FieldNamesLike = None,
) -> int:
    """Count the nodes satisfying predicate, or all nodes without one."""
    if predicate is None:
        return reduce_tree(forest, lambda count, _: count + 1, 0, field_names)
    return reduce_tree(
        forest,
        lambda count, node: count + (1 if predicate(node) else 0),
        0,
        field_names,
    )
