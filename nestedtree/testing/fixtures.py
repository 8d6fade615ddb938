"""Test fixtures for nestedtree consumers.

These helpers build small forests quickly and describe their shape in a form
that is easy to assert on, without hand-writing nested dict literals in
every test.
"""

from typing import Any, List, Optional, Tuple, Union

from ..config import FieldNames, FieldNamesLike, resolve_field_names
from ..core.node import Forest, Node, get_children, get_id
from ..core.traverser import DepthFirstPreOrderTraverser

Shape = Tuple[Any, ...]


def make_node(node_id: Any, *children: Node, field_names: FieldNamesLike = None, **payload: Any) -> Node:
    """Build a node dict.

    The children attribute is only set when children are given, so leaves
    come out without it.

    Example:
        >>> make_node(1, make_node(2), name="root")
        {'name': 'root', 'id': 1, 'children': [{'id': 2}]}
    """
    fields = resolve_field_names(field_names)
    node: Node = dict(payload)
    node[fields.id] = node_id
    if children:
        node[fields.children] = list(children)
    return node


def org_chart() -> Forest:
    """Return a fresh two-root org chart.

    Structure (id: name):
        1: CEO
        ├── 2: CTO
        │   ├── 4: Dev Lead
        │   │   └── 7: Developer
        │   └── 5: QA Lead
        └── 3: CFO
            └── 6: Accountant
        8: Board
    """
    return [
        make_node(1,
                  make_node(2,
                            make_node(4,
                                      make_node(7, name="Developer", dept="eng", salary=100),
                                      name="Dev Lead", dept="eng", salary=150),
                            make_node(5, name="QA Lead", dept="eng", salary=110),
                            name="CTO", dept="eng", salary=200),
                  make_node(3,
                            make_node(6, name="Accountant", dept="fin", salary=90),
                            name="CFO", dept="fin", salary=190),
                  name="CEO", dept="exec", salary=300),
        make_node(8, name="Board", dept="exec"),
    ]


def make_chain(length: int, field_names: FieldNamesLike = None) -> Node:
    """Build a single-path tree of the given number of nodes, ids 0 to length - 1.

    Built iteratively, so any length is fine; useful for exercising deep trees.
    """
    fields = resolve_field_names(field_names)
    root = make_node(0, field_names=fields)
    current = root
    for node_id in range(1, length):
        child = make_node(node_id, field_names=fields)
        current[fields.children] = [child]
        current = child
    return root


class ForestInspector:
    """Read-only view of a forest for assertions.

    Example:
        inspector = ForestInspector(forest)
        assert inspector.ids() == [1, 2, 3]
        assert inspector.shape() == ((1, ((2, ()), (3, ()))),)
    """

    def __init__(self, forest: Forest, field_names: FieldNamesLike = None):
        self._forest = forest
        self._fields: FieldNames = resolve_field_names(field_names)

    def ids(self) -> List[Any]:
        """Ids of all nodes in pre-order."""
        traverser = DepthFirstPreOrderTraverser(self._fields)
        return [get_id(visit.node, self._fields) for visit in traverser.traverse(self._forest)]

    def shape(self) -> Shape:
        """Nested ``(id, children_shape)`` tuples describing the structure."""
        return self._shape_of(self._forest)

    def _shape_of(self, nodes: List[Node]) -> Shape:
        return tuple(
            (get_id(node, self._fields), self._shape_of(get_children(node, self._fields) or []))
            for node in nodes
        )

    def node_count(self) -> int:
        return len(self.ids())

    def child_ids(self, node: Optional[Node] = None) -> List[Any]:
        """Ids of a node's direct children, or of the roots when node is None."""
        nodes: Union[Forest, List[Node]] = (
            self._forest if node is None else get_children(node, self._fields) or []
        )
        return [get_id(child, self._fields) for child in nodes]
