"""Grouping, aggregation and statistics over forests.

Every function visits all nodes of the forest in pre-order. Depths are
1-based.
"""

from typing import Any, Callable, Dict, List, Mapping, Optional

from .config import (
    AggregateSpec,
    AnalyzeOptions,
    FieldNames,
    FieldNamesLike,
    TreeAnalysis,
    TreeStats,
    resolve_field_names,
)
from .core.collector import (
    DataCollector,
    NumericExtremeCollector,
    SumCollector,
    create_collector,
    parse_operation,
)
from .core.node import Forest, Node, get_children
from .core.traverser import DepthFirstPreOrderTraverser


def _walk(forest: Forest, field_names: FieldNamesLike):
    return DepthFirstPreOrderTraverser(resolve_field_names(field_names)).traverse(forest)


def _group_key(value: Any) -> str:
    return "" if value is None else str(value)


def group_by_tree(
    forest: Forest,
    key_fn: Callable[[Node], Any],
    field_names: FieldNamesLike = None,
) -> Dict[str, List[Node]]:
    """Group nodes by the string form of key_fn(node). None groups under ""."""
    groups: Dict[str, List[Node]] = {}
    for visit in _walk(forest, field_names):
        groups.setdefault(_group_key(key_fn(visit.node)), []).append(visit.node)
    return groups


def group_tree(
    forest: Forest,
    field: str,
    field_names: FieldNamesLike = None,
) -> Dict[str, List[Node]]:
    """Group nodes by the string form of one attribute."""
    return group_by_tree(forest, lambda node: node.get(field), field_names)


def aggregate_tree(
    forest: Forest,
    group_by: Callable[[Node], Any],
    aggregations: Mapping[str, AggregateSpec],
    field_names: FieldNamesLike = None,
) -> Dict[str, Dict[str, Any]]:
    """Aggregate node attributes per group.

    Args:
        forest: List of root nodes
        group_by: Function computing a node's group; results are stringified
        aggregations: Output name -> AggregateSpec
        field_names: Custom children/id attribute names

    Returns:
        Group key -> {output name -> aggregated value}

    Raises:
        AggregationError: If an aggregation names an unknown operation

    Example:
        >>> aggregate_tree(
        ...     forest,
        ...     group_by=lambda n: n["dept"],
        ...     aggregations={
        ...         "headcount": AggregateSpec("count"),
        ...         "payroll": AggregateSpec("sum", "salary"),
        ...     },
        ... )
        {'eng': {'headcount': 3, 'payroll': 360}, 'ops': {'headcount': 1, 'payroll': 90}}
    """
    # Fail on a bad operation before any node is visited
    for spec in aggregations.values():
        parse_operation(spec.operation)

    groups: Dict[str, Dict[str, DataCollector]] = {}

    for visit in _walk(forest, field_names):
        group_key = _group_key(group_by(visit.node))
        collectors = groups.get(group_key)
        if collectors is None:
            collectors = {name: create_collector(spec) for name, spec in aggregations.items()}
            groups[group_key] = collectors

        for collector in collectors.values():
            collector.collect(visit.node)

    return {
        group_key: {name: collector.result() for name, collector in collectors.items()}
        for group_key, collectors in groups.items()
    }


def _feed(collector: DataCollector, forest: Forest, field_names: FieldNamesLike) -> Any:
    for visit in _walk(forest, field_names):
        collector.collect(visit.node)
    return collector.result()


def sum_tree(forest: Forest, field: str, field_names: FieldNamesLike = None) -> Any:
    """Sum an attribute over all nodes; missing values count as 0."""
    return _feed(SumCollector(field), forest, field_names)


def avg_tree(forest: Forest, field: str, field_names: FieldNamesLike = None) -> float:
    """Average an attribute over the nodes that have it.

    Nodes where the attribute is missing or None are left out of both the
    sum and the count. Returns 0 when no node has the attribute.
    """
    total = 0
    count = 0
    for visit in _walk(forest, field_names):
        value = visit.node.get(field)
        if value is not None:
            total += value
            count += 1
    return total / count if count else 0


def max_tree(forest: Forest, field: str, field_names: FieldNamesLike = None) -> Optional[Any]:
    """Largest numeric value of an attribute, or None if there is none."""
    collector = NumericExtremeCollector(field, lambda candidate, current: candidate > current)
    return _feed(collector, forest, field_names)


def min_tree(forest: Forest, field: str, field_names: FieldNamesLike = None) -> Optional[Any]:
    """Smallest numeric value of an attribute, or None if there is none."""
    collector = NumericExtremeCollector(field, lambda candidate, current: candidate < current)
    return _feed(collector, forest, field_names)


def get_tree_stats(forest: Forest, field_names: FieldNamesLike = None) -> TreeStats:
    """Count nodes and leaves and summarise depths.

    Example:
        >>> get_tree_stats([{"id": 1, "children": [{"id": 2}, {"id": 3}]}])
        TreeStats(total_nodes=3, leaf_nodes=2, max_depth=2, min_depth=1, avg_depth=1.6666666666666667, levels=2)
    """
    if not isinstance(forest, list) or not forest:
        return TreeStats()

    fields = resolve_field_names(field_names)
    total = 0
    leaves = 0
    max_depth = 0
    min_depth: Optional[int] = None
    depth_sum = 0

    for visit in DepthFirstPreOrderTraverser(fields).traverse(forest):
        total += 1
        depth_sum += visit.depth
        max_depth = max(max_depth, visit.depth)
        min_depth = visit.depth if min_depth is None else min(min_depth, visit.depth)
        if not get_children(visit.node, fields):
            leaves += 1

    return TreeStats(
        total_nodes=total,
        leaf_nodes=leaves,
        max_depth=max_depth,
        min_depth=min_depth or 0,
        avg_depth=depth_sum / total if total else 0,
        levels=max_depth,
    )


class _TreeAnalyzer:
    """Single-pass accumulator behind analyze_tree."""

    def __init__(self, field_names: FieldNames):
        self.field_names = field_names

        self.total_nodes = 0
        self.leaf_nodes = 0
        self.internal_nodes = 0
        self.depths: List[int] = []

        self.by_level: Dict[int, int] = {}
        self.max_width = 0
        self.total_width = 0
        self.group_count = 0

        self.branching: List[int] = []
        self.branching_distribution: Dict[int, int] = {}
        self.depth_distribution: Dict[int, int] = {}
        self.leaf_nodes_by_level: Dict[int, int] = {}

    def visit_group(self, nodes: List[Node], level: int) -> None:
        """Account for one sibling list, then each of its nodes.

        ``level`` is 0-based for the root list.
        """
        width = len(nodes)
        self.by_level[level] = self.by_level.get(level, 0) + width
        self.max_width = max(self.max_width, width)
        self.total_width += width
        self.group_count += 1

        depth = level + 1
        for node in nodes:
            self.total_nodes += 1
            self.depths.append(depth)
            self.depth_distribution[depth] = self.depth_distribution.get(depth, 0) + 1

            children = get_children(node, self.field_names)
            if children:
                self.internal_nodes += 1
                branch = len(children)
                self.branching.append(branch)
                self.branching_distribution[branch] = self.branching_distribution.get(branch, 0) + 1
                self.visit_group(children, depth)
            else:
                self.leaf_nodes += 1
                self.leaf_nodes_by_level[depth] = self.leaf_nodes_by_level.get(depth, 0) + 1

    def result(self, options: AnalyzeOptions) -> TreeAnalysis:
        analysis = TreeAnalysis()
        total = self.total_nodes
        max_depth = max(self.depths)
        min_depth = min(self.depths)
        avg_depth = sum(self.depths) / total

        if options.include_basic:
            analysis.total_nodes = total
            analysis.leaf_nodes = self.leaf_nodes
            analysis.internal_nodes = self.internal_nodes
            analysis.max_depth = max_depth
            analysis.min_depth = min_depth
            analysis.avg_depth = avg_depth
            analysis.levels = max_depth

        if options.include_level_analysis:
            analysis.by_level = dict(self.by_level)
            analysis.width_by_level = dict(self.by_level)
            analysis.max_width = self.max_width
            analysis.avg_width = self.total_width / self.group_count

        if options.include_branching_factor and self.branching:
            analysis.avg_branching_factor = sum(self.branching) / len(self.branching)
            analysis.max_branching_factor = max(self.branching)
            analysis.min_branching_factor = min(self.branching)
            analysis.branching_factor_distribution = dict(self.branching_distribution)

        if options.include_depth_distribution:
            analysis.depth_distribution = dict(self.depth_distribution)

        if options.include_balance_analysis:
            variance = sum((depth - avg_depth) ** 2 for depth in self.depths) / total
            analysis.depth_variance = variance
            analysis.is_balanced = variance < 2 and (max_depth - min_depth) <= 2
            analysis.balance_ratio = min_depth / max_depth

        if options.include_path_analysis:
            # A node's path from its root has as many nodes as its depth
            analysis.avg_path_length = avg_depth
            analysis.max_path_length = max_depth
            analysis.min_path_length = min_depth

        if options.include_leaf_analysis:
            analysis.leaf_node_ratio = self.leaf_nodes / total
            analysis.leaf_nodes_by_level = dict(self.leaf_nodes_by_level)

        return analysis


def analyze_tree(
    forest: Forest,
    options: Optional[AnalyzeOptions] = None,
    field_names: FieldNamesLike = None,
) -> TreeAnalysis:
    """Analyse the shape of a forest.

    Level figures are measured per sibling group: ``max_width`` is the size
    of the largest sibling list and ``avg_width`` the mean sibling-list size.
    A forest is considered balanced when the variance of node depths is
    below 2 and the deepest and shallowest nodes are at most 2 levels apart.

    Args:
        forest: List of root nodes
        options: Sections to compute (default: all)
        field_names: Custom children/id attribute names

    Returns:
        TreeAnalysis with disabled sections left at their zero values
    """
    if not isinstance(forest, list) or not forest:
        return TreeAnalysis()

    analyzer = _TreeAnalyzer(resolve_field_names(field_names))
    analyzer.visit_group(forest, 0)
    return analyzer.result(options or AnalyzeOptions())
