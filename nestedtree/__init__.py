"""nestedtree - Query and mutate forests of nested dicts.

nestedtree works on plain JSON-like data: a forest is a list of dicts, and a
node's children live in a list under a configurable attribute. Org charts,
menus and comment threads can all be handled without declaring a schema.

Attribute names default to ``children`` and ``id`` and can be changed per call:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from nestedtree import map_tree, FieldNames

    map_tree(menu, lambda n: n["key"], FieldNames(children="items", id="key"))
━━━━━━━━━━━━━━━━━━━━━━━━━━

Read-only functions return new result containers holding the original node
objects. Mutating functions (push/unshift/pop/shift/remove) change the
forest in place and report success through their return value.
"""

__version__ = "1.0.0"

from .config import (
    FieldNames,
    DEFAULT_FIELD_NAMES,
    resolve_field_names,
    is_field_names,
    AggregateOperation,
    AggregateSpec,
    AnalyzeOptions,
    TreeStats,
    TreeAnalysis,
)
from .errors import (
    NestedTreeError,
    InvalidFieldNamesError,
    InvalidLookupError,
    AggregationError,
)
from .core.node import Node, Forest
from .core.traverser import Visit

# Traversal
from .traversal import (
    iter_tree,
    map_tree,
    filter_tree,
    find_tree,
    for_each_tree,
    some_tree,
    every_tree,
    reduce_tree,
    count_tree,
)

# Mutation
from .mutation import push_tree, unshift_tree, pop_tree, shift_tree, remove_tree

# Paths
from .paths import index_of_tree, at_index_of_tree, at_tree

# Relationships
from .relations import (
    get_node_depth_map,
    get_node_depth,
    get_parent_tree,
    get_children_tree,
    get_siblings_tree,
    includes_tree,
    is_root_node,
    is_leaf_node,
)

# Validation
from .validation import (
    is_single_tree,
    is_multiple_trees,
    is_valid_tree_node,
    is_tree_node_with_circular_check,
    is_safe_tree_depth,
    is_empty_tree_data,
    is_empty_single_tree_data,
)

from .dedup import dedup_tree

from .convert import (
    convert_to_array_tree,
    convert_to_map_tree,
    convert_to_level_array_tree,
    convert_to_object_tree,
    convert_back_tree,
)

from .clone import (
    clone_tree,
    shallow_clone_tree,
    clone_subtree,
    clone_with_transform,
    concat_tree,
    sort_tree,
    slice_tree,
)

from .stats import (
    group_tree,
    group_by_tree,
    aggregate_tree,
    sum_tree,
    avg_tree,
    max_tree,
    min_tree,
    get_tree_stats,
    analyze_tree,
)

__all__ = [
    "__version__",
    # Config
    "FieldNames",
    "DEFAULT_FIELD_NAMES",
    "resolve_field_names",
    "is_field_names",
    "AggregateOperation",
    "AggregateSpec",
    "AnalyzeOptions",
    "TreeStats",
    "TreeAnalysis",
    # Errors
    "NestedTreeError",
    "InvalidFieldNamesError",
    "InvalidLookupError",
    "AggregationError",
    # Types
    "Node",
    "Forest",
    "Visit",
    # Traversal
    "iter_tree",
    "map_tree",
    "filter_tree",
    "find_tree",
    "for_each_tree",
    "some_tree",
    "every_tree",
    "reduce_tree",
    "count_tree",
    # Mutation
    "push_tree",
    "unshift_tree",
    "pop_tree",
    "shift_tree",
    "remove_tree",
    # Paths
    "index_of_tree",
    "at_index_of_tree",
    "at_tree",
    # Relationships
    "get_node_depth_map",
    "get_node_depth",
    "get_parent_tree",
    "get_children_tree",
    "get_siblings_tree",
    "includes_tree",
    "is_root_node",
    "is_leaf_node",
    # Validation
    "is_single_tree",
    "is_multiple_trees",
    "is_valid_tree_node",
    "is_tree_node_with_circular_check",
    "is_safe_tree_depth",
    "is_empty_tree_data",
    "is_empty_single_tree_data",
    # Dedup
    "dedup_tree",
    # Conversion
    "convert_to_array_tree",
    "convert_to_map_tree",
    "convert_to_level_array_tree",
    "convert_to_object_tree",
    "convert_back_tree",
    # Cloning
    "clone_tree",
    "shallow_clone_tree",
    "clone_subtree",
    "clone_with_transform",
    "concat_tree",
    "sort_tree",
    "slice_tree",
    # Statistics
    "group_tree",
    "group_by_tree",
    "aggregate_tree",
    "sum_tree",
    "avg_tree",
    "max_tree",
    "min_tree",
    "get_tree_stats",
    "analyze_tree",
]
