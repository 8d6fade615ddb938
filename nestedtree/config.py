"""Configuration system for nestedtree.

This module defines how callers describe their data and what they want back:
which attribute names hold a node's identity and children, how aggregations
are computed, and which statistics an analysis should produce.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import InvalidFieldNamesError


@dataclass(frozen=True)
class FieldNames:
    """Attribute names used to read a node's children and identity.

    Instances are immutable so a resolved configuration can be handed down
    through every recursive helper without being changed along the way.
    """

    children: str = "children"
    id: str = "id"

    def validate(self) -> List[str]:
        """Validate the configured names.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []
        for name in ("children", "id"):
            value = getattr(self, name)
            if not isinstance(value, str):
                errors.append(f"{name} field name must be a string, got {type(value).__name__}")
            elif not value:
                errors.append(f"{name} field name cannot be empty")
        return errors


DEFAULT_FIELD_NAMES = FieldNames()

FieldNamesLike = Union[FieldNames, Mapping[str, str], None]


def resolve_field_names(field_names: FieldNamesLike = None) -> FieldNames:
    """Turn whatever the caller passed into a validated FieldNames.

    Args:
        field_names: None for the defaults, a FieldNames instance, or a
            mapping with ``children`` and/or ``id`` keys. Missing keys fall
            back to the defaults.

    Returns:
        FieldNames instance

    Raises:
        InvalidFieldNamesError: If the names are not non-empty strings or
            the argument is of an unsupported type
    """
    if field_names is None:
        return DEFAULT_FIELD_NAMES

    if isinstance(field_names, FieldNames):
        resolved = field_names
    elif isinstance(field_names, Mapping):
        unknown = set(field_names) - {"children", "id"}
        if unknown:
            raise InvalidFieldNamesError(
                f"Unknown field name keys: {', '.join(sorted(map(str, unknown)))}. "
                f"Choose from: children, id"
            )
        resolved = FieldNames(
            children=field_names.get("children", DEFAULT_FIELD_NAMES.children),
            id=field_names.get("id", DEFAULT_FIELD_NAMES.id),
        )
    else:
        raise InvalidFieldNamesError(
            f"field_names must be a FieldNames or a mapping, got {type(field_names).__name__}"
        )

    errors = resolved.validate()
    if errors:
        raise InvalidFieldNamesError("; ".join(errors))
    return resolved


def is_field_names(value: Any) -> bool:
    """Check whether a value looks like a field-name configuration.

    A mapping qualifies only when it has exactly the ``children`` and ``id``
    keys and both hold strings.
    """
    if isinstance(value, FieldNames):
        return True
    if not isinstance(value, Mapping):
        return False
    return (
        set(value) == {"children", "id"}
        and isinstance(value["children"], str)
        and isinstance(value["id"], str)
    )


class AggregateOperation(Enum):
    """Supported per-group aggregation operations."""
    SUM = "sum"
    AVG = "avg"
    MAX = "max"
    MIN = "min"
    COUNT = "count"


@dataclass
class AggregateSpec:
    """One output column of an aggregation.

    ``field`` names the node attribute fed to the operation; COUNT ignores it.
    Operations other than COUNT leave their initial value untouched when no
    field is given.
    """

    operation: Union[AggregateOperation, str]
    field: Optional[str] = None


@dataclass
class AnalyzeOptions:
    """Which sections of a tree analysis to compute.

    Sections that are switched off are reported with their zero values.
    """

    include_basic: bool = True
    include_level_analysis: bool = True
    include_branching_factor: bool = True
    include_depth_distribution: bool = True
    include_balance_analysis: bool = True
    include_path_analysis: bool = True
    include_leaf_analysis: bool = True

    @classmethod
    def basic_only(cls) -> 'AnalyzeOptions':
        """Create options that only compute node counts and depths."""
        return cls(
            include_basic=True,
            include_level_analysis=False,
            include_branching_factor=False,
            include_depth_distribution=False,
            include_balance_analysis=False,
            include_path_analysis=False,
            include_leaf_analysis=False,
        )

    @classmethod
    def shape_only(cls) -> 'AnalyzeOptions':
        """Create options for width and branching analysis without depth stats."""
        return cls(
            include_basic=False,
            include_level_analysis=True,
            include_branching_factor=True,
            include_depth_distribution=False,
            include_balance_analysis=False,
            include_path_analysis=False,
            include_leaf_analysis=False,
        )


@dataclass
class TreeStats:
    """Summary statistics of a forest. Depths are 1-based."""

    total_nodes: int = 0
    leaf_nodes: int = 0
    max_depth: int = 0
    min_depth: int = 0
    avg_depth: float = 0
    levels: int = 0


@dataclass
class TreeAnalysis:
    """Detailed distribution analysis of a forest.

    ``by_level`` and ``width_by_level`` are keyed by the 0-based level of the
    sibling groups; ``depth_distribution`` and ``leaf_nodes_by_level`` are
    keyed by 1-based node depth.
    """

    # Basic
    total_nodes: int = 0
    leaf_nodes: int = 0
    internal_nodes: int = 0
    max_depth: int = 0
    min_depth: int = 0
    avg_depth: float = 0
    levels: int = 0

    # Levels
    by_level: Dict[int, int] = field(default_factory=dict)
    max_width: int = 0
    avg_width: float = 0
    width_by_level: Dict[int, int] = field(default_factory=dict)

    # Branching
    avg_branching_factor: float = 0
    max_branching_factor: int = 0
    min_branching_factor: int = 0
    branching_factor_distribution: Dict[int, int] = field(default_factory=dict)

    # Depth distribution
    depth_distribution: Dict[int, int] = field(default_factory=dict)

    # Balance
    depth_variance: float = 0
    is_balanced: bool = False
    balance_ratio: float = 0

    # Paths
    avg_path_length: float = 0
    max_path_length: int = 0
    min_path_length: int = 0

    # Leaves
    leaf_node_ratio: float = 0
    leaf_nodes_by_level: Dict[int, int] = field(default_factory=dict)
