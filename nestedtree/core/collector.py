"""Aggregation collectors for nestedtree.

A collector accumulates one value over a stream of nodes. ``aggregate_tree``
creates one collector per group and output column, feeds it every node that
falls into the group, then asks for the result.
"""

from abc import ABC, abstractmethod
from numbers import Number
from typing import Any, Callable, Dict, Optional, Type, Union

from ..config import AggregateOperation, AggregateSpec
from ..errors import AggregationError
from .node import Node


class DataCollector(ABC):
    """Abstract base class for aggregation collectors."""

    def __init__(self, field: Optional[str] = None):
        """Initialize collector with the attribute it reads.

        Args:
            field: Node attribute to aggregate (None = no attribute)
        """
        self.field = field

    def value_of(self, node: Node) -> Any:
        """Read the aggregated attribute from a node."""
        return node.get(self.field)

    @abstractmethod
    def collect(self, node: Node) -> None:
        """Feed one node into the collector."""
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the aggregated value."""
        pass


class CountCollector(DataCollector):
    """Counts nodes. The field, if any, is ignored."""

    def __init__(self, field: Optional[str] = None):
        super().__init__(field)
        self.count = 0

    def collect(self, node: Node) -> None:
        self.count += 1

    def result(self) -> int:
        return self.count


class SumCollector(DataCollector):
    """Sums a field; missing and None values count as 0."""

    def __init__(self, field: Optional[str] = None):
        super().__init__(field)
        self.total = 0

    def collect(self, node: Node) -> None:
        if self.field is None:
            return
        value = self.value_of(node)
        self.total += value if value is not None else 0

    def result(self) -> Any:
        return self.total


class AvgCollector(DataCollector):
    """Averages a field over every node of the group.

    Missing and None values take part in the average as 0. An empty group,
    or one aggregated without a field, averages to 0.
    """

    def __init__(self, field: Optional[str] = None):
        super().__init__(field)
        self.total = 0
        self.count = 0

    def collect(self, node: Node) -> None:
        if self.field is None:
            return
        value = self.value_of(node)
        self.total += value if value is not None else 0
        self.count += 1

    def result(self) -> Any:
        if self.count == 0:
            return 0
        return self.total / self.count


class ExtremeCollector(DataCollector):
    """Base class for collectors keeping the best value seen so far.

    None values are skipped; the result is None until a value arrives.
    """

    def __init__(self, field: Optional[str] = None):
        super().__init__(field)
        self.best: Any = None

    @abstractmethod
    def prefer(self, candidate: Any, current: Any) -> bool:
        """Return True when candidate should replace current."""
        pass

    def collect(self, node: Node) -> None:
        if self.field is None:
            return
        value = self.value_of(node)
        if value is None:
            return
        if self.best is None or self.prefer(value, self.best):
            self.best = value

    def result(self) -> Any:
        return self.best


class MaxCollector(ExtremeCollector):
    """Finds the maximum value of a field."""

    def prefer(self, candidate: Any, current: Any) -> bool:
        return candidate > current


class MinCollector(ExtremeCollector):
    """Finds the minimum value of a field."""

    def prefer(self, candidate: Any, current: Any) -> bool:
        return candidate < current


class NumericExtremeCollector(ExtremeCollector):
    """Extreme collector that ignores values which are not real numbers.

    Booleans are not numbers here.
    """

    def __init__(self, field: str, prefer: Callable[[Any, Any], bool]):
        super().__init__(field)
        self._prefer = prefer

    def prefer(self, candidate: Any, current: Any) -> bool:
        return self._prefer(candidate, current)

    def collect(self, node: Node) -> None:
        value = self.value_of(node)
        if isinstance(value, bool) or not isinstance(value, Number):
            return
        super().collect(node)


_COLLECTORS: Dict[AggregateOperation, Type[DataCollector]] = {
    AggregateOperation.SUM: SumCollector,
    AggregateOperation.AVG: AvgCollector,
    AggregateOperation.MAX: MaxCollector,
    AggregateOperation.MIN: MinCollector,
    AggregateOperation.COUNT: CountCollector,
}


def parse_operation(operation: Union[AggregateOperation, str]) -> AggregateOperation:
    """Parse an aggregate operation from string or enum.

    Raises:
        AggregationError: If the operation is not recognized
    """
    if isinstance(operation, AggregateOperation):
        return operation
    try:
        return AggregateOperation(str(operation).lower())
    except ValueError:
        raise AggregationError(
            f"Unknown aggregate operation: {operation}. "
            f"Choose from: {', '.join(op.value for op in AggregateOperation)}"
        ) from None


def create_collector(spec: AggregateSpec) -> DataCollector:
    """Create a fresh collector for an aggregation column."""
    return _COLLECTORS[parse_operation(spec.operation)](spec.field)
