"""Exceptions raised when no topological order can be produced."""

from collections.abc import Hashable, Sequence


class TopoSortError(Exception):
    """Base class for ordering failures.

    Attributes:
        message: Human-readable description of the failure
    """

    def __init__(self, message: str):
        """Initialize the exception with a descriptive message.

        Args:
            message: Description of the failure
        """
        super().__init__(message)
        self.message = message


class CycleDetectedError(TopoSortError):
    """Raised when the graph contains a directed cycle.

    A cycle is a structural property of the input, so retrying the same
    graph always fails the same way.

    Attributes:
        emitted: Vertices that were ordered before the failure was noticed
        remaining: Vertices that could not be ordered
        cycle: Explicit cycle path ``[v0, v1, ..., v0]`` when the detector knows it
    """

    def __init__(
        self,
        message: str = "Cycle detected in relation graph",
        emitted: Sequence[Hashable] = (),
        remaining: Sequence[Hashable] = (),
        cycle: Sequence[Hashable] | None = None,
    ):
        super().__init__(message)
        self.emitted = list(emitted)
        self.remaining = list(remaining)
        self.cycle = list(cycle) if cycle is not None else None


class NoOrderError(TopoSortError):
    """Raised when an order cannot be produced for a non-structural reason.

    None of the bundled sorters raise it. It is kept for callers that layer
    additional ordering constraints on top of a sorter.
    """
