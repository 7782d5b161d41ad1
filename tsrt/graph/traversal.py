"""Breadth-first and depth-first walks with a bounded cycle guard.

The walks do not keep a seen-set, so a vertex reachable along several paths
is emitted once per path. Instead of deduplicating, total work is capped at
the graph's current edge count: a walk that pops more vertices than that is
assumed to be looping and raises CycleDetectedError.

The cap is a guard against runaway loops, not a proof of acyclicity. It can
miss cycles and it depends on traversal order. Use KahnSorter or
GraphValidator when an exact answer matters.
"""

from collections import deque
from collections.abc import Hashable
from typing import TypeVar

from tsrt.errors import CycleDetectedError
from tsrt.graph.sparse_graph import SparseGraph

T = TypeVar("T", bound=Hashable)


def breadth_first(graph: SparseGraph[T], start: T) -> list[T]:
    """Walk the graph from *start* with a FIFO frontier.

    Args:
        graph: Graph to walk
        start: First vertex; an isolated vertex yields ``[start]``

    Returns:
        Visited vertices in visiting order, duplicates included

    Raises:
        CycleDetectedError: If the walk exceeds the edge-count bound
    """
    return _walk(graph, start, lifo=False)


def depth_first(graph: SparseGraph[T], start: T) -> list[T]:
    """Walk the graph from *start* with a LIFO frontier.

    Same contract as breadth_first.
    """
    return _walk(graph, start, lifo=True)


def contains_cycles(graph: SparseGraph[T], start: T) -> bool:
    """Return True if the bounded depth-first walk from *start* trips."""
    try:
        depth_first(graph, start)
    except CycleDetectedError:
        return True
    return False


def _walk(graph: SparseGraph[T], start: T, lifo: bool) -> list[T]:
    ceiling = graph.edge_count
    frontier: deque[T] = deque([start])
    result: list[T] = []

    while frontier:
        vertex = frontier.pop() if lifo else frontier.popleft()
        if len(result) > ceiling:
            raise CycleDetectedError(
                f"Traversal from {start!r} exceeded {ceiling} iteration(s)",
                emitted=result,
            )
        result.append(vertex)

        successors = graph.outgoing(vertex)
        if successors:
            frontier.extend(successors)

    return result
