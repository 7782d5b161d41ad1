"""Topological sort via recursive depth-first search.

Every unvisited vertex starts a descent into its unvisited successors. A
vertex is appended to the post-order list once all of its descendants are
finished, and the reversed post-order is a topological order.

Vertices carry one of three marks:
  UNVISITED    -- not reached yet
  IN_PROGRESS  -- on the current recursion path
  DONE         -- fully explored

Reaching an IN_PROGRESS vertex means the path closes on itself, so the
sort stops with CycleDetectedError instead of returning a meaningless
order.

Recursion depth grows with the longest path in the graph. Very long chains
hit Python's recursion limit (RecursionError); KahnSorter has no such limit.
"""

from collections.abc import Hashable
from enum import Enum
from typing import TypeVar

from tsrt.errors import CycleDetectedError
from tsrt.graph.sparse_graph import SparseGraph

T = TypeVar("T", bound=Hashable)


class Mark(Enum):
    UNVISITED = 0
    IN_PROGRESS = 1
    DONE = 2


class DFSSorter:
    """Recursive post-order sorter with three-state cycle detection."""

    name = "dfs"

    def sort(self, graph: SparseGraph[T]) -> list[T]:
        """Return the vertices of *graph* in topological order.

        Raises:
            CycleDetectedError: On the first back edge found. ``cycle`` holds
                the offending path ``[v0, ..., v0]``.
        """
        marks: dict[T, Mark] = {}
        path: list[T] = []
        post_order: list[T] = []

        def visit(vertex: T) -> None:
            marks[vertex] = Mark.IN_PROGRESS
            path.append(vertex)

            for successor in graph.outgoing(vertex) or ():
                mark = marks.get(successor, Mark.UNVISITED)
                if mark is Mark.IN_PROGRESS:
                    cycle = [*path[path.index(successor):], successor]
                    raise CycleDetectedError(
                        "Cycle detected: " + " -> ".join(map(str, cycle)),
                        emitted=list(reversed(post_order)),
                        remaining=cycle[:-1],
                        cycle=cycle,
                    )
                if mark is Mark.UNVISITED:
                    visit(successor)

            path.pop()
            marks[vertex] = Mark.DONE
            post_order.append(vertex)

        for vertex in graph.vertices():
            if vertex not in marks:
                visit(vertex)

        post_order.reverse()
        return post_order
