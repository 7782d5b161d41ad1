"""Topological sort via Kahn's algorithm (in-degree elimination).

The algorithm:
  1.  Compute the in-degree of every vertex.
  2.  Seed a FIFO queue with every vertex whose in-degree is zero.
  3.  Dequeue a vertex, emit it, and decrement the in-degree of each of
      its successors. A successor whose in-degree drops to zero is queued.
  4.  If every vertex was emitted the graph is a DAG and the emitted
      sequence is a valid order. Otherwise the vertices left behind sit on
      or behind at least one cycle.

Among several valid orders, whichever one elimination produces is
returned; no lexicographic or stable ordering is promised.
"""

from collections import deque
from collections.abc import Hashable
from typing import TypeVar

from tsrt.errors import CycleDetectedError
from tsrt.graph.sparse_graph import SparseGraph

T = TypeVar("T", bound=Hashable)


class KahnSorter:
    """Iterative sorter with exact cycle detection.

    Auxiliary storage is proportional to V + E and there is no recursion,
    which makes this the default algorithm.
    """

    name = "kahn"

    def sort(self, graph: SparseGraph[T]) -> list[T]:
        """Return the vertices of *graph* in topological order.

        Raises:
            CycleDetectedError: If fewer vertices than the graph holds could be
                emitted. ``emitted`` holds the partial order and
                ``remaining`` the vertices that were never retired.
        """
        vertices = graph.vertices()
        in_degree: dict[T, int] = {}
        for vertex in vertices:
            predecessors = graph.incoming(vertex)
            in_degree[vertex] = len(predecessors) if predecessors else 0

        queue: deque[T] = deque(v for v, degree in in_degree.items() if degree == 0)

        order: list[T] = []
        while queue:
            vertex = queue.popleft()
            order.append(vertex)
            for successor in graph.outgoing(vertex) or ():
                in_degree[successor] -= 1
                if in_degree[successor] == 0:
                    queue.append(successor)

        if len(order) < len(vertices):
            emitted = set(order)
            remaining = [v for v in vertices if v not in emitted]
            msg = (
                f"Cycle detected: {len(remaining)} vertex(es) involved in "
                f"or blocked by circular relations"
            )
            raise CycleDetectedError(msg, emitted=order, remaining=remaining)

        return order
