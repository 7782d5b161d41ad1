"""Sparse directed graph with mirrored adjacency maps.

The graph keeps two lookup tables keyed by vertex value:

    sources:      vertex -> set of vertices it points to
    destinations: vertex -> set of vertices pointing to it

Every edge mutation updates both tables together, so outgoing and incoming
neighbour queries are both O(1) lookups. Vertices exist only as edge
endpoints; a vertex with no edges is indistinguishable from an absent one.
"""

from collections.abc import Hashable, Iterable, Iterator
from typing import Generic, TypeVar

from tsrt.graph.relation import Relation

T = TypeVar("T", bound=Hashable)


class SparseGraph(Generic[T]):
    """Directed graph for the |E| << |V|^2 case.

    Thread-safety:
        This class is NOT thread-safe. Mutations must happen from a single
        thread, or every call must be wrapped in external synchronization
        (e.g., threading.Lock). Sorting and traversal may share a graph that
        nobody is mutating.

    Example:
        >>> graph = SparseGraph()
        >>> graph.add_edge("a", "b")
        True
        >>> graph.add_edge("a", "b")
        False
        >>> sorted(graph.vertices())
        ['a', 'b']
    """

    __slots__ = ("_sources", "_destinations", "_edge_count")

    def __init__(self) -> None:
        self._sources: dict[T, set[T]] = {}
        self._destinations: dict[T, set[T]] = {}
        self._edge_count = 0

    @classmethod
    def from_relations(cls, relations: Iterable[Relation[T]]) -> "SparseGraph[T]":
        """Build a graph with one edge per distinct relation.

        Args:
            relations: Relations to insert; duplicates collapse

        Returns:
            A new SparseGraph
        """
        graph: SparseGraph[T] = cls()
        for relation in relations:
            graph.add_edge(relation.source, relation.target)
        return graph

    # ---- mutation --------------------------------------------------------

    def add_edge(self, source: T, target: T) -> bool:
        """Insert the directed edge source -> target.

        Returns:
            True if the edge was not already present
        """
        if target in self._sources.get(source, ()):
            return False

        self._sources.setdefault(source, set()).add(target)
        self._destinations.setdefault(target, set()).add(source)
        self._edge_count += 1
        return True

    def remove_edge(self, source: T, target: T) -> bool:
        """Remove the directed edge source -> target.

        Returns:
            True if an edge was removed, False if it did not exist
        """
        if target not in self._sources.get(source, ()):
            return False

        self._discard(self._sources, source, target)
        self._discard(self._destinations, target, source)
        self._edge_count -= 1
        return True

    def remove_vertex(self, vertex: T) -> bool:
        """Remove *vertex* and every edge touching it.

        Returns:
            True if the vertex had any adjacency before removal
        """
        if vertex not in self._sources and vertex not in self._destinations:
            return False

        outgoing = self._sources.pop(vertex, set())
        incoming = self._destinations.pop(vertex, set())

        for target in outgoing:
            if target != vertex:
                self._discard(self._destinations, target, vertex)
        for source in incoming:
            if source != vertex:
                self._discard(self._sources, source, vertex)

        # a self-loop sits in both sets but is a single edge
        removed = len(outgoing) + len(incoming) - (1 if vertex in outgoing else 0)
        self._edge_count -= removed
        return True

    # ---- queries ---------------------------------------------------------

    def incoming(self, vertex: T) -> frozenset[T] | None:
        """Direct predecessors of *vertex*, or None if it has none."""
        predecessors = self._destinations.get(vertex)
        return frozenset(predecessors) if predecessors else None

    def outgoing(self, vertex: T) -> frozenset[T] | None:
        """Direct successors of *vertex*, or None if it has none."""
        successors = self._sources.get(vertex)
        return frozenset(successors) if successors else None

    def has_edge(self, source: T, target: T) -> bool:
        return target in self._sources.get(source, ())

    def vertices(self) -> set[T]:
        """Return every vertex that is an endpoint of at least one edge."""
        result: set[T] = set()
        for table in (self._sources, self._destinations):
            for vertex, neighbours in table.items():
                result.add(vertex)
                result.update(neighbours)
        return result

    def edges(self) -> Iterator[tuple[T, T]]:
        for source, targets in self._sources.items():
            for target in targets:
                yield source, target

    def is_empty(self) -> bool:
        return not self._sources and not self._destinations

    @property
    def edge_count(self) -> int:
        return self._edge_count

    # ---- conversion ------------------------------------------------------

    def to_relations(self) -> set[Relation[T]]:
        """Convert the graph back into the set of relations it holds."""
        return {Relation(source, target) for source, target in self.edges()}

    def copy(self) -> "SparseGraph[T]":
        """Create an independent copy with the same edges."""
        new_graph: SparseGraph[T] = SparseGraph()
        new_graph._sources = {v: set(n) for v, n in self._sources.items()}
        new_graph._destinations = {v: set(n) for v, n in self._destinations.items()}
        new_graph._edge_count = self._edge_count
        return new_graph

    # ---- internal --------------------------------------------------------

    @staticmethod
    def _discard(table: dict[T, set[T]], key: T, value: T) -> None:
        neighbours = table.get(key)
        if neighbours is None:
            return
        neighbours.discard(value)
        if not neighbours:
            del table[key]

    # ---- dunder ----------------------------------------------------------

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._sources or vertex in self._destinations

    def __len__(self) -> int:
        return len(self.vertices())

    def __repr__(self) -> str:
        return f"SparseGraph(vertices={len(self)}, edges={self._edge_count})"
