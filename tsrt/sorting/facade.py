"""Uniform entry point over interchangeable topological sorters.

Callers pick a sorter object (or look one up by name) and hand it to
make_sort together with a graph. Swapping algorithms never changes the
shape of the call site.

Example:
    >>> graph = SparseGraph.from_relations([Relation("x", "y")])
    >>> make_sort(graph, get_sorter("kahn"))
    ['x', 'y']
"""

from collections.abc import Hashable
from typing import Protocol, TypeVar

from tsrt.graph.sparse_graph import SparseGraph
from tsrt.sorting.dfs import DFSSorter
from tsrt.sorting.kahn import KahnSorter

T = TypeVar("T", bound=Hashable)

DEFAULT_ALGORITHM = "kahn"


class TopoSorter(Protocol):
    """Anything that can topologically sort a SparseGraph."""

    name: str

    def sort(self, graph: SparseGraph[T]) -> list[T]:
        """Return the vertices in topological order or raise TopoSortError."""
        ...


SORTERS: dict[str, type[TopoSorter]] = {
    KahnSorter.name: KahnSorter,
    DFSSorter.name: DFSSorter,
}


def get_sorter(name: str = DEFAULT_ALGORITHM) -> TopoSorter:
    """Instantiate the sorter registered under *name*.

    Args:
        name: Algorithm name, case-insensitive ('kahn' or 'dfs')

    Raises:
        ValueError: If no sorter is registered under that name
    """
    key = name.lower().strip()
    try:
        sorter_cls = SORTERS[key]
    except KeyError:
        choices = ", ".join(sorted(SORTERS))
        msg = f"Unknown sorting algorithm: {name!r}. Use one of: {choices}"
        raise ValueError(msg) from None
    return sorter_cls()


def make_sort(graph: SparseGraph[T], sorter: TopoSorter) -> list[T]:
    """Sort *graph* with *sorter* and return its result unchanged.

    Raises:
        TopoSortError: Whatever the sorter raises, typically CycleDetectedError
    """
    return sorter.sort(graph)
