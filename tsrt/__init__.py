"""tsrt: topological sorting of relation graphs."""

from tsrt.errors import CycleDetectedError, NoOrderError, TopoSortError
from tsrt.graph import Relation, SparseGraph
from tsrt.sorting import DFSSorter, KahnSorter, TopoSorter, get_sorter, make_sort

__version__ = "0.1.0"

__all__ = [
    "CycleDetectedError",
    "DFSSorter",
    "KahnSorter",
    "NoOrderError",
    "Relation",
    "SparseGraph",
    "TopoSortError",
    "TopoSorter",
    "get_sorter",
    "make_sort",
]
