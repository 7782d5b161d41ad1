"""Topological sorters and the facade used to select between them."""

from tsrt.sorting.dfs import DFSSorter
from tsrt.sorting.facade import DEFAULT_ALGORITHM, SORTERS, TopoSorter, get_sorter, make_sort
from tsrt.sorting.kahn import KahnSorter

__all__ = [
    "DEFAULT_ALGORITHM",
    "DFSSorter",
    "KahnSorter",
    "SORTERS",
    "TopoSorter",
    "get_sorter",
    "make_sort",
]
