"""Graph module: relation records, sparse graph storage, traversal and validation.

The SparseGraph keeps mirrored outgoing/incoming adjacency maps so both
neighbour directions are constant-time lookups.
"""

from tsrt.graph.relation import Relation
from tsrt.graph.sparse_graph import SparseGraph
from tsrt.graph.traversal import breadth_first, contains_cycles, depth_first
from tsrt.graph.validator import GraphValidator, ValidationReport

__all__ = [
    "GraphValidator",
    "Relation",
    "SparseGraph",
    "ValidationReport",
    "breadth_first",
    "contains_cycles",
    "depth_first",
]
