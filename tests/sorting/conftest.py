"""Shared fixtures for sorter tests."""

import random
from collections.abc import Callable

import pytest

from tsrt.graph.sparse_graph import SparseGraph

RANDOM_DAG_VERTICES = 30
RANDOM_DAG_EDGES = 60


def _build(*edges: tuple[str, str]) -> SparseGraph[str]:
    graph = SparseGraph()
    for source, target in edges:
        graph.add_edge(source, target)
    return graph


def _assert_topological(graph: SparseGraph, order: list) -> None:
    assert len(order) == len(set(order))
    assert set(order) == graph.vertices()
    position = {vertex: i for i, vertex in enumerate(order)}
    for source, target in graph.edges():
        assert position[source] < position[target]


@pytest.fixture
def build() -> Callable[..., SparseGraph[str]]:
    """Factory building a graph from (source, target) pairs."""
    return _build


@pytest.fixture
def assert_topological() -> Callable[[SparseGraph, list], None]:
    """Checker: the order holds every vertex once and respects every edge."""
    return _assert_topological


@pytest.fixture
def simple_dag() -> SparseGraph[str]:
    """a -> b, b -> c, b -> d."""
    return _build(("a", "b"), ("b", "c"), ("b", "d"))


@pytest.fixture
def cyclic() -> SparseGraph[str]:
    """simple_dag plus d -> a, closing the cycle a -> b -> d -> a."""
    return _build(("a", "b"), ("b", "c"), ("b", "d"), ("d", "a"))


@pytest.fixture(params=range(10))
def random_dag(request) -> SparseGraph[int]:
    """Random DAG: edges only go from a lower to a higher vertex number."""
    rng = random.Random(request.param)
    graph = SparseGraph()
    for _ in range(RANDOM_DAG_EDGES):
        low, high = sorted(rng.sample(range(RANDOM_DAG_VERTICES), 2))
        graph.add_edge(low, high)
    return graph
