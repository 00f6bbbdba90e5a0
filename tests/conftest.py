"""Shared test fixtures: sample graphs and adapters."""

from __future__ import annotations

import pytest

from densecluster.adapters.clustering.density_periphery import DensityPeripheryClustering
from densecluster.adapters.sources.in_memory import InMemoryEdgeSource
from densecluster.domain.graph import Graph


# ── Edge lists ──

TRIANGLE_WITH_PENDANT = [
    ("A", "B", 1.0),
    ("A", "C", 2.0),
    ("B", "C", 3.0),
    ("A", "D", 4.0),
]

# Two triangles joined by A-D, with G hanging off F.
TWO_TRIANGLES = [
    ("A", "B", 1.0),
    ("A", "C", 1.0),
    ("B", "C", 1.0),
    ("A", "D", 0.5),
    ("D", "E", 2.0),
    ("E", "F", 2.0),
    ("D", "F", 2.0),
    ("F", "G", 1.0),
]

STAR = [
    ("A", "B", 1.0),
    ("A", "C", 1.0),
]


def build_graph(edges) -> Graph:
    g = Graph()
    for source, target, weight in edges:
        g.add_edge(source, target, weight)
    return g


# ── Fixtures ──


@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def triangle_graph():
    """Triangle A-B-C with a pendant edge A-D."""
    return build_graph(TRIANGLE_WITH_PENDANT)


@pytest.fixture
def two_triangles_graph():
    return build_graph(TWO_TRIANGLES)


@pytest.fixture
def star_graph():
    """A linked to B and C, with no B-C edge."""
    return build_graph(STAR)


@pytest.fixture
def clustering():
    return DensityPeripheryClustering()


@pytest.fixture
def in_memory_source():
    return InMemoryEdgeSource(TWO_TRIANGLES)


@pytest.fixture
def graph_file(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("".join(f"{s} {t} {w}\n" for s, t, w in TRIANGLE_WITH_PENDANT))
    return path
