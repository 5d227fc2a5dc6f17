"""Sample graph fixtures shared across the test suite."""

import pytest

from pathgraph.model.graph import Graph


@pytest.fixture
def graph() -> Graph:
    return Graph()


@pytest.fixture
def diamond() -> Graph:
    #      ┌───►B───┐
    #      │        ▼
    #      A        D
    #      │        ▲
    #      └───►C───┘
    g = Graph()
    for node_id in "ABCD":
        g.add_node(node_id)
    g.connect("A", "B", "A->B")
    g.connect("A", "C", "A->C")
    g.connect("B", "D", "B->D")
    g.connect("C", "D", "C->D")
    return g


@pytest.fixture
def cycle_with_exit() -> Graph:
    #   A───►B───►C
    #   ▲ │       │
    #   │ ▼       │
    #   │ D       │
    #   └─────────┘
    g = Graph()
    for node_id in "ABCD":
        g.add_node(node_id)
    g.connect("A", "B", "A->B")
    g.connect("B", "C", "B->C")
    g.connect("C", "A", "C->A")
    g.connect("A", "D", "A->D")
    return g


@pytest.fixture
def parallel() -> Graph:
    #     [first]
    #   A════════►B
    #     [second]
    g = Graph()
    g.add_node("A")
    g.add_node("B")
    g.connect("A", "B", "first")
    g.connect("A", "B", "second")
    return g


@pytest.fixture
def complete4() -> Graph:
    # Every ordered pair of distinct nodes among A..D connected once.
    g = Graph()
    ids = "ABCD"
    for node_id in ids:
        g.add_node(node_id)
    for u in ids:
        for v in ids:
            if u != v:
                g.connect(u, v, f"{u}->{v}")
    return g
