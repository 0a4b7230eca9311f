import random

import pytest

from network import NODES, SINK, SOURCE, TOPOLOGY, generate_network


def test_thirteen_edges_in_range():
    network = generate_network(5, 15)
    assert len(network) == 13
    for edge in network:
        assert set(edge) == {"from", "to", "capacity"}
        assert isinstance(edge["from"], str) and isinstance(edge["to"], str)
        assert isinstance(edge["capacity"], int)
        assert 5 <= edge["capacity"] <= 15


def test_topology_is_fixed():
    for _ in range(20):
        network = generate_network(5, 15)
        assert [(e["from"], e["to"]) for e in network] == list(TOPOLOGY)


def test_nine_nodes_single_source_and_sink():
    used = {e["from"] for e in generate_network()} | {e["to"] for e in generate_network()}
    assert used == set(NODES)
    assert len(NODES) == 9
    assert all(v != SOURCE for _, v in TOPOLOGY)
    assert all(u != SINK for u, _ in TOPOLOGY)


def test_both_bounds_reachable():
    rng = random.Random(7)
    seen = set()
    for _ in range(200):
        seen.update(e["capacity"] for e in generate_network(1, 3, rng=rng))
    assert seen == {1, 2, 3}


def test_degenerate_range():
    assert {e["capacity"] for e in generate_network(8, 8)} == {8}


def test_seeded_rng_is_reproducible():
    first = generate_network(5, 15, rng=random.Random(42))
    second = generate_network(5, 15, rng=random.Random(42))
    assert first == second


def test_inverted_range():
    with pytest.raises(ValueError):
        generate_network(15, 5)
