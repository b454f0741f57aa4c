from __future__ import annotations

"""
Unit tests for the generic SimpleGraph abstraction.

Uses a small adjacency-dict graph so that the default ancestor scan and
Kahn's ordering are exercised independently of the dependency domain.
"""

from typing import Dict, List

import pytest

from includewalker.core.analysis.graph import SimpleGraph
from includewalker.domain.exceptions import CycleError


class DictGraph(SimpleGraph[str]):
    """Graph given as ``{node: [nodes it depends on]}``."""

    def __init__(self, edges: Dict[str, List[str]]):
        self.edges = edges

    def nodes(self) -> List[str]:
        return list(self.edges)

    def children(self, node: str) -> List[str]:
        return self.edges[node]


def assert_dependencies_first(graph: DictGraph, order: List[str]) -> None:
    assert sorted(order) == sorted(graph.nodes())
    seen = {node: i for i, node in enumerate(order)}
    for node, deps in graph.edges.items():
        for dep in deps:
            assert seen[dep] < seen[node], f"{dep} must precede {node}"


def test_abstract_methods_are_required():
    with pytest.raises(TypeError):
        SimpleGraph()  # type: ignore[abstract]


def test_default_ancestors_scans_all_children():
    graph = DictGraph({"app": ["util", "log"], "log": ["util"], "util": []})

    assert sorted(graph.ancestors("util")) == ["app", "log"]
    assert graph.ancestors("app") == []


def test_default_ancestors_counts_duplicate_edges():
    graph = DictGraph({"a": ["b", "b"], "b": []})

    assert graph.ancestors("b") == ["a", "a"]


def test_len_counts_nodes():
    assert len(DictGraph({"a": [], "b": []})) == 2


def test_chain_is_ordered_dependencies_first():
    graph = DictGraph({"c": ["b"], "b": ["a"], "a": []})

    assert graph.get_topological_order() == ["a", "b", "c"]


def test_diamond_respects_every_edge():
    graph = DictGraph({
        "top": ["left", "right"],
        "left": ["base"],
        "right": ["base"],
        "base": [],
    })

    order = graph.get_topological_order()

    assert order[0] == "base"
    assert order[-1] == "top"
    assert_dependencies_first(graph, order)


def test_disconnected_components_are_all_ordered():
    graph = DictGraph({"x": ["y"], "y": [], "p": ["q"], "q": [], "lonely": []})

    order = graph.get_topological_order()

    assert len(order) == 5
    assert_dependencies_first(graph, order)


def test_duplicate_edges_do_not_break_ordering():
    """A repeated edge raises in-degree twice and is released twice."""
    graph = DictGraph({"a": ["b", "b"], "b": []})

    assert graph.get_topological_order() == ["b", "a"]


def test_order_is_stable_for_same_node_order():
    edges = {"m": ["x", "y"], "n": ["y"], "x": [], "y": []}

    assert DictGraph(edges).get_topological_order() == DictGraph(edges).get_topological_order()


def test_empty_graph_has_empty_order():
    assert DictGraph({}).get_topological_order() == []


def test_two_cycle_raises():
    graph = DictGraph({"a": ["b"], "b": ["a"]})

    with pytest.raises(CycleError) as exc_info:
        graph.get_topological_order()

    assert sorted(exc_info.value.remaining) == ["a", "b"]


def test_self_loop_raises():
    with pytest.raises(CycleError):
        DictGraph({"a": ["a"]}).get_topological_order()


def test_cycle_reports_nodes_blocked_behind_it():
    """Nodes only reachable through the cycle never become free either."""
    graph = DictGraph({
        "root": ["a"],
        "a": ["b"],
        "b": ["a", "leaf"],
        "leaf": [],
        "free": [],
    })

    with pytest.raises(CycleError) as exc_info:
        graph.get_topological_order()

    remaining = set(exc_info.value.remaining)
    assert {"a", "b", "leaf"} <= remaining
    assert "root" not in remaining
    assert "free" not in remaining


class CountingGraph(DictGraph):
    """Counts reverse-edge lookups to show the override hook is used."""

    def __init__(self, edges: Dict[str, List[str]]):
        super().__init__(edges)
        self.reverse: Dict[str, List[str]] = {n: [] for n in edges}
        for node, deps in edges.items():
            for dep in deps:
                self.reverse[dep].append(node)
        self.calls = 0

    def ancestors(self, node: str) -> List[str]:
        self.calls += 1
        return self.reverse[node]


def test_ancestors_override_is_used_for_in_degree():
    graph = CountingGraph({"a": ["b"], "b": []})

    assert graph.get_topological_order() == ["b", "a"]
    assert graph.calls == 2
