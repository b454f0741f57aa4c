from __future__ import annotations

"""
Simple Directed Graph Abstraction.

Provides the generic ancestor lookup and Kahn's topological sort used for
include ordering and cycle detection. Subclasses supply the node set and
the forward edges; the reverse lookup has a linear-scan default that
subclasses with a reverse index should override.

Nodes must be hashable. Edges point from a node to the nodes it depends on,
and the topological order lists dependencies before their dependents.
"""

from abc import ABC, abstractmethod
from typing import Dict, Generic, List, Sequence, TypeVar

from includewalker.domain.exceptions import CycleError

N = TypeVar("N")


class SimpleGraph(ABC, Generic[N]):
    """Abstract graph over ``nodes()`` and ``children(node)`` queries."""

    @abstractmethod
    def nodes(self) -> Sequence[N]:
        """Return every node of the graph."""

    @abstractmethod
    def children(self, node: N) -> Sequence[N]:
        """Return the nodes ``node`` depends on, one entry per edge."""

    def ancestors(self, node: N) -> List[N]:
        """
        Return the nodes that depend on ``node``, one entry per edge.

        Scans every node's children, O(n * average degree).
        """
        found: List[N] = []
        for candidate in self.nodes():
            for child in self.children(candidate):
                if child == node:
                    found.append(candidate)
        return found

    def __len__(self) -> int:
        return len(self.nodes())

    def get_topological_order(self) -> List[N]:
        """
        Order all nodes so that every node follows the nodes it depends on.

        Kahn's algorithm: nodes nobody depends on are peeled first, each
        removal releases its children, and the peel sequence is reversed at
        the end. Ready nodes are taken last-in-first-out, so among several
        valid orderings the one returned depends on ``nodes()`` order.

        Returns:
            List[N]: Every node exactly once, dependencies first.

        Raises:
            CycleError: If some nodes never become free, i.e. the graph
                        contains a cycle. ``remaining`` lists those nodes.
        """
        nodes = list(self.nodes())
        position: Dict[N, int] = {node: i for i, node in enumerate(nodes)}

        in_degree = [len(self.ancestors(node)) for node in nodes]
        candidates = [node for node, degree in zip(nodes, in_degree) if degree == 0]
        peeled: List[N] = []

        while candidates:
            node = candidates.pop()
            peeled.append(node)
            for child in self.children(node):
                i = position[child]
                in_degree[i] -= 1
                if in_degree[i] == 0:
                    candidates.append(child)

        if len(peeled) != len(nodes):
            remaining = [node for node, degree in zip(nodes, in_degree) if degree > 0]
            raise CycleError(remaining)

        peeled.reverse()
        return peeled
