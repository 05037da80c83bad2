"""Immutable directed graph and cycle search over it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


@dataclass(frozen=True, slots=True)
class DiGraph[T]:
    """Immutable directed graph.

    Invariants (FAIL-FIRST):
    - All nodes in edges must be in nodes set

    Attributes:
        forward: Node → set of successors (outgoing edges)
        nodes: All nodes in graph (including isolated)
    """

    forward: Mapping[T, frozenset[T]]
    nodes: frozenset[T]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for node, successors in self.forward.items():
            if node not in self.nodes:
                raise ValueError(f"forward key '{node}' not in nodes")
            for succ in successors:
                if succ not in self.nodes:
                    raise ValueError(f"successor '{succ}' of '{node}' not in nodes")

    def successors(self, node: T) -> frozenset[T]:
        """Get direct successors (outgoing edges). O(1)."""
        return self.forward.get(node, frozenset())

    def has_edge(self, from_: T, to: T) -> bool:
        """Check if edge exists. O(1)."""
        return to in self.forward.get(from_, frozenset())

    @property
    def edge_count(self) -> int:
        """Get total number of edges."""
        return sum(len(succs) for succs in self.forward.values())

    @classmethod
    def from_edges(
        cls,
        edges: Iterable[tuple[T, T]],
        extra_nodes: Iterable[T] = (),
    ) -> DiGraph[T]:
        """Build graph from edge iterable.

        Args:
            edges: Iterable of (from, to) tuples
            extra_nodes: Additional isolated nodes to include

        Returns:
            DiGraph with all edges and nodes

        Time: O(E) where E is number of edges
        """
        forward: dict[T, set[T]] = {}
        nodes: set[T] = set(extra_nodes)

        for from_node, to_node in edges:
            nodes.add(from_node)
            nodes.add(to_node)
            forward.setdefault(from_node, set()).add(to_node)

        return cls(
            forward={k: frozenset(v) for k, v in forward.items()},
            nodes=frozenset(nodes),
        )


# =============================================================================
# CYCLE SEARCH
# =============================================================================


def shortest_cycle[T](
    graph: DiGraph[T],
    start: T,
    max_length: int | None = None,
) -> tuple[T, ...] | None:
    """Find a shortest cycle through start.

    A self-loop is the shortest cycle there is and comes back as
    (start, start). Otherwise a breadth-first search runs from start's
    successors back to start. Successors are visited in sorted order,
    so the result is deterministic.

    Args:
        graph: Graph to search (nodes must be orderable)
        start: Vertex the cycle must pass through
        max_length: Max cycle length in vertices. None = unbounded.

    Returns:
        Cycle vertices in traversal order beginning with start,
        or None if no cycle within max_length passes through start.
    """
    if graph.has_edge(start, start):
        return (start, start)

    parents: dict[T, T] = {}
    visited = {start}
    frontier: list[T] = []

    for succ in sorted(graph.successors(start)):
        visited.add(succ)
        parents[succ] = start
        frontier.append(succ)

    length = 2
    while frontier:
        if max_length is not None and length > max_length:
            return None

        for node in frontier:
            if graph.has_edge(node, start):
                return _path_to(parents, start, node)

        next_frontier: list[T] = []
        for node in frontier:
            for succ in sorted(graph.successors(node)):
                if succ not in visited:
                    visited.add(succ)
                    parents[succ] = node
                    next_frontier.append(succ)

        frontier = next_frontier
        length += 1

    return None


def _path_to[T](parents: Mapping[T, T], start: T, end: T) -> tuple[T, ...]:
    """Rebuild BFS path start → ... → end from parent links."""
    path = [end]
    while path[-1] != start:
        path.append(parents[path[-1]])
    return tuple(reversed(path))


def find_cycles[T](
    graph: DiGraph[T],
    max_length: int | None = None,
) -> tuple[tuple[T, ...], ...]:
    """Find distinct cycles, one search per vertex.

    Cycles covering the same vertex set (rotations, reversals) are
    reported once, in the form found from the smallest start vertex.

    Args:
        graph: Graph to search (nodes must be orderable)
        max_length: Max cycle length in vertices. None = unbounded.

    Returns:
        Tuple of cycles, each in traversal order. Empty if acyclic.

    Time: O(V * (V + E))
    """
    seen: set[frozenset[T]] = set()
    cycles: list[tuple[T, ...]] = []

    for start in sorted(graph.nodes):
        cycle = shortest_cycle(graph, start, max_length)
        if cycle is None:
            continue
        key = frozenset(cycle)
        if key not in seen:
            seen.add(key)
            cycles.append(cycle)

    return tuple(cycles)
