from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Set, Tuple


@dataclass(frozen=True)
class Edge:
    origin: str
    target: str
    cost: int


@dataclass
class Node:
    name: str
    neighbors: Dict[str, int] = field(default_factory=dict)

    def add_neighbor(self, neighbor: str, cost: int = 0) -> None:
        self.neighbors[neighbor] = cost

    def neighbor_names(self) -> List[str]:
        return list(self.neighbors)

    def cost_to(self, neighbor: str) -> Optional[int]:
        return self.neighbors.get(neighbor)


class Graph:
    """Undirected weighted graph keyed by node name.

    Neighbours are stored by name on each node, so every lookup goes through
    the graph's own mapping. Edges are always recorded in both directions.
    """

    def __init__(
        self,
        nodes: Iterable[str] = (),
        edges: Iterable[Tuple[str, str, int]] = (),
    ) -> None:
        self._nodes: Dict[str, Node] = {}

        for name in nodes:
            self.add_node(name)
        for origin, target, cost in edges:
            self.add_edge(origin, target, cost)

    def __contains__(self, name: object) -> bool:
        return name in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={sum(1 for _ in self.edges())})"

    @property
    def nodes(self) -> List[str]:
        return list(self._nodes)

    def add_node(self, name: str) -> None:
        # Existing nodes keep their neighbours.
        if name not in self._nodes:
            self._nodes[name] = Node(name)

    def add_edge(self, origin: str, target: str, cost: int = 0) -> None:
        self.add_node(origin)
        self.add_node(target)
        self._nodes[origin].add_neighbor(target, cost)
        self._nodes[target].add_neighbor(origin, cost)

    def neighbors(self, name: str) -> Optional[List[str]]:
        node = self._nodes.get(name)
        if node is None:
            return None
        return node.neighbor_names()

    def cost(self, origin: str, target: str) -> Optional[int]:
        node = self._nodes.get(origin)
        if node is None:
            return None
        return node.cost_to(target)

    def edges(self) -> Iterator[Edge]:
        """Yield every undirected edge once, in node insertion order."""
        seen: Set[frozenset] = set()
        for node in self._nodes.values():
            for neighbor, cost in node.neighbors.items():
                key = frozenset((node.name, neighbor))
                if key in seen:
                    continue
                seen.add(key)
                yield Edge(node.name, neighbor, cost)

    def path_cost(self, path: Sequence[str]) -> int:
        """Return the total cost of walking along the given node sequence."""
        total_cost = 0
        for u, v in zip(path[:-1], path[1:]):
            edge_cost = self.cost(u, v)
            if edge_cost is None:
                raise ValueError(f"Edge {u}-{v} not present in graph.")
            total_cost += edge_cost
        return total_cost
