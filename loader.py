from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional

from graph import Edge, Graph


logger = logging.getLogger(__name__)


def parse_edge_line(line: str) -> Optional[Edge]:
    """Parse ``nodeA,nodeB,cost``; anything else yields None."""
    text = line.strip()
    if not text or text.startswith("#"):
        return None

    fields = [part.strip() for part in text.split(",")]
    fields = [part for part in fields if part]
    if len(fields) != 3:
        return None

    origin, target, cost_text = fields
    try:
        cost = int(cost_text)
    except ValueError:
        return None
    return Edge(origin, target, cost)


def read_edges(lines: Iterable[str]) -> Iterator[Edge]:
    for line_number, line in enumerate(lines, start=1):
        edge = parse_edge_line(line)
        if edge is None:
            if line.strip() and not line.lstrip().startswith("#"):
                logger.debug("Skipping line %d: %r", line_number, line.rstrip("\n"))
            continue
        yield edge


def load_graph(path: Path, graph: Graph | None = None) -> Graph:
    """Add every edge listed in ``path`` to ``graph`` (a new one by default)."""
    if graph is None:
        graph = Graph()

    edge_count = 0
    with Path(path).open("r", encoding="utf-8") as handle:
        for edge in read_edges(handle):
            graph.add_edge(edge.origin, edge.target, edge.cost)
            edge_count += 1

    logger.info("Loaded %d edges (%d nodes) from %s", edge_count, len(graph), path)
    return graph
