from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import yaml

from graph import Graph
from loader import load_graph


logger = logging.getLogger(__name__)

InlineEdge = Tuple[str, str, int]


@dataclass(frozen=True)
class ProblemConfig:
    start: str
    goal: str
    edges_file: Optional[Path] = None
    nodes: List[str] = field(default_factory=list)
    edges: List[InlineEdge] = field(default_factory=list)
    prune_equal_cost: bool = False
    deterministic: bool = False
    log_level: str = "WARNING"

    def with_overrides(self, **values: Any) -> "ProblemConfig":
        """Return a copy with every non-None value applied."""
        changes = {key: value for key, value in values.items() if value is not None}
        return dataclasses.replace(self, **changes)


def load_config(path: Path) -> Dict:
    with Path(path).open("r", encoding="utf-8") as handle:
        return yaml.safe_load(handle) or {}


def _parse_inline_edge(entry: Any, index: int) -> InlineEdge:
    if not isinstance(entry, (list, tuple)) or len(entry) != 3:
        raise ValueError(
            f"graph.edges[{index}] must be [origin, target, cost], got {entry!r}."
        )
    origin, target, cost = entry
    if isinstance(cost, bool) or not isinstance(cost, int):
        raise ValueError(f"graph.edges[{index}] has a non-integer cost {cost!r}.")
    return str(origin), str(target), cost


def _parse_flag(section: Dict, key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ValueError(f"search.{key} must be true or false, got {value!r}.")
    return value


def parse_config(raw: Dict, base_dir: Path = Path(".")) -> ProblemConfig:
    graph_config = raw.get("graph") or {}
    search_config = raw.get("search") or {}
    logging_config = raw.get("logging") or {}

    start = search_config.get("start")
    goal = search_config.get("goal")
    if start is None or goal is None:
        raise ValueError("Configuration needs both search.start and search.goal.")

    edges_file = graph_config.get("edges_file")
    edges_path: Optional[Path] = None
    if edges_file:
        edges_path = Path(edges_file)
        if not edges_path.is_absolute():
            edges_path = Path(base_dir) / edges_path

    nodes = [str(node) for node in graph_config.get("nodes") or []]
    edges = [
        _parse_inline_edge(entry, index)
        for index, entry in enumerate(graph_config.get("edges") or [])
    ]

    if edges_path is None and not nodes and not edges:
        raise ValueError(
            "Configuration needs graph.edges_file, graph.edges or graph.nodes."
        )

    return ProblemConfig(
        start=str(start),
        goal=str(goal),
        edges_file=edges_path,
        nodes=nodes,
        edges=edges,
        prune_equal_cost=_parse_flag(search_config, "prune_equal_cost"),
        deterministic=_parse_flag(search_config, "deterministic"),
        log_level=str(logging_config.get("level", "WARNING")).upper(),
    )


def read_problem(path: Path) -> ProblemConfig:
    """Load and validate a YAML instance; relative paths resolve against it."""
    path = Path(path)
    return parse_config(load_config(path), base_dir=path.parent)


def build_graph(config: ProblemConfig) -> Graph:
    graph = Graph()
    if config.edges_file is not None:
        load_graph(config.edges_file, graph)

    for name in config.nodes:
        graph.add_node(name)
    # Inline edges come last so they win over the file for the same pair.
    for origin, target, cost in config.edges:
        graph.add_edge(origin, target, cost)

    logger.debug("Built graph with %d nodes", len(graph))
    return graph
