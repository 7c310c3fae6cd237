"""Tests for the YAML problem configuration."""
from pathlib import Path

import pytest

from config import (
    ProblemConfig,
    build_graph,
    load_config,
    parse_config,
    read_problem,
)
from search import find_route


ROOT = Path(__file__).resolve().parent.parent


def test_parse_full_config(tmp_path) -> None:
    raw = {
        "graph": {
            "edges_file": "edges.txt",
            "nodes": ["Palma"],
            "edges": [["Madrid", "Toledo", 72]],
        },
        "search": {
            "start": "Madrid",
            "goal": "Toledo",
            "prune_equal_cost": True,
            "deterministic": True,
        },
        "logging": {"level": "debug"},
    }

    config = parse_config(raw, base_dir=tmp_path)

    assert config == ProblemConfig(
        start="Madrid",
        goal="Toledo",
        edges_file=tmp_path / "edges.txt",
        nodes=["Palma"],
        edges=[("Madrid", "Toledo", 72)],
        prune_equal_cost=True,
        deterministic=True,
        log_level="DEBUG",
    )


def test_defaults_for_optional_sections() -> None:
    config = parse_config(
        {"graph": {"edges": [["A", "B", 1]]}, "search": {"start": "A", "goal": "B"}}
    )

    assert config.edges_file is None
    assert config.nodes == []
    assert not config.prune_equal_cost
    assert not config.deterministic
    assert config.log_level == "WARNING"


def test_absolute_edges_file_is_kept(tmp_path) -> None:
    edges = tmp_path / "edges.txt"
    config = parse_config(
        {"graph": {"edges_file": str(edges)}, "search": {"start": "A", "goal": "B"}},
        base_dir=Path("/elsewhere"),
    )

    assert config.edges_file == edges


@pytest.mark.parametrize(
    "raw, message",
    [
        ({"graph": {"nodes": ["A"]}, "search": {"start": "A"}}, "search.goal"),
        ({"graph": {"nodes": ["A"]}}, "search.start"),
        ({"search": {"start": "A", "goal": "B"}}, "graph.edges_file"),
        (
            {"graph": {"edges": [["A", "B"]]}, "search": {"start": "A", "goal": "B"}},
            r"graph.edges\[0\]",
        ),
        (
            {"graph": {"edges": [["A", "B", "far"]]}, "search": {"start": "A", "goal": "B"}},
            "non-integer cost",
        ),
        (
            {"graph": {"edges": [["A", "B", 1.5]]}, "search": {"start": "A", "goal": "B"}},
            "non-integer cost",
        ),
        (
            {"graph": {"nodes": ["A"]}, "search": {"start": "A", "goal": "A", "deterministic": "false"}},
            "search.deterministic must be true or false",
        ),
        (
            {"graph": {"nodes": ["A"]}, "search": {"start": "A", "goal": "A", "prune_equal_cost": 1}},
            "search.prune_equal_cost must be true or false",
        ),
    ],
)
def test_invalid_configs(raw, message) -> None:
    with pytest.raises(ValueError, match=message):
        parse_config(raw)


def test_with_overrides_ignores_none() -> None:
    config = ProblemConfig(start="A", goal="B", nodes=["A", "B"])

    updated = config.with_overrides(start=None, goal="C", deterministic=True)

    assert updated.start == "A"
    assert updated.goal == "C"
    assert updated.deterministic
    assert config.goal == "B"


def test_load_empty_config(tmp_path) -> None:
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == {}


def test_build_graph_inline_edges_override_file(tmp_path) -> None:
    (tmp_path / "edges.txt").write_text("A,B,10\nB,C,1\n", encoding="utf-8")
    (tmp_path / "instance.yaml").write_text(
        "graph:\n"
        "  edges_file: edges.txt\n"
        "  nodes: [Island]\n"
        "  edges:\n"
        "    - [A, B, 2]\n"
        "search:\n"
        "  start: A\n"
        "  goal: C\n",
        encoding="utf-8",
    )

    config = read_problem(tmp_path / "instance.yaml")
    graph = build_graph(config)

    assert graph.cost("B", "A") == 2
    assert graph.neighbors("Island") == []
    assert find_route(graph, config.start, config.goal).cost == 3


def test_bundled_problem_instance() -> None:
    config = read_problem(ROOT / "problem_instance.yaml")
    graph = build_graph(config)

    result = find_route(graph, config.start, config.goal)

    assert (config.start, config.goal) == ("Coruna", "Valencia")
    assert result.cost == 1090
    assert find_route(graph, "Coruna", "Palma").path is None
