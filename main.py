from __future__ import annotations

import argparse
import logging
import os
import sys
import tempfile
import webbrowser
from pathlib import Path
from typing import List, Optional
from urllib.parse import quote

from config import ProblemConfig, build_graph, read_problem
from graph import Graph
from logger import setup_logger
from search import SearchResult, find_route


logger = logging.getLogger(__name__)


def print_result(result: SearchResult) -> None:
    print("=== Uniform Cost Search ===")
    if not result.found:
        print("No solution found")
        return

    print(f"Route: {' -> '.join(result.path)}")
    print(f"Total cost: {result.cost}")
    print(
        f"Nodes expanded: {result.expanded} (frontier peak {result.max_frontier})"
    )


def resolve_problem(args: argparse.Namespace) -> ProblemConfig:
    if args.edges and args.start and args.goal:
        problem = ProblemConfig(
            start=args.start, goal=args.goal, edges_file=args.edges
        )
    else:
        problem = read_problem(args.config).with_overrides(
            start=args.start, goal=args.goal, edges_file=args.edges
        )

    # Flags only switch options on; the YAML file may already have them set.
    return problem.with_overrides(
        deterministic=args.deterministic or None,
        prune_equal_cost=args.prune_equal_cost or None,
        log_level=args.log_level,
    )


def _store_page(page: str) -> Path:
    handle, name = tempfile.mkstemp(prefix="ucs-route-", suffix=".html")
    os.close(handle)
    path = Path(name)
    path.write_text(page, encoding="utf-8")
    return path


def open_in_browser(graph: Graph, result: SearchResult) -> Optional[Path]:
    """Show the route page in a browser.

    The page goes out as a data URI first; macOS refuses those, so there (or
    when the browser does not accept the URI) it is written to a temporary
    file instead and that file's path is returned.
    """
    from visualize_html import render_html

    if not result.found:
        raise RuntimeError("Visualisation requested but no route was found.")

    page = render_html(graph=graph, result=result)
    if sys.platform != "darwin":
        try:
            if webbrowser.open_new_tab(
                "data:text/html;charset=utf-8," + quote(page, safe="~()*!.'")
            ):
                return None
        except webbrowser.Error as exc:  # pragma: no cover - platform dependent
            logger.warning("Browser rejected the data URI: %s", exc)

    path = _store_page(page)
    webbrowser.open_new_tab(path.as_uri())
    print(f"Visualisation: {path}")
    return path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the cheapest route between two nodes with uniform cost search."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("problem_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument(
        "--edges",
        type=Path,
        help="Edge list file (nodeA,nodeB,cost per line); overrides graph.edges_file.",
    )
    parser.add_argument("--start", help="Start node; overrides search.start.")
    parser.add_argument("--goal", help="Goal node; overrides search.goal.")
    parser.add_argument(
        "--deterministic",
        action="store_true",
        help="Break equal-cost ties by enqueue order.",
    )
    parser.add_argument(
        "--prune-equal-cost",
        action="store_true",
        help="Also drop frontier entries whose node was finalised at the same cost.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level; overrides logging.level.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write log records to this file.",
    )
    parser.add_argument(
        "--visualize",
        action="store_true",
        help="Open an interactive browser visualisation of the route.",
    )
    return parser


def run(argv: Optional[List[str]] = None) -> SearchResult:
    args = build_parser().parse_args(argv)

    problem = resolve_problem(args)
    setup_logger(problem.log_level, args.log_file)

    graph = build_graph(problem)
    result = find_route(
        graph,
        problem.start,
        problem.goal,
        prune_equal_cost=problem.prune_equal_cost,
        deterministic=problem.deterministic,
    )

    print_result(result)

    if args.visualize:
        open_in_browser(graph, result)

    return result


def main(argv: Optional[List[str]] = None) -> None:
    run(argv)


if __name__ == "__main__":
    main()
