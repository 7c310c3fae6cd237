from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from graph import Graph
from priority_heap import PriorityHeap


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrontierElement:
    cost: int
    node: str
    path: Tuple[str, ...] = ()
    # Enqueue sequence number, only read by the deterministic ordering.
    order: int = field(default=0, compare=False)


def by_cost(a: FrontierElement, b: FrontierElement) -> bool:
    return a.cost < b.cost


def by_cost_then_order(a: FrontierElement, b: FrontierElement) -> bool:
    return (a.cost, a.order) < (b.cost, b.order)


@dataclass
class SearchResult:
    start: str
    goal: str
    path: Optional[List[str]] = None
    cost: Optional[int] = None
    expanded: int = 0
    max_frontier: int = 0

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def hops(self) -> int:
        return len(self.path) - 1 if self.path else 0


def find_route(
    graph: Graph,
    start: str,
    goal: str,
    prune_equal_cost: bool = False,
    deterministic: bool = False,
) -> SearchResult:
    """Run uniform-cost search from ``start`` to ``goal``.

    The frontier may hold several entries for the same node; stale ones are
    dropped when popped if the node was already finalised at a strictly lower
    cost (or at an equal cost too, with ``prune_equal_cost``). With
    ``deterministic`` the earliest enqueued entry wins among equal costs.
    Unknown endpoints simply produce no expansions, so the result is "not
    found" rather than an error.
    """
    logger.debug("Searching %s -> %s", start, goal)

    higher_priority = by_cost_then_order if deterministic else by_cost
    frontier: PriorityHeap[FrontierElement] = PriorityHeap(higher_priority)
    sequence = itertools.count()
    frontier.enqueue(FrontierElement(0, start, (), next(sequence)))

    explored: Dict[str, int] = {}
    result = SearchResult(start=start, goal=goal, max_frontier=frontier.count())

    while not frontier.is_empty():
        element = frontier.dequeue()
        if element is None:
            break

        finalised = explored.get(element.node)
        if finalised is not None and (
            finalised < element.cost
            or (prune_equal_cost and finalised == element.cost)
        ):
            continue

        current_path = element.path + (element.node,)
        if element.node == goal:
            result.path = list(current_path)
            result.cost = element.cost
            logger.info(
                "Found %s -> %s at cost %d after %d expansions",
                start,
                goal,
                element.cost,
                result.expanded,
            )
            return result

        result.expanded += 1
        for neighbor in graph.neighbors(element.node) or ():
            if neighbor in explored:
                continue
            step_cost = graph.cost(element.node, neighbor)
            if step_cost is None:
                step_cost = 0
            frontier.enqueue(
                FrontierElement(
                    element.cost + step_cost,
                    neighbor,
                    current_path,
                    next(sequence),
                )
            )
        result.max_frontier = max(result.max_frontier, frontier.count())

        explored[element.node] = element.cost

    logger.info(
        "No route %s -> %s after %d expansions", start, goal, result.expanded
    )
    return result


def uniform_cost_search(
    graph: Graph,
    start: str,
    goal: str,
    prune_equal_cost: bool = False,
    deterministic: bool = False,
) -> Optional[List[str]]:
    """Return the cheapest path from start to goal inclusive, or None."""
    return find_route(
        graph,
        start,
        goal,
        prune_equal_cost=prune_equal_cost,
        deterministic=deterministic,
    ).path
