from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, List, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib import animation
import networkx as nx

from config import build_graph, read_problem
from graph import Graph
from search import SearchResult, find_route


ROUTE_COLOUR = "#d62728"


def build_networkx_graph(graph: Graph) -> nx.Graph:
    g = nx.Graph()
    g.add_nodes_from(graph.nodes)
    for edge in graph.edges():
        g.add_edge(edge.origin, edge.target, cost=edge.cost)
    return g


def compute_layout(graph: nx.Graph) -> Dict[str, Tuple[float, float]]:
    return nx.spring_layout(graph, seed=42)


def route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


def running_costs(graph_nx: nx.Graph, path: Sequence[str]) -> List[int]:
    """Accumulated cost at each node of the path, starting at 0."""
    totals = [0]
    for u, v in route_edges(path):
        totals.append(totals[-1] + graph_nx.edges[u, v]["cost"])
    return totals[: len(path)]


def summary_lines(result: SearchResult) -> List[str]:
    if not result.found:
        return [f"{result.start} -> {result.goal}", "No solution found"]
    return [
        f"{result.start} -> {result.goal}",
        f"Total cost: {result.cost}",
        f"Hops: {result.hops}",
        f"Expanded: {result.expanded}",
        f"Frontier peak: {result.max_frontier}",
    ]


def draw_static_figure(
    graph_nx: nx.Graph,
    layout: Dict[str, Tuple[float, float]],
    result: SearchResult,
    output: Path | None,
    show: bool,
) -> None:
    fig, ax = plt.subplots(figsize=(10, 8))

    path = result.path or []
    on_route = set(path)
    node_colours = [
        ROUTE_COLOUR if node in on_route else "#9ecae1" for node in graph_nx.nodes
    ]

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)

    final_route_edges = route_edges(path)
    if final_route_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=final_route_edges,
            edge_color=ROUTE_COLOUR,
            width=2.5,
            ax=ax,
        )

    nx.draw_networkx_nodes(
        graph_nx, layout, node_color=node_colours, node_size=600, ax=ax
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    edge_labels = {(u, v): data["cost"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(
        graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax
    )

    ax.text(
        1.02,
        0.5,
        "\n".join(summary_lines(result)),
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title("Uniform Cost Search – Route Overview")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def animate_route(
    graph_nx: nx.Graph,
    layout: Dict[str, Tuple[float, float]],
    result: SearchResult,
    output: Path | None,
    show: bool,
) -> None:
    path = result.path
    if not path:
        return

    costs = running_costs(graph_nx, path)

    fig, ax = plt.subplots(figsize=(10, 8))

    nx.draw_networkx_edges(graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0)
    nx.draw_networkx_nodes(
        graph_nx, layout, node_color="#9ecae1", node_size=500, ax=ax
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=9, ax=ax)

    path_line, = ax.plot([], [], color=ROUTE_COLOUR, linewidth=2.0, zorder=2)
    current_edge_line, = ax.plot([], [], color="#ff7f0e", linewidth=3.0, zorder=3)
    marker = ax.scatter([], [], s=160, c="#1f77b4", zorder=4)
    status_text = ax.text(
        0.02,
        0.98,
        "",
        transform=ax.transAxes,
        va="top",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Uniform Cost Search – {result.start} to {result.goal}")

    def init():
        path_line.set_data([], [])
        current_edge_line.set_data([], [])
        marker.set_offsets([[float("nan"), float("nan")]])
        status_text.set_text("")
        return path_line, current_edge_line, marker, status_text

    def update(frame: int):
        node = path[frame]
        x, y = layout[node]
        prefix = path[: frame + 1]
        path_line.set_data(
            [layout[n][0] for n in prefix], [layout[n][1] for n in prefix]
        )
        marker.set_offsets([[x, y]])

        if frame > 0:
            x_prev, y_prev = layout[path[frame - 1]]
            current_edge_line.set_data([x_prev, x], [y_prev, y])
        else:
            current_edge_line.set_data([], [])

        status_text.set_text(
            "\n".join(
                [
                    f"Step {frame + 1}/{len(path)}",
                    f"At node: {node}",
                    f"Cost so far: {costs[frame]}/{result.cost}",
                ]
            )
        )
        return path_line, current_edge_line, marker, status_text

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(path),
        init_func=init,
        interval=800,
        blit=False,
    )

    if output:
        output_path = Path(output)
        suffix = output_path.suffix.lower()
        if suffix == ".gif":
            anim.save(output_path, writer=animation.PillowWriter(fps=1))
        elif suffix in {".mp4", ".m4v"}:
            anim.save(output_path, writer=animation.FFMpegWriter(fps=1))
        else:
            anim.save(output_path)

    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Visualise the uniform cost search route on the graph."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("problem_instance.yaml"),
        help="Path to the YAML instance configuration.",
    )
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and route.",
    )
    parser.add_argument(
        "--animation-out",
        type=Path,
        help="Optional path to save an animation (GIF/MP4) of the route.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    problem = read_problem(args.config)
    graph = build_graph(problem)
    result = find_route(
        graph,
        problem.start,
        problem.goal,
        prune_equal_cost=problem.prune_equal_cost,
        deterministic=problem.deterministic,
    )

    graph_nx = build_networkx_graph(graph)
    layout = compute_layout(graph_nx)
    show = not args.no_show

    draw_static_figure(graph_nx, layout, result, output=args.static_out, show=show)
    animate_route(graph_nx, layout, result, output=args.animation_out, show=show)


if __name__ == "__main__":
    main()
