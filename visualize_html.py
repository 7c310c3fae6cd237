from __future__ import annotations

import html
import json
import math
from string import Template
from typing import Dict, List, Sequence, Tuple

from graph import Graph
from search import SearchResult


def compute_layout(
    nodes: Sequence[str], width: float = 800.0, height: float = 600.0
) -> Dict[str, Tuple[float, float]]:
    """Place nodes on a circle for a simple, dependency-free layout."""
    centre_x = width / 2.0
    centre_y = height / 2.0
    radius = min(width, height) * 0.4 if nodes else 0.0
    positions: Dict[str, Tuple[float, float]] = {}
    total = len(nodes)
    for index, node in enumerate(nodes):
        angle = 2.0 * math.pi * (index / total) if total else 0.0
        positions[node] = (
            centre_x + radius * math.cos(angle),
            centre_y + radius * math.sin(angle),
        )
    return positions


def _route_edges(path: Sequence[str]) -> List[Tuple[str, str]]:
    return list(zip(path[:-1], path[1:]))


_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <title>Route $start to $goal</title>
    <style>
      body {
        margin: 0;
        font-family: "Segoe UI", Roboto, sans-serif;
        background: #0b1120;
        color: #e5e7eb;
        display: flex;
        min-height: 100vh;
      }
      #graph-container { flex: 1; padding: 1rem; }
      svg { width: 100%; height: 100%; }
      .edge { stroke: #475569; stroke-width: 1.5; }
      .edge-route { stroke: #ef4444; stroke-width: 3.5; }
      .edge-cost { fill: #94a3b8; font-size: 11px; }
      .node { fill: #1e3a8a; stroke: #e5e7eb; stroke-width: 2; }
      .node-route { fill: #b91c1c; }
      .node-label { fill: #f8fafc; font-size: 12px; text-anchor: middle; dominant-baseline: middle; }
      .marker { fill: #facc15; }
      aside { width: 300px; padding: 1.5rem; background: #111827; }
      aside h2 { margin-top: 0; font-size: 1.1rem; color: #facc15; }
      dl { display: grid; grid-template-columns: auto 1fr; gap: 0.4rem 1rem; }
      dt { color: #9ca3af; }
      dd { margin: 0; }
      #status { margin-top: 1rem; line-height: 1.5; }
    </style>
    <script src="https://cdn.jsdelivr.net/npm/d3@7"></script>
  </head>
  <body>
    <div id="graph-container">
      <svg id="graph" viewBox="0 0 $width $height"></svg>
    </div>
    <aside>
      <h2>Uniform cost search</h2>
      <dl>
        <dt>Start</dt><dd>$start</dd>
        <dt>Goal</dt><dd>$goal</dd>
        <dt>Total cost</dt><dd>$cost</dd>
        <dt>Hops</dt><dd>$hops</dd>
        <dt>Expanded</dt><dd>$expanded</dd>
        <dt>Frontier peak</dt><dd>$max_frontier</dd>
      </dl>
      <div id="status"></div>
    </aside>
    <script type="application/json" id="route-data">$json_payload</script>
    <script>
      const data = JSON.parse(document.getElementById("route-data").textContent);
      const svg = d3.select("#graph");
      const nodeById = new Map(data.nodes.map(node => [node.id, node]));
      const onRoute = new Set(data.route);

      svg.append("g").selectAll("line").data(data.edges).join("line")
        .attr("class", edge => edge.in_route ? "edge edge-route" : "edge")
        .attr("x1", edge => nodeById.get(edge.source).x)
        .attr("y1", edge => nodeById.get(edge.source).y)
        .attr("x2", edge => nodeById.get(edge.target).x)
        .attr("y2", edge => nodeById.get(edge.target).y);

      svg.append("g").selectAll("text").data(data.edges).join("text")
        .attr("class", "edge-cost")
        .attr("x", edge => (nodeById.get(edge.source).x + nodeById.get(edge.target).x) / 2)
        .attr("y", edge => (nodeById.get(edge.source).y + nodeById.get(edge.target).y) / 2 - 6)
        .text(edge => edge.cost);

      svg.append("g").selectAll("circle").data(data.nodes).join("circle")
        .attr("class", node => onRoute.has(node.id) ? "node node-route" : "node")
        .attr("r", 18)
        .attr("cx", node => node.x)
        .attr("cy", node => node.y);

      svg.append("g").selectAll("text").data(data.nodes).join("text")
        .attr("class", "node-label")
        .attr("x", node => node.x)
        .attr("y", node => node.y)
        .text(node => node.id);

      const first = nodeById.get(data.route[0]);
      const marker = svg.append("circle").attr("class", "marker").attr("r", 8)
        .attr("cx", first.x).attr("cy", first.y);
      const statusEl = document.getElementById("status");

      let step = 0;
      function showStep() {
        const nodeId = data.route[step];
        statusEl.innerHTML = "<strong>Step " + (step + 1) + "/" + data.route.length +
          "</strong><br/>At " + nodeId + "<br/>Cost so far " + data.running_cost[step];
      }
      showStep();
      const timer = setInterval(() => {
        step += 1;
        if (step >= data.route.length) {
          clearInterval(timer);
          return;
        }
        const node = nodeById.get(data.route[step]);
        marker.transition().duration(400).attr("cx", node.x).attr("cy", node.y);
        showStep();
      }, 900);
    </script>
  </body>
</html>
""")


def render_html(
    graph: Graph,
    result: SearchResult,
    layout: Dict[str, Tuple[float, float]] | None = None,
) -> str:
    width = 900
    height = 640
    if layout is None:
        layout = compute_layout(graph.nodes, width=width, height=height)

    route = result.path or []
    route_edge_set = {frozenset(edge) for edge in _route_edges(route)}

    running_cost = [0]
    for u, v in _route_edges(route):
        running_cost.append(running_cost[-1] + (graph.cost(u, v) or 0))

    data = {
        "nodes": [
            {"id": node, "x": layout[node][0], "y": layout[node][1]}
            for node in graph.nodes
        ],
        "edges": [
            {
                "source": edge.origin,
                "target": edge.target,
                "cost": edge.cost,
                "in_route": frozenset((edge.origin, edge.target)) in route_edge_set,
            }
            for edge in graph.edges()
        ],
        "route": route,
        "running_cost": running_cost[: len(route)],
    }
    json_payload = json.dumps(data, ensure_ascii=False).replace("</", "<\\/")

    return _PAGE.substitute(
        width=width,
        height=height,
        start=html.escape(result.start),
        goal=html.escape(result.goal),
        cost="-" if result.cost is None else result.cost,
        hops=result.hops,
        expanded=result.expanded,
        max_frontier=result.max_frontier,
        json_payload=json_payload,
    )
