from __future__ import annotations

from typing import Union

import networkx as nx

from mstools.errors import InvalidConstructionError
from mstools.graph.model import Graph


def to_networkx(graph: Graph) -> Union[nx.MultiGraph, nx.MultiDiGraph]:
    """
    Export to a NetworkX multigraph.

    One NetworkX edge per inserted edge (parallel edges and self-loops kept),
    with attributes weight, data and index.  Nodes carry name and data.
    """
    G = nx.MultiDiGraph() if graph.directed else nx.MultiGraph()
    for v in graph.vertices():
        G.add_node(v.id, name=v.name, data=v.data)
    for e in graph.edges():
        G.add_edge(e.source, e.target, weight=e.weight, data=e.data, index=e.index)
    return G


def from_networkx(G: nx.Graph, *, weight: str = "weight", default_weight: int = 1) -> Graph:
    """
    Build a Graph from any NetworkX graph with integer node labels.

    Nodes are inserted in G's node order, edges in G's edge order.
    Node attributes 'name' and 'data' and edge attribute 'data' are carried
    over; missing weights default to *default_weight*.
    """
    graph = Graph(directed=G.is_directed())
    for node, attrs in G.nodes(data=True):
        if not isinstance(node, int):
            raise InvalidConstructionError(f"node labels must be integers, got {node!r}")
        graph.add_vertex(node, attrs.get("name", ""), attrs.get("data"))
    for u, v, attrs in G.edges(data=True):
        graph.add_edge(u, v, attrs.get(weight, default_weight), attrs.get("data"))
    return graph
