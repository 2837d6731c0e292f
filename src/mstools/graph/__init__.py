from .model import Edge, Graph, Vertex, new_edge, new_vertex

__all__ = [
    "Edge",
    "Graph",
    "Vertex",
    "new_edge",
    "new_vertex",
]
