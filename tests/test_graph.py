"""Tests for mstools.graph.model."""
import pytest

from mstools.errors import InvalidConstructionError, VertexNotFoundError
from mstools.graph.model import Edge, Graph, Vertex, new_edge, new_vertex


def _triangle():
    g = Graph()
    a = Vertex(0, "A")
    b = Vertex(1, "B")
    c = Vertex(2, "C")
    g.add_edge(a, b, 4)
    g.add_edge(b, c, 2)
    g.add_edge(a, c, 3)
    return g


# --- construction ---

def test_basic_counts():
    g = _triangle()
    assert g.vertex_count() == 3
    assert g.edge_count() == 3
    assert len(g) == 3


def test_names_taken_from_vertex_arguments():
    g = _triangle()
    assert [v.name for v in g.vertices()] == ["A", "B", "C"]


def test_add_vertex_first_writer_wins():
    g = Graph()
    first = g.add_vertex(7, "first", data={"k": 1})
    second = g.add_vertex(7, "second", data={"k": 2})
    assert second is first
    assert g.get_vertex(7).name == "first"
    assert g.get_vertex(7).data == {"k": 1}
    assert g.vertex_count() == 1


def test_add_edge_does_not_overwrite_existing_vertex():
    g = Graph()
    g.add_vertex(0, "A")
    g.add_edge(Vertex(0, "renamed"), 1, 5)
    assert g.get_vertex(0).name == "A"


def test_add_edge_auto_creates_endpoints():
    g = Graph()
    e = g.add_edge(3, 9, 1)
    assert 3 in g and 9 in g
    assert e.endpoints == (3, 9)
    assert e.index == 0


def test_caller_vertex_not_stored():
    g = Graph()
    v0 = Vertex(0, "A")
    g.add_edge(v0, 1, 2)
    assert g.get_vertex(0) is not v0
    assert v0.edges == []
    v0.edges.append(Edge(0, 5, 99))
    assert g.get_vertex(0).degree == 1


def test_undirected_reverse_adjacency():
    g = Graph()
    e = g.add_edge(0, 1, 6, data="road")
    back = g.neighbors(1)
    assert len(back) == 1
    r = back[0]
    assert (r.source, r.target) == (1, 0)
    assert r.weight == 6
    assert r.data == "road"
    assert r.index == e.index
    # mirrored entries are not part of the edge sequence
    assert g.edges() == [e]


def test_directed_has_no_reverse_adjacency():
    g = Graph(directed=True)
    g.add_edge(0, 1, 6)
    assert g.directed is True
    assert g.neighbors(1) == []
    assert len(g.neighbors(0)) == 1


def test_self_loop_and_parallel_edges_kept():
    g = Graph()
    g.add_edge(0, 0, 1)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 2)
    assert g.edge_count() == 3
    # self-loop appears forward and mirrored
    assert sum(1 for e in g.neighbors(0) if e.is_self_loop()) == 2
    assert [e.index for e in g.edges()] == [0, 1, 2]


def test_add_edges_from():
    g = Graph()
    added = g.add_edges_from([(0, 1, 3), (1, 2, 4, "x")])
    assert len(added) == 2
    assert added[1].data == "x"
    with pytest.raises(InvalidConstructionError):
        g.add_edges_from([(0, 1)])


def test_add_edge_from_copies():
    g = Graph()
    src = new_edge(Vertex(0, "A"), 1, 8, data="d")
    stored = g.add_edge_from(src)
    assert stored == Edge(0, 1, 8, index=0)
    assert stored is not src
    assert src.index == -1


def test_add_edge_from_dangling_edge_rejected():
    g = Graph()
    with pytest.raises(InvalidConstructionError):
        g.add_edge_from(new_edge(None, 1, 3))


# --- queries ---

def test_get_vertex_missing():
    g = Graph()
    with pytest.raises(VertexNotFoundError):
        g.get_vertex(42)
    with pytest.raises(KeyError):
        g.neighbors(42)


def test_vertex_ids_sorted():
    g = Graph()
    g.add_edge(5, 2, 1)
    g.add_vertex(0)
    assert g.vertex_ids() == [0, 2, 5]
    assert g.has_vertex(5)
    assert not g.has_vertex(1)


def test_edges_returns_copy():
    g = _triangle()
    es = g.edges()
    es.clear()
    assert g.edge_count() == 3


# --- validated constructors ---

def test_new_vertex_requires_edges():
    with pytest.raises(InvalidConstructionError):
        new_vertex(0, "A", None, [])


def test_new_vertex_with_edges():
    v = new_vertex(0, "A", None, [Edge(0, 1, 3)])
    assert v.degree == 1


def test_new_edge_requires_an_endpoint():
    with pytest.raises(InvalidConstructionError):
        new_edge(None, None, 1)


def test_new_edge_accepts_vertices():
    e = new_edge(Vertex(3, "C"), Vertex(4, "D"), 7)
    assert e.endpoints == (3, 4)
    assert e.reversed().endpoints == (4, 3)
