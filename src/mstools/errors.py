"""Exceptions raised by mstools entry points."""
from __future__ import annotations


class MSTError(Exception):
    """Base class for every error raised by mstools."""


class InvalidOperationError(MSTError, ValueError):
    """An algorithm was asked to run on a graph it is not defined for."""


class VertexNotFoundError(MSTError, KeyError):
    """A vertex identity is not present in the graph."""

    def __init__(self, vertex_id: object):
        self.vertex_id = vertex_id
        super().__init__(vertex_id)

    def __str__(self) -> str:
        return f"vertex {self.vertex_id!r} not in graph"


class InvalidConstructionError(MSTError, ValueError):
    """A vertex or edge was built from inconsistent arguments."""
