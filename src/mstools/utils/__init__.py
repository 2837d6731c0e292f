from .connectivity import is_connected, connected_components, reachable_from

__all__ = [
    "is_connected",
    "connected_components",
    "reachable_from",
]
