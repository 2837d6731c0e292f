from .convert import to_networkx, from_networkx

__all__ = [
    "to_networkx",
    "from_networkx",
]
