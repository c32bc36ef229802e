from .list_repository import ListRepository

__all__ = [
    "ListRepository",
]
