from .client import Client, ClientType
from .view import (
    Category,
    SortConfig,
    SortDirection,
    SortField,
    SortOption,
    SORT_OPTIONS,
)

__all__ = [
    "Client",
    "ClientType",
    "Category",
    "SortConfig",
    "SortDirection",
    "SortField",
    "SortOption",
    "SORT_OPTIONS",
]
