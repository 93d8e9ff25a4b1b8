from .client_factory import ClientFactory
from .client_filter import category_counts, count_clients, filter_clients
from .client_service import ClientService
from .client_sort import sort_clients

__all__ = [
    "ClientFactory",
    "ClientService",
    "category_counts",
    "count_clients",
    "filter_clients",
    "sort_clients",
]
