from .in_memory_client_repository import InMemoryClientRepository

__all__ = [
    "InMemoryClientRepository",
]
