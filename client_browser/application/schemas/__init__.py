from .client import ClientCreate, ClientResponse

__all__ = [
    "ClientCreate",
    "ClientResponse",
]
