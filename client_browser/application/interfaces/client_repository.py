"""Abstract repository interface (port) for the client record store."""

from abc import ABC, abstractmethod

from client_browser.domain.entities import Client


class ClientRepository(ABC):
    """Port for the append-only client store — implemented in the infrastructure layer.

    No remove or update operation exists; records live for the lifetime
    of the store once appended.
    """

    @abstractmethod
    def append(self, client: Client) -> None:
        """Commit a new client at the end of the sequence."""
        ...

    @abstractmethod
    def all(self) -> tuple[Client, ...]:
        """Return every stored client in insertion order."""
        ...

    @abstractmethod
    def max_id(self) -> int:
        """Highest id currently stored, 0 when the store is empty."""
        ...

    @property
    @abstractmethod
    def version(self) -> int:
        """Counter bumped on every successful append."""
        ...
