"""Concrete repository implementation for Client backed by process memory."""

import logging
from collections.abc import Iterable

from client_browser.application.interfaces import ClientRepository
from client_browser.domain.entities import Client
from client_browser.domain.exceptions import DuplicateEntityError, ValidationError

logger = logging.getLogger(__name__)


class InMemoryClientRepository(ClientRepository):
    """Implements the ClientRepository port with an append-only list.

    Contents do not survive a restart. ``all()`` hands out tuples so callers
    can never reorder or shrink the canonical sequence.
    """

    def __init__(self, clients: Iterable[Client] = ()):
        self._clients: list[Client] = []
        self._ids: set[int] = set()
        self._version = 0
        for client in clients:
            self.append(client)

    def append(self, client: Client) -> None:
        missing = [name for name in ("name", "email") if not getattr(client, name)]
        if missing:
            raise ValidationError(missing)
        if client.id <= 0:
            raise ValueError(f"Client id must be a positive integer, got {client.id}")
        if client.updated_at < client.created_at:
            raise ValueError(f"Client {client.id} has updated_at earlier than created_at")
        if client.id in self._ids:
            raise DuplicateEntityError("Client", "id", str(client.id))

        self._clients.append(client)
        self._ids.add(client.id)
        self._version += 1
        logger.info("Stored client id=%d name=%r (total=%d)", client.id, client.name, len(self._clients))

    def all(self) -> tuple[Client, ...]:
        return tuple(self._clients)

    def max_id(self) -> int:
        return max(self._ids, default=0)

    @property
    def version(self) -> int:
        return self._version

    def __len__(self) -> int:
        return len(self._clients)
