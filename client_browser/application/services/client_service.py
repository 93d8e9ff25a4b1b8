"""Application service (use case) for browsing and adding clients.

This is the surface the presentation layer calls: it composes the filter
and sort engines over the store's current contents and routes new
records through the factory before committing them.
"""

import logging
import threading
from collections import OrderedDict
from collections.abc import Mapping
from typing import Any

from client_browser.application.interfaces import ClientRepository
from client_browser.application.schemas.client import ClientCreate
from client_browser.application.services.client_factory import ClientFactory
from client_browser.application.services.client_filter import (
    category_counts,
    count_clients,
    filter_clients,
)
from client_browser.application.services.client_sort import sort_clients
from client_browser.domain.entities import Category, Client, SortConfig

logger = logging.getLogger(__name__)

_ViewKey = tuple[int, Category, str, SortConfig | None]


class ClientService:
    """Orchestrates the derived-view pipeline and client creation. Depends on the repository port (DI)."""

    def __init__(
        self,
        repository: ClientRepository,
        factory: ClientFactory | None = None,
        *,
        view_cache_size: int = 128,
    ):
        self._repository = repository
        self._factory = factory or ClientFactory()
        self._view_cache_size = view_cache_size
        self._views: OrderedDict[_ViewKey, tuple[Client, ...]] = OrderedDict()
        self._write_lock = threading.Lock()

    def list_all(self) -> list[Client]:
        return list(self._repository.all())

    def view(
        self,
        category: Category | str = Category.ALL,
        query: str = "",
        sort: SortConfig | None = None,
    ) -> list[Client]:
        """Filtered then sorted clients, recomputed whenever the store changes.

        Clearing ``sort`` (passing None) yields the filter output order.
        """
        category = Category(category)
        key: _ViewKey = (self._repository.version, category, query, sort)

        cached = self._views.get(key)
        if cached is not None:
            self._views.move_to_end(key)
            logger.debug("View cache hit: category=%s query=%r sort=%s", category.value, query, sort)
            return list(cached)

        clients = self._repository.all()
        result = sort_clients(filter_clients(clients, category, query), sort)
        logger.debug(
            "View computed: category=%s query=%r sort=%s -> %d of %d",
            category.value,
            query,
            sort,
            len(result),
            len(clients),
        )
        self._remember(key, result)
        return result

    def add_client(self, data: ClientCreate | Mapping[str, Any]) -> Client:
        """Create and store a client; the store is left unchanged on ValidationError."""
        with self._write_lock:
            client = self._factory.create(data, next_id=self._repository.max_id() + 1)
            self._repository.append(client)
        logger.info("Added client id=%d type=%s", client.id, client.type.value)
        return client

    def count(self, category: Category | str = Category.ALL) -> int:
        return count_clients(self._repository.all(), category)

    def category_counts(self) -> dict[Category, int]:
        return category_counts(self._repository.all())

    def _remember(self, key: _ViewKey, result: list[Client]) -> None:
        if self._view_cache_size <= 0:
            return
        # Entries keyed on an older store version can never be hit again.
        stale = [k for k in self._views if k[0] != key[0]]
        for k in stale:
            del self._views[k]
        self._views[key] = tuple(result)
        while len(self._views) > self._view_cache_size:
            self._views.popitem(last=False)
