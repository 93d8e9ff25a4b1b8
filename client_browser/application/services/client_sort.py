"""Sort engine — orders a copy of a client sequence by one field."""

import logging
from collections.abc import Callable, Iterable
from typing import Any

from client_browser.domain.entities import Client, SortConfig, SortDirection, SortField

logger = logging.getLogger(__name__)

_SORT_KEYS: dict[SortField, Callable[[Client], Any]] = {
    SortField.ID: lambda c: c.id,
    SortField.NAME: lambda c: c.name.lower(),
    SortField.CREATED_AT: lambda c: c.created_at.timestamp(),
    SortField.UPDATED_AT: lambda c: c.updated_at.timestamp(),
}


def sort_clients(clients: Iterable[Client], config: SortConfig | None) -> list[Client]:
    """Return a new list ordered per ``config``; input order when ``config`` is None.

    Ties keep their input order in both directions (``sorted`` is stable,
    including with ``reverse=True``). The input is never mutated.
    """
    if config is None:
        return list(clients)

    logger.debug("Sorting clients by %s %s", config.field.value, config.direction.value)
    return sorted(clients, key=_SORT_KEYS[config.field], reverse=config.direction is SortDirection.DESC)
