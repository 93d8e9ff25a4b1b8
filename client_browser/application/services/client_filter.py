"""Filter engine — narrows a client sequence by category tab and search text.

Both stages are stable: the output keeps the relative order of the input
and is always a new list, never an alias of the caller's sequence.
"""

from collections.abc import Iterable, Sequence

from client_browser.domain.entities import Category, Client


def filter_clients(
    clients: Iterable[Client],
    category: Category | str = Category.ALL,
    query: str = "",
) -> list[Client]:
    """Return the clients matching ``category`` AND ``query``.

    ``query`` matches case-insensitively as a substring of the name or the
    email, or as a substring of the decimal id. An empty query matches all.
    """
    category = Category(category)
    filtered = [c for c in clients if _matches_category(c, category)]
    if query:
        needle = query.lower()
        filtered = [c for c in filtered if _matches_query(c, query, needle)]
    return filtered


def count_clients(clients: Iterable[Client], category: Category | str = Category.ALL) -> int:
    """Number of clients in ``category`` (all of them for ``Category.ALL``)."""
    category = Category(category)
    return sum(1 for c in clients if _matches_category(c, category))


def category_counts(clients: Sequence[Client]) -> dict[Category, int]:
    """Badge counts for every category tab."""
    return {category: count_clients(clients, category) for category in Category}


def _matches_category(client: Client, category: Category) -> bool:
    if category is Category.ALL:
        return True
    return client.type.value == category.value


def _matches_query(client: Client, query: str, needle: str) -> bool:
    return (
        needle in client.name.lower()
        or needle in client.email.lower()
        or query in str(client.id)
    )
