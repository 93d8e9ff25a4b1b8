"""Unit tests for the client filter engine."""

from datetime import datetime, timezone

import pytest

from client_browser.application.services.client_filter import (
    category_counts,
    count_clients,
    filter_clients,
)
from client_browser.domain.entities import Category, Client, ClientType
from client_browser.infrastructure.seed_data import sample_clients


def _client(client_id: int, name: str, client_type: ClientType, email: str) -> Client:
    return Client(
        id=client_id,
        name=name,
        type=client_type,
        email=email,
        updated_by="tester",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


@pytest.fixture
def clients() -> list[Client]:
    return sample_clients()


def _names(clients: list[Client]) -> list[str]:
    return [c.name for c in clients]


def test_all_category_passes_everything(clients):
    assert _names(filter_clients(clients, Category.ALL, "")) == _names(clients)


def test_category_keeps_only_matching_type(clients):
    result = filter_clients(clients, Category.COMPANY)
    assert _names(result) == ["Acme Corp", "Tech Solutions Inc"]


def test_category_accepts_plain_string(clients):
    result = filter_clients(clients, "Individual")
    assert _names(result) == ["John Doe", "Test Test", "Jane Smith"]


def test_unknown_category_fails_loudly(clients):
    with pytest.raises(ValueError):
        filter_clients(clients, "Partner")


def test_query_matches_name_case_insensitively(clients):
    assert _names(filter_clients(clients, query="jOHN")) == ["John Doe"]


def test_query_matches_email(clients):
    assert _names(filter_clients(clients, query="@ACME.")) == ["Acme Corp"]


def test_query_matches_id_substring(clients):
    assert _names(filter_clients(clients, query="22")) == ["Acme Corp"]
    assert _names(filter_clients(clients, query="2")) == _names(clients)


def test_query_and_category_compose(clients):
    # No company has "test" in its name, email or id
    result = filter_clients(clients, Category.COMPANY, "test")
    assert result == []
    result = filter_clients(clients, Category.INDIVIDUAL, "test")
    assert _names(result) == ["Test Test"]


def test_output_preserves_input_order():
    clients = [
        _client(3, "Zed", ClientType.INDIVIDUAL, "z@example.com"),
        _client(1, "Amy", ClientType.INDIVIDUAL, "a@example.com"),
        _client(2, "Max", ClientType.COMPANY, "m@example.com"),
    ]
    result = filter_clients(clients, Category.ALL, "example")
    assert [c.id for c in result] == [3, 1, 2]


def test_no_matches_returns_empty_list(clients):
    assert filter_clients(clients, Category.ALL, "nobody-here") == []
    assert filter_clients([], Category.COMPANY, "") == []


def test_filter_is_idempotent(clients):
    for category in Category:
        for query in ("", "a", "2", "COM"):
            once = filter_clients(clients, category, query)
            assert filter_clients(once, category, query) == once


def test_filter_returns_a_new_list(clients):
    result = filter_clients(clients)
    assert result == clients
    assert result is not clients
    result.pop()
    assert len(clients) == 5


def test_counts_per_category(clients):
    assert count_clients(clients) == 5
    assert count_clients(clients, Category.INDIVIDUAL) == 3
    assert count_clients(clients, "Company") == 2
    assert category_counts(clients) == {
        Category.ALL: 5,
        Category.INDIVIDUAL: 3,
        Category.COMPANY: 2,
    }
