"""Sample clients loaded into a fresh store when ``seed_sample_data`` is on."""

from datetime import datetime, timezone

from client_browser.domain.entities import Client, ClientType


def _day(value: str) -> datetime:
    return datetime.fromisoformat(value).replace(tzinfo=timezone.utc)


def sample_clients() -> list[Client]:
    """Fresh copies of the demo records, ids 20 through 24."""
    return [
        Client(
            id=20,
            name="John Doe",
            type=ClientType.INDIVIDUAL,
            email="johndoe@email.com",
            updated_by="hello world",
            created_at=_day("2024-01-15"),
            updated_at=_day("2024-02-10"),
        ),
        Client(
            id=21,
            name="Test Test",
            type=ClientType.INDIVIDUAL,
            email="test@test.com",
            updated_by="hello world",
            created_at=_day("2024-01-20"),
            updated_at=_day("2024-02-05"),
        ),
        Client(
            id=22,
            name="Acme Corp",
            type=ClientType.COMPANY,
            email="contact@acme.com",
            updated_by="admin",
            created_at=_day("2024-01-10"),
            updated_at=_day("2024-02-15"),
        ),
        Client(
            id=23,
            name="Jane Smith",
            type=ClientType.INDIVIDUAL,
            email="jane@example.com",
            updated_by="manager",
            created_at=_day("2024-01-25"),
            updated_at=_day("2024-02-01"),
        ),
        Client(
            id=24,
            name="Tech Solutions Inc",
            type=ClientType.COMPANY,
            email="info@techsolutions.com",
            updated_by="admin",
            created_at=_day("2024-01-05"),
            updated_at=_day("2024-02-20"),
        ),
    ]
