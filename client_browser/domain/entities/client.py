"""Domain entity — pure Python business object for a client record."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ClientType(str, Enum):
    """Kinds of client a record can describe."""

    INDIVIDUAL = "Individual"
    COMPANY = "Company"


@dataclass
class Client:
    """A single client as held by the record store.

    Records are append-only: there is no update path, so ``updated_at``
    stays equal to ``created_at`` for the lifetime of the object.
    """

    id: int
    name: str
    type: ClientType
    email: str
    updated_by: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        if self.updated_at is None:
            self.updated_at = self.created_at
