"""Domain value objects describing how the client list is narrowed and ordered."""

from dataclasses import dataclass
from enum import Enum

from .client import ClientType


class Category(str, Enum):
    """Category tabs — ``ALL`` or one of the client types."""

    ALL = "All"
    INDIVIDUAL = ClientType.INDIVIDUAL.value
    COMPANY = ClientType.COMPANY.value


class SortField(str, Enum):
    """Client attributes the list can be ordered by."""

    ID = "id"
    NAME = "name"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortConfig:
    """Active sort overlay: a field and a direction.

    Plain strings are accepted and coerced through the enums, so an
    unknown field or direction raises ``ValueError`` at construction.
    """

    field: SortField
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        object.__setattr__(self, "field", SortField(self.field))
        object.__setattr__(self, "direction", SortDirection(self.direction))


@dataclass(frozen=True)
class SortOption:
    """A selectable entry of the sort menu."""

    config: SortConfig
    label: str


SORT_OPTIONS: tuple[SortOption, ...] = (
    SortOption(SortConfig(SortField.NAME, SortDirection.ASC), "A-Z"),
    SortOption(SortConfig(SortField.NAME, SortDirection.DESC), "Z-A"),
    SortOption(SortConfig(SortField.CREATED_AT, SortDirection.DESC), "Newest to Oldest"),
    SortOption(SortConfig(SortField.CREATED_AT, SortDirection.ASC), "Oldest to Newest"),
    SortOption(SortConfig(SortField.UPDATED_AT, SortDirection.DESC), "Newest to Oldest"),
    SortOption(SortConfig(SortField.UPDATED_AT, SortDirection.ASC), "Oldest to Newest"),
    SortOption(SortConfig(SortField.ID, SortDirection.ASC), "A-Z"),
    SortOption(SortConfig(SortField.ID, SortDirection.DESC), "Z-A"),
)
