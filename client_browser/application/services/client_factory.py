"""Record factory — validates add-client input and builds a new Client."""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from client_browser.application.schemas.client import ClientCreate
from client_browser.domain.entities import Client
from client_browser.domain.exceptions import ValidationError

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ClientFactory:
    """Builds clients with an allocated id and a single creation instant.

    The factory never touches the store: the caller supplies ``next_id``
    and commits the returned client itself.
    """

    def __init__(
        self,
        *,
        default_actor: str = "current user",
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._default_actor = default_actor
        self._clock = clock

    def create(self, data: ClientCreate | Mapping[str, Any], *, next_id: int) -> Client:
        """Validate ``data`` and return a new, not yet stored, client.

        Raises:
            ValidationError: ``name`` or ``email`` is empty.
        """
        if not isinstance(data, ClientCreate):
            data = ClientCreate.model_validate(dict(data))

        missing = [name for name in ("name", "email") if not getattr(data, name)]
        if missing:
            logger.warning("Rejected new client: missing %s", ", ".join(missing))
            raise ValidationError(missing)

        updated_by = data.updated_by
        if not updated_by or not updated_by.strip():
            updated_by = self._default_actor

        now = self._clock()
        return Client(
            id=next_id,
            name=data.name,
            type=data.type,
            email=data.email,
            updated_by=updated_by,
            created_at=now,
            updated_at=now,
        )
