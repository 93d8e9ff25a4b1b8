"""Dependency wiring — builds the application services on top of the in-memory store."""

from functools import lru_cache

from client_browser.application.services import ClientFactory, ClientService
from client_browser.config import get_settings
from client_browser.infrastructure.logging.log_config import setup_logging
from client_browser.infrastructure.repositories import InMemoryClientRepository
from client_browser.infrastructure.seed_data import sample_clients


@lru_cache
def get_client_repository() -> InMemoryClientRepository:
    """Process-wide record store, seeded with the demo clients when configured."""
    settings = get_settings()
    return InMemoryClientRepository(sample_clients() if settings.seed_sample_data else ())


@lru_cache
def get_client_service() -> ClientService:
    """Provides the ClientService the presentation layer talks to."""
    settings = get_settings()
    setup_logging(settings)
    return ClientService(
        get_client_repository(),
        ClientFactory(default_actor=settings.default_actor),
        view_cache_size=settings.view_cache_size,
    )
