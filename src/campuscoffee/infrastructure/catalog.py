"""Catalog — the single dependency injected into every service.

The Catalog owns the database engine, the POS repository, and the OSM
client. It is constructed once per CLI invocation from
:class:`CoffeeSettings`; the OSM client is created lazily so commands that
never touch the network never open an HTTP connection pool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from campuscoffee.infrastructure.database.engine import init_database
from campuscoffee.infrastructure.osm import OsmClient
from campuscoffee.infrastructure.repositories.pos import PosRepository

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

    from campuscoffee.config.settings import CoffeeSettings


class Catalog:
    """Persistence and geodata access for the POS catalog.

    Args:
        settings: Resolved settings (database location, OSM endpoint).
        osm_client: Optional pre-built fetcher, used by tests to avoid
            network access.
    """

    def __init__(self, settings: CoffeeSettings, *, osm_client: OsmClient | None = None) -> None:
        self._settings = settings
        self._engine: Engine = init_database(settings.db_path)
        self._repository = PosRepository(self._engine)
        self._osm_client = osm_client

    @property
    def pos(self) -> PosRepository:
        return self._repository

    @property
    def osm(self) -> OsmClient:
        """The OSM API client (created on first access)."""
        if self._osm_client is None:
            self._osm_client = OsmClient(self._settings.osm)
        return self._osm_client

    def close(self) -> None:
        """Release the HTTP client and dispose of the engine's connection pool."""
        if self._osm_client is not None:
            self._osm_client.close()
        self._engine.dispose()
