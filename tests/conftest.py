"""Shared pytest fixtures and test helpers for campuscoffee tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner
from sqlalchemy.engine import Engine

from campuscoffee.config.settings import CoffeeSettings
from campuscoffee.domain.osm import OsmNode
from campuscoffee.domain.pos import Pos
from campuscoffee.domain.types import CampusType, PosType
from campuscoffee.infrastructure.catalog import Catalog
from campuscoffee.infrastructure.database.engine import init_database
from campuscoffee.infrastructure.osm import OsmClient

RADA_NODE_ID = 5589879349

RADA_TAGS: dict[str, str] = {
    "name": "Rada Coffee & Rösterei",
    "amenity": "cafe",
    "addr:street": "Untere Straße",
    "addr:housenumber": "21",
    "addr:postcode": "69117",
    "addr:city": "Heidelberg",
    "description": "Caffé und Rösterei",
}


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep host CAMPUSCOFFEE_* variables out of every test."""
    for var in ("CAMPUSCOFFEE_CONFIG", "CAMPUSCOFFEE_DATA_ROOT", "CAMPUSCOFFEE_DATABASE__FILENAME"):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Undo handlers installed by CLI invocations (they point at closed streams)."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def db_engine(tmp_path: Path) -> Iterator[Engine]:
    """Initialized SQLite engine with all tables created."""
    engine = init_database(tmp_path / "catalog.db")
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def settings(tmp_path: Path) -> CoffeeSettings:
    return CoffeeSettings.from_cli(data_root=tmp_path)


@pytest.fixture
def osm_client() -> MagicMock:
    """OSM client double; tests set ``fetch_node`` behaviour explicitly."""
    return MagicMock(spec=OsmClient)


@pytest.fixture
def catalog(settings: CoffeeSettings, osm_client: MagicMock) -> Iterator[Catalog]:
    """Catalog on a temp database with a mocked OSM client."""
    c = Catalog(settings, osm_client=osm_client)
    try:
        yield c
    finally:
        c.close()


@pytest.fixture
def _isolated_catalog(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp dir so the CLI creates an isolated catalog.

    Use via ``@pytest.mark.usefixtures("_isolated_catalog")`` on command
    test classes.
    """
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def make_node(node_id: int = RADA_NODE_ID, **overrides: str | None) -> OsmNode:
    """RADA_TAGS with *overrides* applied; a None override removes the tag.

    Tag keys containing ``:`` are passed with ``_`` in place of ``:``
    (``addr_city="Mannheim"``).
    """
    tags = dict(RADA_TAGS)
    for key, value in overrides.items():
        tag = key.replace("_", ":", 1) if key.startswith("addr_") else key
        if value is None:
            tags.pop(tag, None)
        else:
            tags[tag] = value
    return OsmNode(node_id=node_id, tags=tags)


def make_pos(**overrides: Any) -> Pos:
    """A valid POS candidate (no id) with *overrides* applied."""
    fields: dict[str, Any] = {
        "name": "Rada Coffee & Rösterei",
        "description": "Caffé und Rösterei",
        "type": PosType.CAFE,
        "campus": CampusType.ALTSTADT,
        "street": "Untere Straße",
        "house_number": "21",
        "postal_code": 69117,
        "city": "Heidelberg",
    }
    fields.update(overrides)
    return Pos(**fields)
