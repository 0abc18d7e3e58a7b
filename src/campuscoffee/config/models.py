"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, campuscoffee.toml only contains
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel

# --- campuscoffee.toml sections ---


class DatabaseConfig(BaseModel):
    """[database] section."""

    model_config = {"frozen": True}

    filename: str = "campuscoffee.db"


class OsmConfig(BaseModel):
    """[osm] section."""

    model_config = {"frozen": True}

    base_url: str = "https://www.openstreetmap.org/api/0.6"
    user_agent: str = "CampusCoffee/1.0 (+https://github.com/se-ubt/ise25-26_campus-coffee)"
    timeout_seconds: float = 10.0
