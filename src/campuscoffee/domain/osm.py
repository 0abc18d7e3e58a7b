"""OsmNode — the tag bag of a single OpenStreetMap node.

The node is the domain view of OSM data before it becomes a POS. Tags are
copied on construction and exposed through a read-only mapping, so a node
never changes after it has been built.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class OsmNode:
    """An OpenStreetMap node id plus its key/value tags.

    Examples:
        >>> node = OsmNode(5589879349, {"name": "Rada", "amenity": "cafe"})
        >>> node.get_tag("name")
        'Rada'
        >>> node.get_tag("shop") is None
        True
    """

    node_id: int
    tags: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "tags", MappingProxyType(dict(self.tags)))

    def get_tag(self, key: str) -> str | None:
        """Return the tag value, or None if the tag is not present."""
        return self.tags.get(key)

    def has_tag(self, key: str) -> bool:
        return key in self.tags
