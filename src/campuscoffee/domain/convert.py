"""OSM node → POS conversion.

Validation is all-or-nothing: either every required tag resolves and a
complete candidate comes back, or OsmNodeMissingFieldsError is raised and
nothing downstream runs.
"""

from __future__ import annotations

import re

from campuscoffee.domain.classify import classify_campus, classify_pos_type
from campuscoffee.domain.errors import OsmNodeMissingFieldsError
from campuscoffee.domain.osm import OsmNode
from campuscoffee.domain.pos import MAX_POSTAL_CODE, Pos

ADDRESS_TAGS: tuple[str, ...] = (
    "addr:street",
    "addr:housenumber",
    "addr:postcode",
    "addr:city",
)

_POSTAL_CODE = re.compile(r"[+-]?[0-9]+")


def _non_blank(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value


def missing_fields(node: OsmNode) -> tuple[str, ...]:
    """Required tags that are absent or blank, in a stable order."""
    return tuple(key for key in ("name", *ADDRESS_TAGS) if _non_blank(node.get_tag(key)) is None)


def resolve_description(node: OsmNode, name: str) -> str:
    """First non-blank of ``description``, ``amenity``, then the name itself."""
    for key in ("description", "amenity"):
        value = _non_blank(node.get_tag(key))
        if value is not None:
            return value
    return name


def parse_postal_code(raw: str) -> int | None:
    """Parse a postal code, returning None unless it is a positive 32-bit integer.

    Only an optional sign and ASCII digits are accepted; surrounding
    whitespace, digit separators and non-ASCII digits are rejected.
    """
    if _POSTAL_CODE.fullmatch(raw) is None:
        return None
    value = int(raw)
    return value if 0 < value <= MAX_POSTAL_CODE else None


def convert_osm_node(node: OsmNode) -> Pos:
    """Build a POS candidate (no id, no timestamps) from an OSM node.

    Raises:
        OsmNodeMissingFieldsError: ``name`` or any address tag is absent
            or blank, or ``addr:postcode`` is not a positive integer.
    """
    missing = missing_fields(node)
    if missing:
        raise OsmNodeMissingFieldsError(node.node_id, missing)

    # Non-None after the missing-fields check.
    name = node.tags["name"]
    street = node.tags["addr:street"]
    house_number = node.tags["addr:housenumber"]
    city = node.tags["addr:city"]

    postal_code = parse_postal_code(node.tags["addr:postcode"])
    if postal_code is None:
        raise OsmNodeMissingFieldsError(node.node_id, ("addr:postcode",))

    return Pos(
        name=name,
        description=resolve_description(node, name),
        type=classify_pos_type(node),
        campus=classify_campus(city, node),
        street=street,
        house_number=house_number,
        postal_code=postal_code,
        city=city,
    )
