"""Taxonomy classification for OSM nodes.

Both functions are total: every input maps to an enum member and nothing
raises. Unknown amenities count as cafes and every city other than
Heidelberg lands in ALTSTADT.
"""

from __future__ import annotations

from campuscoffee.domain.osm import OsmNode
from campuscoffee.domain.types import CampusType, PosType

HOME_CITY = "heidelberg"

AMENITY_TYPES: dict[str, PosType] = {
    "cafe": PosType.CAFE,
    "coffee": PosType.CAFE,
    "bakery": PosType.BAKERY,
    "vending_machine": PosType.VENDING_MACHINE,
    "fast_food": PosType.CAFETERIA,
    "restaurant": PosType.CAFETERIA,
}

DISTRICT_CAMPUSES: dict[str, CampusType] = {
    "bergheim": CampusType.BERGHEIM,
    "inf": CampusType.INF,
    "neuenheim": CampusType.INF,
}


def classify_pos_type(node: OsmNode) -> PosType:
    """Map the ``amenity`` (or, failing that, ``shop``) tag to a PosType.

    Examples:
        >>> classify_pos_type(OsmNode(1, {"amenity": "Fast_Food"}))
        <PosType.CAFETERIA: 'CAFETERIA'>
        >>> classify_pos_type(OsmNode(1, {"shop": "bakery;pastry"}))
        <PosType.BAKERY: 'BAKERY'>
        >>> classify_pos_type(OsmNode(1, {}))
        <PosType.CAFE: 'CAFE'>
    """
    amenity = node.get_tag("amenity")
    if amenity is not None:
        return AMENITY_TYPES.get(amenity.lower(), PosType.CAFE)

    shop = node.get_tag("shop")
    if shop is not None and "bakery" in shop.lower():
        return PosType.BAKERY

    return PosType.CAFE


def classify_campus(city: str, node: OsmNode) -> CampusType:
    """Map a Heidelberg ``addr:district`` tag to a CampusType."""
    if city.lower() != HOME_CITY:
        return CampusType.ALTSTADT

    district = node.get_tag("addr:district")
    if district is None:
        return CampusType.ALTSTADT
    return DISTRICT_CAMPUSES.get(district.lower(), CampusType.ALTSTADT)
