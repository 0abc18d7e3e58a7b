"""Business taxonomy enums for points of sale."""

from __future__ import annotations

from enum import StrEnum


class PosType(StrEnum):
    """Kind of point of sale."""

    CAFE = "CAFE"
    BAKERY = "BAKERY"
    VENDING_MACHINE = "VENDING_MACHINE"
    CAFETERIA = "CAFETERIA"


class CampusType(StrEnum):
    """Campus zone a point of sale is grouped under."""

    ALTSTADT = "ALTSTADT"
    BERGHEIM = "BERGHEIM"
    INF = "INF"
