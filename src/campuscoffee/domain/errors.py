"""Typed failures raised by the domain, repository, and service layers.

Every error carries a stable ``code`` and a ``detail`` payload so the
presentation layer can map it to a structured ``ServiceError`` without
parsing messages.
"""

from __future__ import annotations

from typing import Any, ClassVar


class CampusCoffeeError(Exception):
    """Base class for all recoverable, caller-visible failures."""

    code: ClassVar[str] = "ERROR"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail


class OsmNodeNotFoundError(CampusCoffeeError):
    """The OSM node could not be retrieved, parsed, or did not match the request."""

    code = "OSM_NODE_NOT_FOUND"

    def __init__(self, node_id: int) -> None:
        super().__init__(f"OpenStreetMap node {node_id} not found", node_id=node_id)
        self.node_id = node_id


class OsmNodeMissingFieldsError(CampusCoffeeError):
    """The OSM node lacks required tags or has an unparseable postal code."""

    code = "OSM_NODE_MISSING_FIELDS"

    def __init__(self, node_id: int, fields: tuple[str, ...] = ()) -> None:
        super().__init__(
            f"OpenStreetMap node {node_id} is missing required fields",
            node_id=node_id,
            fields=list(fields),
        )
        self.node_id = node_id
        self.fields = fields


class PosNotFoundError(CampusCoffeeError):
    """No POS with the given id exists in the catalog."""

    code = "POS_NOT_FOUND"

    def __init__(self, pos_id: int) -> None:
        super().__init__(f"No POS found with ID: {pos_id}", pos_id=pos_id)
        self.pos_id = pos_id


class DuplicatePosNameError(CampusCoffeeError):
    """Another POS already uses this name."""

    code = "DUPLICATE_POS_NAME"

    def __init__(self, name: str) -> None:
        super().__init__(f"A POS named {name!r} already exists", name=name)
        self.name = name
