"""PosService — catalog access and the OSM import pipeline.

Import pipeline: FETCH → CONVERT → PERSIST. No stage is retried and
validation finishes before anything is written, so a failed import
leaves the catalog untouched.
"""

from __future__ import annotations

import structlog

from campuscoffee.domain.convert import convert_osm_node
from campuscoffee.domain.errors import (
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
)
from campuscoffee.domain.pos import Pos
from campuscoffee.services.base import BaseService

log = structlog.get_logger(__name__)


class PosService(BaseService):
    """Business operations on points of sale."""

    # ------------------------------------------------------------------
    # Pass-throughs
    # ------------------------------------------------------------------

    def clear(self) -> None:
        log.warning("pos.clear")
        self._catalog.pos.clear()

    def get_all(self) -> list[Pos]:
        log.debug("pos.get_all")
        return self._catalog.pos.get_all()

    def get_by_id(self, pos_id: int) -> Pos:
        """Raises PosNotFoundError if no POS has this id."""
        log.debug("pos.get_by_id", pos_id=pos_id)
        return self._catalog.pos.get_by_id(pos_id)

    # ------------------------------------------------------------------
    # Upsert
    # ------------------------------------------------------------------

    def upsert(self, pos: Pos) -> Pos:
        """Create *pos* if it has no id, otherwise update the stored record.

        An update must target an existing record: the id is looked up
        before writing, so a caller-supplied id never creates a new row.

        Raises:
            PosNotFoundError: Update requested for an unknown id.
            DuplicatePosNameError: Another POS already has this name.
        """
        if pos.is_new:
            log.info("pos.create", name=pos.name)
        else:
            log.info("pos.update", pos_id=pos.id)
            self._catalog.pos.get_by_id(pos.id)
        return self._perform_upsert(pos)

    def _perform_upsert(self, pos: Pos) -> Pos:
        try:
            stored = self._catalog.pos.upsert(pos)
        except DuplicatePosNameError as exc:
            log.error("pos.upsert.duplicate_name", name=pos.name, error=exc.message)
            raise
        log.info("pos.upsert.succeeded", pos_id=stored.id)
        return stored

    # ------------------------------------------------------------------
    # Import
    # ------------------------------------------------------------------

    def import_from_osm_node(self, node_id: int) -> Pos:
        """Fetch an OSM node, convert it to a POS, and upsert it.

        Raises:
            OsmNodeNotFoundError: The node could not be fetched or parsed.
            OsmNodeMissingFieldsError: Required tags are missing or invalid.
            PosNotFoundError / DuplicatePosNameError: From the upsert stage.
        """
        log.info("pos.import.started", node_id=node_id)

        # ── FETCH ────────────────────────────────────────────────
        try:
            node = self._catalog.osm.fetch_node(node_id)
        except OsmNodeNotFoundError:
            log.error("pos.import.fetch_failed", node_id=node_id)
            raise
        except Exception as exc:
            log.error("pos.import.fetch_failed", node_id=node_id, error=str(exc))
            raise OsmNodeNotFoundError(node_id) from exc

        # ── CONVERT ──────────────────────────────────────────────
        try:
            candidate = convert_osm_node(node)
        except OsmNodeMissingFieldsError as exc:
            log.warning("pos.import.missing_fields", node_id=node_id, fields=list(exc.fields))
            raise
        log.debug(
            "pos.import.converted",
            node_id=node_id,
            name=candidate.name,
            type=candidate.type.value,
            campus=candidate.campus.value,
        )

        # ── PERSIST ──────────────────────────────────────────────
        stored = self.upsert(candidate)
        log.info("pos.import.succeeded", node_id=node_id, pos_id=stored.id, name=stored.name)
        return stored
