"""OpenStreetMap API client — fetches a single node and parses its tags.

Expected response shape::

    <osm>
      <node id="..." lat="..." lon="...">
        <tag k="name" v="..."/>
        <tag k="addr:street" v="..."/>
      </node>
    </osm>

Every retrieval or parse problem surfaces as OsmNodeNotFoundError; callers
never see a partially parsed node.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

import httpx

from campuscoffee.domain.errors import OsmNodeNotFoundError
from campuscoffee.domain.osm import OsmNode

if TYPE_CHECKING:
    from campuscoffee.config.models import OsmConfig

logger = logging.getLogger(__name__)

# Node documents never declare a DTD or entities.
_FORBIDDEN_MARKUP = ("<!DOCTYPE", "<!ENTITY")


def build_client(
    config: OsmConfig,
    *,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create an ``httpx.Client`` with the configured base URL, timeout and User-Agent."""
    return httpx.Client(
        base_url=config.base_url.rstrip("/") + "/",
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
        headers={
            "User-Agent": config.user_agent,
            "Accept": "application/xml, text/xml;q=0.9, */*;q=0.1",
        },
        transport=transport,
    )


def parse_node_xml(xml_text: str, node_id: int) -> OsmNode:
    """Parse an API response into an OsmNode.

    Raises:
        OsmNodeNotFoundError: The document is malformed, has no ``<node>``,
            or its ``<node>`` carries a different id.
    """
    if any(marker in xml_text for marker in _FORBIDDEN_MARKUP):
        logger.warning("Refusing OSM response with DTD for node %s", node_id)
        raise OsmNodeNotFoundError(node_id)

    try:
        root = ET.fromstring(xml_text)
    except ET.ParseError as exc:
        logger.error("Error parsing OSM XML response for node %s: %s", node_id, exc)
        raise OsmNodeNotFoundError(node_id) from exc

    node_el = root if root.tag == "node" else root.find(".//node")
    if node_el is None:
        logger.warning("No node element found in OSM API response for node %s", node_id)
        raise OsmNodeNotFoundError(node_id)

    found_id = node_el.get("id", "")
    if found_id != str(node_id):
        logger.warning("Mismatched node ID: expected %s, got %s", node_id, found_id)
        raise OsmNodeNotFoundError(node_id)

    tags: dict[str, str] = {}
    for tag_el in node_el.iter("tag"):
        key = tag_el.get("k")
        if key is not None:
            tags[key] = tag_el.get("v", "")

    logger.debug("Parsed OSM node %s with %d tags", node_id, len(tags))
    return OsmNode(node_id=node_id, tags=tags)


class OsmClient:
    """Fetches nodes from the OSM API v0.6.

    Usage::

        with OsmClient(settings.osm) as client:
            node = client.fetch_node(5589879349)
    """

    def __init__(
        self,
        config: OsmConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = build_client(config, transport=transport)

    def fetch_node(self, node_id: int) -> OsmNode:
        """GET ``node/{node_id}`` and parse the response.

        Raises:
            OsmNodeNotFoundError: On any transport, status, or parse failure.
        """
        logger.info("Fetching OSM node %s from API", node_id)
        try:
            response = self._client.get(f"node/{node_id}")
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Failed to fetch OSM node %s: %s", node_id, exc)
            raise OsmNodeNotFoundError(node_id) from exc

        if not response.text.strip():
            logger.warning("Empty response from OSM API for node %s", node_id)
            raise OsmNodeNotFoundError(node_id)

        return parse_node_xml(response.text, node_id)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> OsmClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
