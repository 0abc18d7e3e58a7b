"""Tests for the typed error hierarchy."""

from __future__ import annotations

import pytest

from campuscoffee.domain.errors import (
    CampusCoffeeError,
    DuplicatePosNameError,
    OsmNodeMissingFieldsError,
    OsmNodeNotFoundError,
    PosNotFoundError,
)


class TestErrors:
    @pytest.mark.parametrize(
        ("exc", "code", "detail"),
        [
            (OsmNodeNotFoundError(5), "OSM_NODE_NOT_FOUND", {"node_id": 5}),
            (OsmNodeMissingFieldsError(5), "OSM_NODE_MISSING_FIELDS", {"node_id": 5, "fields": []}),
            (PosNotFoundError(9), "POS_NOT_FOUND", {"pos_id": 9}),
            (DuplicatePosNameError("Rada"), "DUPLICATE_POS_NAME", {"name": "Rada"}),
        ],
        ids=lambda v: type(v).__name__ if isinstance(v, Exception) else None,
    )
    def test_code_and_detail(
        self, exc: CampusCoffeeError, code: str, detail: dict[str, object]
    ) -> None:
        assert isinstance(exc, CampusCoffeeError)
        assert exc.code == code
        assert exc.detail == detail
        assert str(exc) == exc.message

    def test_distinct_types(self) -> None:
        assert not issubclass(PosNotFoundError, OsmNodeNotFoundError)
        assert not issubclass(OsmNodeMissingFieldsError, OsmNodeNotFoundError)

    def test_message_mentions_identifier(self) -> None:
        assert "5589879349" in str(OsmNodeNotFoundError(5589879349))
        assert "Rada" in str(DuplicatePosNameError("Rada"))
