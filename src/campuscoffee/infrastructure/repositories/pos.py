"""Repository for the ``pos`` table."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine, RowMapping
from sqlalchemy.exc import IntegrityError

from campuscoffee.domain.errors import DuplicatePosNameError, PosNotFoundError
from campuscoffee.domain.pos import Pos
from campuscoffee.infrastructure.database.schema import pos as pos_table

_NAME_CONSTRAINT_MARKERS = ("pos.name", "uq_pos_name")


def _row_values(record: Pos) -> dict[str, Any]:
    """Column values for an insert or update (id and timestamps excluded)."""
    return {
        "name": record.name,
        "description": record.description,
        "type": record.type.value,
        "campus": record.campus.value,
        "street": record.street,
        "house_number": record.house_number,
        "postal_code": record.postal_code,
        "city": record.city,
    }


def _to_pos(row: RowMapping) -> Pos:
    return Pos.model_validate(dict(row))


def _is_name_conflict(exc: IntegrityError) -> bool:
    message = str(exc.orig)
    return any(marker in message for marker in _NAME_CONSTRAINT_MARKERS)


class PosRepository:
    """Encapsulates SQL for POS reads and writes.

    Each write runs in its own transaction. Uniqueness of ``name`` is
    delegated to the database constraint so concurrent writers cannot
    both win.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def get_all(self) -> list[Pos]:
        with self._engine.connect() as conn:
            rows = conn.execute(select(pos_table).order_by(pos_table.c.id)).mappings().all()
        return [_to_pos(row) for row in rows]

    def get_by_id(self, pos_id: int) -> Pos:
        """Fetch a single POS.

        Raises:
            PosNotFoundError: No row has this id.
        """
        with self._engine.connect() as conn:
            row = conn.execute(select(pos_table).where(pos_table.c.id == pos_id)).mappings().first()
        if row is None:
            raise PosNotFoundError(pos_id)
        return _to_pos(row)

    def upsert(self, record: Pos) -> Pos:
        """Insert *record* when it has no id, otherwise update the row in place.

        ``created_at`` is set on insert; ``updated_at`` on every write.

        Raises:
            DuplicatePosNameError: Another row already has this name.
            PosNotFoundError: An update matched no row.
        """
        now = datetime.now(UTC).isoformat()
        values = _row_values(record)
        try:
            with self._engine.begin() as conn:
                if record.is_new:
                    result = conn.execute(
                        insert(pos_table).values(**values, created_at=now, updated_at=now)
                    )
                    pos_id = result.inserted_primary_key[0]
                else:
                    result = conn.execute(
                        update(pos_table)
                        .where(pos_table.c.id == record.id)
                        .values(**values, updated_at=now)
                    )
                    if result.rowcount == 0:
                        raise PosNotFoundError(record.id)
                    pos_id = record.id
                row = conn.execute(select(pos_table).where(pos_table.c.id == pos_id)).mappings().one()
        except IntegrityError as exc:
            if _is_name_conflict(exc):
                raise DuplicatePosNameError(record.name) from exc
            raise
        return _to_pos(row)

    def clear(self) -> None:
        """Delete every POS."""
        with self._engine.begin() as conn:
            conn.execute(delete(pos_table))
