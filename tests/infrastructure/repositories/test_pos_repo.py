"""Tests for PosRepository."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select
from sqlalchemy.engine import Engine

from campuscoffee.domain.errors import DuplicatePosNameError, PosNotFoundError
from campuscoffee.domain.types import CampusType, PosType
from campuscoffee.infrastructure.database.schema import pos as pos_table
from campuscoffee.infrastructure.repositories.pos import PosRepository
from tests.conftest import make_pos


@pytest.fixture
def repo(db_engine: Engine) -> PosRepository:
    return PosRepository(db_engine)


def _row_count(engine: Engine) -> int:
    with engine.connect() as conn:
        return int(conn.execute(select(func.count()).select_from(pos_table)).scalar_one())


class TestInsert:
    def test_assigns_id_and_timestamps(self, repo: PosRepository) -> None:
        stored = repo.upsert(make_pos())
        assert stored.id is not None
        assert stored.created_at is not None
        assert stored.updated_at == stored.created_at
        assert stored.name == "Rada Coffee & Rösterei"
        assert stored.type is PosType.CAFE

    def test_ids_increase(self, repo: PosRepository) -> None:
        first = repo.upsert(make_pos(name="A"))
        second = repo.upsert(make_pos(name="B"))
        assert first.id is not None and second.id is not None
        assert second.id > first.id

    def test_duplicate_name(self, repo: PosRepository, db_engine: Engine) -> None:
        repo.upsert(make_pos())
        with pytest.raises(DuplicatePosNameError) as exc_info:
            repo.upsert(make_pos(description="Another"))
        assert exc_info.value.name == "Rada Coffee & Rösterei"
        assert _row_count(db_engine) == 1


class TestUpdate:
    def test_updates_fields(self, repo: PosRepository) -> None:
        stored = repo.upsert(make_pos())
        updated = repo.upsert(
            stored.model_copy(update={"campus": CampusType.INF, "description": "Renovated"})
        )
        assert updated.id == stored.id
        assert updated.campus is CampusType.INF
        assert updated.description == "Renovated"
        assert updated.created_at == stored.created_at
        assert updated.updated_at is not None and stored.updated_at is not None
        assert updated.updated_at >= stored.updated_at

    def test_unknown_id(self, repo: PosRepository, db_engine: Engine) -> None:
        with pytest.raises(PosNotFoundError):
            repo.upsert(make_pos(id=999))
        assert _row_count(db_engine) == 0

    def test_rename_to_existing_name(self, repo: PosRepository) -> None:
        repo.upsert(make_pos(name="A"))
        b = repo.upsert(make_pos(name="B"))
        with pytest.raises(DuplicatePosNameError):
            repo.upsert(b.model_copy(update={"name": "A"}))
        assert repo.get_by_id(b.id).name == "B"  # type: ignore[arg-type]

    def test_keep_own_name(self, repo: PosRepository) -> None:
        stored = repo.upsert(make_pos())
        again = repo.upsert(stored.model_copy(update={"house_number": "21a"}))
        assert again.house_number == "21a"


class TestReads:
    def test_get_by_id(self, repo: PosRepository) -> None:
        stored = repo.upsert(make_pos())
        assert repo.get_by_id(stored.id) == stored  # type: ignore[arg-type]

    def test_get_by_id_missing(self, repo: PosRepository) -> None:
        with pytest.raises(PosNotFoundError) as exc_info:
            repo.get_by_id(42)
        assert exc_info.value.pos_id == 42

    def test_get_all_ordered(self, repo: PosRepository) -> None:
        repo.upsert(make_pos(name="B"))
        repo.upsert(make_pos(name="A"))
        assert [p.name for p in repo.get_all()] == ["B", "A"]

    def test_get_all_empty(self, repo: PosRepository) -> None:
        assert repo.get_all() == []


class TestClear:
    def test_clear(self, repo: PosRepository, db_engine: Engine) -> None:
        repo.upsert(make_pos(name="A"))
        repo.upsert(make_pos(name="B"))
        repo.clear()
        assert _row_count(db_engine) == 0
        assert repo.get_all() == []
