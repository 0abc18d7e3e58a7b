"""SQLAlchemy Core table definitions for the campuscoffee database.

Name uniqueness is enforced here by the ``uq_pos_name`` constraint; the
repository translates its violation into DuplicatePosNameError.
"""

from __future__ import annotations

from sqlalchemy import Column, Index, Integer, MetaData, Table, Text, UniqueConstraint

metadata = MetaData()

pos = Table(
    "pos",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", Text, nullable=False),
    Column("description", Text, nullable=False),
    Column("type", Text, nullable=False),  # PosType value
    Column("campus", Text, nullable=False),  # CampusType value
    Column("street", Text, nullable=False),
    Column("house_number", Text, nullable=False),
    Column("postal_code", Integer, nullable=False),
    Column("city", Text, nullable=False),
    Column("created_at", Text, nullable=False),  # ISO 8601, UTC
    Column("updated_at", Text, nullable=False),  # ISO 8601, UTC
    UniqueConstraint("name", name="uq_pos_name"),
)

Index("ix_pos_campus", pos.c.campus)
