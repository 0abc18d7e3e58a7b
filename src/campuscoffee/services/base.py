"""BaseService — foundation for campuscoffee services.

Every service receives a :class:`Catalog` at construction time. The
Catalog provides the POS repository and the OSM client; services hold no
other state, so one instance may serve any number of calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from campuscoffee.infrastructure.catalog import Catalog


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class PosService(BaseService):
            def get_all(self) -> list[Pos]:
                return self._catalog.pos.get_all()
    """

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog
