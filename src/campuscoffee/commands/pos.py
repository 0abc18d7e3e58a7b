"""Command group: point-of-sale catalog and OpenStreetMap import."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
from pydantic import ValidationError

from campuscoffee.commands._base import examples
from campuscoffee.domain.pos import Pos
from campuscoffee.domain.types import CampusType, PosType
from campuscoffee.services.pos import PosService
from campuscoffee.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from campuscoffee.commands._context import AppContext


@click.group()
@examples(
    "pos import 5589879349",
    "pos list",
    "--json pos get 1",
    'pos upsert --name "Rada" --street "Untere Straße" --house-number 21 '
    "--postal-code 69117 --city Heidelberg",
    "pos clear --yes",
)
@click.pass_obj
def pos(app: AppContext) -> None:
    """Manage points of sale in the catalog."""


@pos.command(name="import")
@examples("pos import 5589879349", "--json pos import 5589879349")
@click.argument("node_id", type=int)
@click.pass_obj
def import_(app: AppContext, node_id: int) -> None:
    """Import (or refresh) a POS from an OpenStreetMap node."""
    svc = PosService(app.catalog)
    app.emit(app.run("import_pos", lambda: svc.import_from_osm_node(node_id).to_dict()))


@pos.command()
@examples("pos get 1")
@click.argument("pos_id", type=int)
@click.pass_obj
def get(app: AppContext, pos_id: int) -> None:
    """Show a single POS by catalog ID."""
    svc = PosService(app.catalog)
    app.emit(app.run("get_pos", lambda: svc.get_by_id(pos_id).to_dict()))


@pos.command(name="list")
@examples("pos list", "-q pos list")
@click.pass_obj
def list_(app: AppContext) -> None:
    """List every POS in the catalog."""
    svc = PosService(app.catalog)

    def _list() -> dict[str, object]:
        items = [p.to_dict() for p in svc.get_all()]
        return {"count": len(items), "items": items}

    app.emit(app.run("list_pos", _list))


@pos.command()
@examples(
    'pos upsert --name "Bäckerei Grimminger" --type BAKERY --street "Bergheimer Straße" '
    "--house-number 1 --postal-code 69115 --city Heidelberg",
    'pos upsert --id 3 --name "Renamed" --street "Untere Straße" --house-number 21 '
    "--postal-code 69117 --city Heidelberg",
)
@click.option("--id", "pos_id", type=int, default=None, help="Update this POS instead of creating.")
@click.option("--name", required=True, help="Unique display name.")
@click.option("--description", default=None, help="Defaults to the name.")
@click.option(
    "--type",
    "pos_type",
    type=click.Choice([t.value for t in PosType], case_sensitive=False),
    default=PosType.CAFE.value,
    show_default=True,
)
@click.option(
    "--campus",
    type=click.Choice([c.value for c in CampusType], case_sensitive=False),
    default=CampusType.ALTSTADT.value,
    show_default=True,
)
@click.option("--street", required=True)
@click.option("--house-number", required=True)
@click.option("--postal-code", type=int, required=True)
@click.option("--city", required=True)
@click.pass_obj
def upsert(
    app: AppContext,
    pos_id: int | None,
    name: str,
    description: str | None,
    pos_type: str,
    campus: str,
    street: str,
    house_number: str,
    postal_code: int,
    city: str,
) -> None:
    """Create a POS, or update it when --id is given."""
    try:
        candidate = Pos(
            id=pos_id,
            name=name,
            description=description or name,
            type=PosType(pos_type.upper()),
            campus=CampusType(campus.upper()),
            street=street,
            house_number=house_number,
            postal_code=postal_code,
            city=city,
        )
    except ValidationError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op="upsert_pos",
                error=ServiceError(
                    code="VALIDATION_FAILED",
                    message="; ".join(
                        f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in exc.errors()
                    ),
                ),
            )
        )
        return

    svc = PosService(app.catalog)
    app.emit(app.run("upsert_pos", lambda: svc.upsert(candidate).to_dict()))


@pos.command()
@examples("pos clear --yes")
@click.confirmation_option(prompt="Delete every POS in the catalog?")
@click.pass_obj
def clear(app: AppContext) -> None:
    """Delete every POS in the catalog."""
    svc = PosService(app.catalog)

    def _clear() -> dict[str, object]:
        svc.clear()
        return {"cleared": True}

    app.emit(app.run("clear_pos", _clear))
