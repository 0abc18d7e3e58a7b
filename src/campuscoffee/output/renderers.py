"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO). The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from campuscoffee.output.console import create_console, get_output, style_for_type

if TYPE_CHECKING:
    from rich.console import Console

    from campuscoffee.services.result import ServiceResult

_ADDRESS_KEYS = ("street", "house_number", "postal_code", "city")


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    items = result.data.get("items")
    if isinstance(items, list):
        return "\n".join(str(item["id"]) for item in items if item.get("id") is not None)
    if result.data.get("id") is not None:
        return str(result.data["id"])
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    label = Text("OK", style="cc.ok")
    op = Text(f"  {result.op}", style="cc.op")
    console.print(label, op, end="")
    console.print()


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="cc.key")
    if key == "id" or key.endswith("_id"):
        v = Text(str(value), style="cc.id")
    elif key == "name":
        v = Text(str(value), style="cc.name")
    else:
        v = Text(str(value))
    console.print(k, v, end="")
    console.print()


def _address(item: dict[str, Any]) -> str:
    street, number, postal_code, city = (item.get(key, "") for key in _ADDRESS_KEYS)
    return f"{street} {number}, {postal_code} {city}"


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="cc.error")
    op = Text(f"  {result.op}", style="cc.op")
    sep = Text(" — ")
    console.print(label, op, sep, msg)

    if err:
        console.print(Text(f"  code: {err.code}", style="dim"))
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(f"    {k}: {v}")


# ── POS renderers ─────────────────────────────────────────────────────


def _render_pos(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render a single POS as a panel."""
    _status_line(console, result)
    d = result.data
    lines = [
        f"type: {d.get('type', '')}",
        f"campus: {d.get('campus', '')}",
        f"address: {_address(d)}",
        f"description: {d.get('description', '')}",
    ]
    if verbose:
        lines.append(f"created: {d.get('created_at', '')}")
        lines.append(f"updated: {d.get('updated_at', '')}")

    title = f"{d.get('id', '?')} — {d.get('name', 'Unnamed')}"
    style = style_for_type(str(d.get("type", "")))
    console.print(Panel("\n".join(lines), title=title, border_style=style or "dim", expand=False))


def _render_pos_table(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render ``list_pos`` results as a table."""
    items: list[dict[str, Any]] = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("ID", style="cc.id", no_wrap=True)
    table.add_column("Name", style="cc.name")
    table.add_column("Type")
    table.add_column("Campus")
    table.add_column("Address")
    if verbose:
        table.add_column("Updated", style="dim")

    for item in items:
        row = [
            str(item.get("id", "")),
            str(item.get("name", "")),
            Text(str(item.get("type", "")), style=style_for_type(str(item.get("type", "")))),
            str(item.get("campus", "")),
            _address(item),
        ]
        if verbose:
            row.append(str(item.get("updated_at", "")))
        table.add_row(*row)

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} points of sale")


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "import_pos": _render_pos,
    "upsert_pos": _render_pos,
    "get_pos": _render_pos,
    "list_pos": _render_pos_table,
}
