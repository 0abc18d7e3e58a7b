"""``--examples`` flag for campuscoffee commands.

``@examples("pos list", ...)`` adds an eager ``--examples`` option that
prints each invocation (prefixed with ``campuscoffee``) and exits, so
``--help`` stays short.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import click

F = TypeVar("F", bound=Callable[..., object])

PROG = "campuscoffee"


def format_examples(command_path: str, invocations: tuple[str, ...]) -> str:
    lines = [f"Examples for '{command_path}':", ""]
    lines.extend(f"  {PROG} {invocation}" for invocation in invocations)
    return "\n".join(lines)


def examples(*invocations: str) -> Callable[[F], F]:
    """Attach ``--examples`` listing *invocations* (arguments after the program name)."""

    def show(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(format_examples(ctx.command_path, invocations))
        ctx.exit(0)

    return click.option(
        "--examples",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=show,
        help="Show usage examples and exit.",
    )
