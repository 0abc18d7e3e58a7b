"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy Catalog initialization, conversion of
typed service failures into ServiceResult, and centralized result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from campuscoffee.domain.errors import CampusCoffeeError
from campuscoffee.output.formatters import OutputSettings, format_result
from campuscoffee.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from collections.abc import Callable

    from campuscoffee.config.settings import CoffeeSettings
    from campuscoffee.infrastructure.catalog import Catalog


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    Subcommands access it via ``@click.pass_obj``. The catalog is lazily
    initialized on first use so ``--help`` and ``--version`` never
    trigger database access.
    """

    def __init__(self, settings: CoffeeSettings) -> None:
        self.settings = settings
        self._catalog: Catalog | None = None

        # Configure structured logging
        from campuscoffee.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def catalog(self) -> Catalog:
        """The catalog instance (created lazily on first access)."""
        if self._catalog is None:
            from campuscoffee.infrastructure.catalog import Catalog

            self._catalog = Catalog(self.settings)
        return self._catalog

    def close(self) -> None:
        if self._catalog is not None:
            self._catalog.close()
            self._catalog = None

    def run(self, op: str, action: Callable[[], dict[str, Any]]) -> ServiceResult:
        """Invoke *action* and wrap its payload (or typed failure) in a ServiceResult."""
        try:
            data = action()
        except CampusCoffeeError as exc:
            return ServiceResult(ok=False, op=op, error=ServiceError.from_exception(exc))
        return ServiceResult(ok=True, op=op, data=data)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
