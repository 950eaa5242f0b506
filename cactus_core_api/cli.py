# cactus_core_api/cli.py
"""
cactus-core-api CLI -- export the core OpenAPI document.

Provides the ``cactus-core-api-export`` console entry-point declared in
pyproject.toml as ``cactus_core_api.cli:cli``:

    cactus-core-api-export [DESTINATION]

Without DESTINATION the document lands in ``json/generated/openapi-spec.json``
inside the configured output directory.  Filesystem errors are not caught;
they end the process with a traceback and a non-zero exit status.
"""

from __future__ import annotations

from typing import Optional

import click
from rich.console import Console
from rich.markup import escape as _esc

from . import __version__
from . import cli_theme as theme
from .export.openapi import export_to_file_system_as_json
from .utils.logging import setup_logging

console = Console()


def _print_version(
    ctx: click.Context,
    _param: click.Parameter,
    value: bool,
) -> None:
    if not value or ctx.resilient_parsing:
        return
    theme.print_version(__version__, console)
    ctx.exit()


@click.command()
@click.argument("destination", required=False, default=None)
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
def cli(destination: Optional[str]) -> None:
    """Write the Cactus core OpenAPI document as JSON to DESTINATION."""
    setup_logging()
    # An empty argument selects the default destination
    written = export_to_file_system_as_json(destination or None)
    console.print(theme.ok(f"Wrote OpenAPI document to {_esc(str(written))}"))
