"""`apply-package` command line.

The command only takes the package id, picks the fixed paths and prints;
lookup and writing live in `core.services.package_resolver`.
"""

from __future__ import annotations

import logging
from typing import Annotated, Optional

import typer
from rich.console import Console

from cli.ui_components import HELP_TEXT, print_failure, print_not_found, print_written
from core.config import AppSettings
from core.logging_setup import configure_logging
from core.services.package_resolver import PackageNotFoundError, resolve_package

logger = logging.getLogger(__name__)

app = typer.Typer(add_completion=False)

_console = Console()
_err_console = Console(stderr=True)

# Only -h/--help is an option; anything else, dashes included, is the package
# id or an ignored extra argument.
_CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
    "ignore_unknown_options": True,
    "allow_extra_args": True,
}


@app.command(help=HELP_TEXT, context_settings=_CONTEXT_SETTINGS)
def apply(
    ctx: typer.Context,
    package_id: Annotated[
        Optional[str],
        typer.Argument(show_default=False, help="Package `id` as listed in the manifest."),
    ] = None,
) -> None:
    if not package_id:
        typer.echo(ctx.get_help(), nl=False)
        raise typer.Exit()

    settings = AppSettings()
    configure_logging(settings.log_level)
    if ctx.args:
        logger.debug("Ignoring extra arguments: %s", ctx.args)

    logger.debug(
        "Resolving %r (manifest=%s, dist=%s)", package_id, settings.manifest_path, settings.dist_dir
    )

    try:
        resolved = resolve_package(
            package_id,
            manifest_path=settings.manifest_path,
            dist_dir=settings.dist_dir,
        )
    except PackageNotFoundError as exc:
        print_not_found(_err_console, str(exc))
        raise typer.Exit(code=1) from exc
    except (OSError, ValueError) as exc:
        logger.debug("Resolution of %r failed", package_id, exc_info=True)
        print_failure(_err_console, exc)
        raise typer.Exit(code=1) from exc

    print_written(_console, resolved.output_path)


def run() -> None:
    app()
