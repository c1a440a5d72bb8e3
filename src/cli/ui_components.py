"""Console output for the CLI (Rich).

Why separate:
- Keeps command logic free of formatting details.
- Identifiers and paths come from user input, so everything printed here is
  escaped before Rich sees it.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape


HELP_TEXT = """\
Resolve PACKAGE_ID against manifests/index.json and write its entry to dist/.

This lightweight helper demonstrates where automation for downloading and
applying packages will live. Future revisions will:

- Fetch package metadata from manifests/index.json or a remote URL.

- Download referenced assets and verify their checksums.

- Prepare the package contents for import into NinjaOne.
"""


def print_written(console: Console, output_path: Path) -> None:
    console.print(
        f"Wrote package metadata to [bold]{escape(str(output_path))}[/bold]",
        soft_wrap=True,
        highlight=False,
    )


def print_not_found(console: Console, message: str) -> None:
    """Not-found diagnostic; `message` already names the package."""

    console.print(f"[red]{escape(message)}[/red]", soft_wrap=True, highlight=False)


def print_failure(console: Console, exc: BaseException) -> None:
    """One-line summary of an unexpected failure (type + detail)."""

    detail = escape(str(exc) or exc.__class__.__name__)
    console.print(
        f"[bold red]Error:[/bold red] {exc.__class__.__name__}: {detail}",
        soft_wrap=True,
        highlight=False,
    )
