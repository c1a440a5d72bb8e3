"""Logging wiring for the CLI.

Modules only do `logging.getLogger(__name__)`; the handler is attached once,
here, by the entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


_HANDLER_NAME = "apply-package"


def configure_logging(level: str | int = logging.WARNING) -> logging.Logger:
    """Attach a stderr `RichHandler` to the root logger and set its level.

    Calling it again only updates the level.
    """

    root = logging.getLogger()
    handler = next((h for h in root.handlers if h.get_name() == _HANDLER_NAME), None)
    if handler is None:
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    root.setLevel(level)
    return root
