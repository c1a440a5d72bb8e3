"""Run script.

Lets you run the CLI with `python -m main` from inside `src/`, next to the
`apply-package` console script.
"""

from __future__ import annotations

import sys

# The not-found and confirmation lines echo the package id and artifact path,
# which may be non-ASCII; Windows consoles default to cp1252 and would raise.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
