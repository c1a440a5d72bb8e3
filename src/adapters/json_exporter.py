"""JSON export of a resolved package entry.

The artifact is the entry verbatim: 2-space indent, UTF-8, no trailing
newline. Same entry in, same bytes out.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import PackageEntry

logger = logging.getLogger(__name__)


def render_entry_json(entry: PackageEntry) -> str:
    return json.dumps(entry, ensure_ascii=False, indent=2)


def export_entry_json(*, entry: PackageEntry, output_path: Path) -> Path:
    """Write `entry` to `output_path`, creating parent directories as needed.

    An existing file at `output_path` is overwritten.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_entry_json(entry), encoding="utf-8", newline="\n")
    logger.debug("Wrote %s", output_path)
    return output_path
