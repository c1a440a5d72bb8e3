"""Manifest loading.

Supports the package index format:
- {"packages": [{"id": "...", ...}, ...]}

The manifest is read fresh on every call; nothing is cached.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from core.domain.models import Manifest

logger = logging.getLogger(__name__)


def load_manifest(path: Path) -> Manifest:
    """Read and parse the manifest at `path`.

    Errors propagate unchanged: `OSError` for unreadable files,
    `json.JSONDecodeError` for malformed JSON and `pydantic.ValidationError`
    when there is no `packages` array.
    """

    logger.debug("Reading manifest %s", path)
    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw)
    manifest = Manifest.model_validate(data)
    logger.debug("Manifest loaded (%d entries)", len(manifest.packages))
    return manifest
