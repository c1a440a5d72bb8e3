"""Package resolution: manifest lookup and artifact materialization.

The CLI delegates the whole flow here so printing and exit codes stay out of
it. Path sanitisation is kept as pure functions so it can be checked without
touching the filesystem.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from adapters.json_exporter import export_entry_json
from adapters.manifest_loader import load_manifest
from core.config import DEFAULT_DIST_DIR, DEFAULT_MANIFEST_PATH
from core.domain.models import Manifest, PackageEntry

logger = logging.getLogger(__name__)


class PackageNotFoundError(LookupError):
    """No manifest entry has the requested `id`."""

    def __init__(self, package_id: str) -> None:
        super().__init__(f'Package "{package_id}" not found in manifest.')
        self.package_id = package_id


@dataclass(frozen=True)
class ResolvedPackage:
    """Output of a successful resolution."""

    package_id: str
    entry: PackageEntry
    output_path: Path


def artifact_filename(package_id: str) -> str:
    """`vendor/tool` -> `vendor_tool.json`. Only forward slashes are replaced."""

    return package_id.replace("/", "_") + ".json"


def artifact_path(package_id: str, dist_dir: Path = DEFAULT_DIST_DIR) -> Path:
    """Absolute artifact path for `package_id` inside `dist_dir`."""

    return (Path(dist_dir) / artifact_filename(package_id)).resolve()


def find_entry(manifest: Manifest, package_id: str) -> PackageEntry | None:
    return manifest.find(package_id)


def resolve_package(
    package_id: str,
    *,
    manifest_path: Path = DEFAULT_MANIFEST_PATH,
    dist_dir: Path = DEFAULT_DIST_DIR,
) -> ResolvedPackage:
    """Look up `package_id` in the manifest and write its artifact.

    Raises `PackageNotFoundError` when no entry matches; nothing is written
    in that case. I/O and parse errors propagate unchanged.
    """

    manifest = load_manifest(Path(manifest_path).resolve())
    entry = find_entry(manifest, package_id)
    if entry is None:
        logger.debug("Known package ids: %s", ", ".join(manifest.ids()) or "<none>")
        raise PackageNotFoundError(package_id)

    output_path = export_entry_json(
        entry=entry,
        output_path=artifact_path(package_id, dist_dir),
    )
    return ResolvedPackage(package_id=package_id, entry=entry, output_path=output_path)
