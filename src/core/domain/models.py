"""Domain models (Pydantic v2).

Why pydantic here:
- The manifest is owned by another team; we only need `packages` and each
  entry's `id`, so the model checks that much and lets everything else through.
- Entries stay plain mappings: the artifact must be the entry verbatim, with
  its original key order, which a re-dumped model would not guarantee.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


PackageEntry = dict[str, Any]


class Manifest(BaseModel):
    """The package index (`manifests/index.json`).

    Top-level keys other than `packages` are kept but never read.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    packages: list[Any] = Field(
        ...,
        description="Ordered package entries; each one is an object with a string `id`.",
    )

    def find(self, package_id: str) -> PackageEntry | None:
        """First entry whose `id` equals `package_id` exactly, or None."""

        for entry in self.packages:
            if isinstance(entry, dict) and entry.get("id") == package_id:
                return entry
        return None

    def ids(self) -> list[str]:
        return [
            entry["id"]
            for entry in self.packages
            if isinstance(entry, dict) and isinstance(entry.get("id"), str)
        ]
