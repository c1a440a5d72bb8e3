import json
from pathlib import Path

import pytest

from core.logging_setup import configure_logging


SAMPLE_MANIFEST = {
    "packages": [
        {"id": "agent-install", "version": "1.0.0"},
        {"id": "vendor/tool", "version": "2.3.1", "assets": [{"url": "https://example.invalid/tool.zip"}]},
        {"version": "0.0.1"},
        "not-an-object",
        {"id": "agent-install", "version": "9.9.9"},
    ]
}


def write_manifest(root: Path, payload) -> Path:
    path = root / "manifests" / "index.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Empty working directory; the fixed relative paths resolve inside it."""

    monkeypatch.chdir(tmp_path)
    for name in ("MANIFEST_PATH", "DIST_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(f"APPLY_PACKAGE_{name}", raising=False)
    return tmp_path


@pytest.fixture
def project(workdir):
    """Working directory holding `manifests/index.json` with SAMPLE_MANIFEST."""

    write_manifest(workdir, SAMPLE_MANIFEST)
    return workdir


@pytest.fixture(autouse=True)
def _reset_log_level():
    yield
    configure_logging("WARNING")
