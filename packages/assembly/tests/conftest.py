from __future__ import annotations

from pathlib import Path

import pytest
from cloud_assembly.store import FileSystemStore, InMemoryStore, SessionStore


@pytest.fixture(params=["filesystem", "memory"])
def store(request: pytest.FixtureRequest, tmp_path: Path) -> SessionStore:
    if request.param == "filesystem":
        root = tmp_path / "cdk.out"
        root.mkdir()
        return FileSystemStore(root)
    return InMemoryStore()
