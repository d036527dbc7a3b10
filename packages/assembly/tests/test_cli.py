from __future__ import annotations

from pathlib import Path

import pytest
from cloud_assembly import FileSystemStore, SynthesisSession, cli
from structlog.contextvars import get_contextvars


def _assembly(root: Path, *, deps: list[str]) -> Path:
    root.mkdir()
    session = SynthesisSession(FileSystemStore(root), version_reporting=False)
    session.add_artifact(
        "app",
        {
            "type": "aws:cloudformation:stack",
            "environment": "aws://1/r",
            "dependencies": deps,
        },
    )
    session.add_artifact("base", {"type": "aws:cloudformation:stack", "environment": "aws://1/r"})
    session.add_build_step("zip", {"type": "archive", "parameters": {"src": "dist"}})
    session.close()
    return root


def test_dangling_dependencies() -> None:
    manifest = {
        "artifacts": {
            "a": {"dependencies": ["b", "ghost"]},
            "b": {},
        }
    }
    assert cli.dangling_dependencies(manifest) == ["a -> ghost"]


def test_validate_ok(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _assembly(tmp_path / "ok", deps=["base"])
    assert cli.main(["validate", str(root)]) == 0
    assert "ok" in capsys.readouterr().out


def test_validate_unknown_dependency(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _assembly(tmp_path / "bad", deps=["ghost"])
    assert cli.main(["validate", str(root)]) == 1
    assert "ghost" in capsys.readouterr().out


def test_validate_schema_violation(tmp_path: Path) -> None:
    root = tmp_path / "broken"
    root.mkdir()
    (root / "manifest.json").write_text('{"version": "0.19.0"}', encoding="utf-8")
    assert cli.main(["validate", str(root)]) == 1


def test_ls(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    root = _assembly(tmp_path / "ls", deps=["base"])
    assert cli.main(["ls", str(root)]) == 0
    out = capsys.readouterr().out
    assert "app" in out and "base" in out and "zip" in out


def test_missing_assembly_dir(tmp_path: Path) -> None:
    assert cli.main(["ls", str(tmp_path / "nowhere")]) == 2


def test_version(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["version"]) == 0
    assert "0.19.0" in capsys.readouterr().out


def test_bindings_cleared_after_command() -> None:
    assert cli.main(["version"]) == 0
    assert "command" not in get_contextvars()
