from __future__ import annotations

from pathlib import Path

import pytest
from cloud_assembly.core import fs, json


def test_atomic_create_bytes_writes_once(tmp_path: Path) -> None:
    target = tmp_path / "sample.bin"
    fs.atomic_create_bytes(target, b"\x00\x01")
    assert target.read_bytes() == b"\x00\x01"

    with pytest.raises(FileExistsError):
        fs.atomic_create_bytes(target, b"other")
    assert target.read_bytes() == b"\x00\x01"

    # no temp files left behind either way
    assert [p.name for p in tmp_path.iterdir()] == ["sample.bin"]


def test_atomic_create_bytes_missing_parent(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        fs.atomic_create_bytes(tmp_path / "nope" / "x.txt", b"x")
    assert not (tmp_path / "nope").exists()


def test_json_helpers_keep_insertion_order() -> None:
    obj = {"b": 1, "a": "é"}
    assert json.json_dumps(obj, indent=None) == '{"b":1,"a":"é"}'
    assert json.json_bytes(obj) == '{\n  "b": 1,\n  "a": "é"\n}\n'.encode("utf-8")
    assert json.json_loads(json.json_bytes(obj)) == obj
