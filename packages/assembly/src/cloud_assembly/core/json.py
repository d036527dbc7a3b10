import json
from typing import Any


def json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """
    Deterministic JSON for assembly documents:
      - keys kept in insertion order (artifact order is significant)
      - ensure_ascii=False
      - compact separators when indent is None
    """
    if indent is None:
        return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
    return json.dumps(obj, ensure_ascii=False, indent=indent)


def json_bytes(obj: Any, *, indent: int | None = 2) -> bytes:
    return (json_dumps(obj, indent=indent) + "\n").encode("utf-8")


def json_loads(raw: str | bytes) -> Any:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return json.loads(raw)
