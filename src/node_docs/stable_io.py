from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def read_json(path: str | Path) -> Any:
    """Read JSON from disk (UTF-8) and parse.

    Errors are not translated here; callers decide how a missing or malformed
    document is reported.
    """

    p = Path(path)
    return json.loads(p.read_text(encoding="utf-8"))


def write_text(path: str | Path, content: str) -> None:
    """Write text deterministically (UTF-8, LF newlines, trailing newline)."""

    p = Path(path)
    if not content.endswith("\n"):
        content += "\n"
    with p.open("w", encoding="utf-8", newline="\n") as f:
        f.write(content)
