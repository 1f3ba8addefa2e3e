from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class _PathEntry:
    """A required allowlist entry; the path must exist."""

    label: str
    path: str


# Hardcoded allowlist of repo-relative paths covered by the lint gate.
PATHS: tuple[_PathEntry, ...] = (
    _PathEntry("package", "src/node_docs"),
    _PathEntry("site builder", "tools/site/build_node_docs.py"),
    _PathEntry("lint gate", "tools/ci/lint_scoped.py"),
    _PathEntry("tests", "tests"),
)


def _repo_root() -> Path:
    # tools/ci/lint_scoped.py -> tools/ci -> tools -> repo root
    return Path(__file__).resolve().parents[2]


def _resolve_scoped_paths(repo_root: Path) -> list[str]:
    missing = [e for e in PATHS if not (repo_root / e.path).exists()]
    if missing:
        listed = ", ".join(f"{e.label} ({e.path})" for e in missing)
        raise FileNotFoundError(f"Missing allowlisted path(s): {listed}")
    return [e.path for e in PATHS]


def main(argv: list[str] | None = None) -> int:
    _ = argv  # no args; hardcoded allowlist
    repo_root = _repo_root()

    print("Scoped ruff lint (node docs)")

    try:
        paths = _resolve_scoped_paths(repo_root)
    except FileNotFoundError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2

    cmd = [sys.executable, "-m", "ruff", "check", *paths]
    print("Command:")
    print("  " + " ".join(cmd))

    completed = subprocess.run(cmd, cwd=str(repo_root), check=False)
    return int(completed.returncode)


if __name__ == "__main__":
    raise SystemExit(main())
