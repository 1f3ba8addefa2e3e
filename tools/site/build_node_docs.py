#!/usr/bin/env python3
"""Build the static node reference pages.

Reads docs/source/nodes.json and writes one page per node into docs/:
- docs/<NameWithoutWhitespace>.html

Every page links ./style.css and ./svg/<image> and carries the same sidebar.
Runs with no arguments; the flags only override the default paths.

Exit codes: 0 on success; 2 when the nodes document is missing or malformed, or
when two nodes map to the same file name (one "ERROR: ..." line on stderr, the
traceback only goes to --log-file). Filesystem errors are not caught and end the
run with a traceback.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from node_docs.errors import NodeDocsError
from node_docs.log import setup_logging
from node_docs.site import build_site


def _repo_root_from_this_file() -> Path:
    # tools/site/build_node_docs.py -> repo root is ../../..
    return Path(__file__).resolve().parents[2]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Build static HTML pages for documented nodes")
    parser.add_argument(
        "--repo-root",
        type=Path,
        default=None,
        help="Repo root (defaults to inferred from this script)",
    )
    parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="Nodes JSON document (defaults to <repo-root>/docs/source/nodes.json)",
    )
    parser.add_argument(
        "--out-root",
        type=Path,
        default=None,
        help="Output directory (defaults to <repo-root>/docs)",
    )
    parser.add_argument(
        "--allow-collisions",
        action="store_true",
        help=(
            "Let nodes whose names differ only by whitespace overwrite each other's page "
            "instead of failing the build."
        ),
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")
    parser.add_argument("--log-file", type=Path, default=None, help="Write a DEBUG log here")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logger = setup_logging(verbose=bool(args.verbose), log_file=args.log_file)

    repo_root = args.repo_root
    if repo_root is None:
        repo_root = _repo_root_from_this_file()

    input_path = args.input
    if input_path is None:
        input_path = repo_root / "docs" / "source" / "nodes.json"

    out_root = args.out_root
    if out_root is None:
        out_root = repo_root / "docs"

    try:
        build_site(
            input_path=input_path,
            out_root=out_root,
            allow_collisions=bool(args.allow_collisions),
        )
    except NodeDocsError as exc:
        logger.debug("Build failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
