from __future__ import annotations

import logging
from pathlib import Path

from node_docs.errors import FilenameCollisionError
from node_docs.models import NodeDescription, load_nodes
from node_docs.render import node_file_name, render_node_page, render_sidebar
from node_docs.stable_io import write_text

logger = logging.getLogger(__name__)


def _find_collisions(nodes: tuple[NodeDescription, ...]) -> dict[str, tuple[str, ...]]:
    by_file: dict[str, list[str]] = {}
    for node in nodes:
        by_file.setdefault(node_file_name(node.name), []).append(node.name)
    return {f: tuple(names) for f, names in by_file.items() if len(names) > 1}


def build_site(*, input_path: Path, out_root: Path, allow_collisions: bool = False) -> list[Path]:
    """Render one HTML page per node in ``input_path`` into ``out_root``.

    Pages are written and reported (``- <fileName>`` on stdout) in input order.
    The whole document is loaded and checked before the first write, so input
    errors and filename collisions leave no pages behind. With
    ``allow_collisions`` a later node silently replaces an earlier node's page,
    apart from a logged warning.

    Returns the written paths in processing order.
    """

    out_root.mkdir(parents=True, exist_ok=True)

    nodes = load_nodes(input_path)

    collisions = _find_collisions(nodes)
    for file_name, names in sorted(collisions.items()):
        if not allow_collisions:
            raise FilenameCollisionError(file_name, names)
        logger.warning(
            "%s is derived from %d nodes (%s); the last one wins",
            file_name,
            len(names),
            ", ".join(names),
        )

    sidebar_html = render_sidebar(nodes)

    written: list[Path] = []
    for node in nodes:
        file_name = node_file_name(node.name)
        path = out_root / file_name
        write_text(path, render_node_page(node, sidebar_html=sidebar_html))
        logger.debug("Wrote %s (%d inputs, %d outputs)", path, len(node.inputs), len(node.outputs))
        print(f"- {file_name}")
        written.append(path)

    logger.info("Built %d page(s) into %s", len(written), out_root)
    return written
