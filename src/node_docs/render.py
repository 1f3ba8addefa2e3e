"""Inline HTML templating for node reference pages.

Output is deterministic: no timestamps, input ordering, LF newlines. All node
text is HTML-escaped.
"""

from __future__ import annotations

import html
import re

from node_docs.models import NodeDescription, PortSpec

STYLESHEET_HREF = "./style.css"
IMAGE_DIR = "./svg"

# Unicode whitespace as Python defines it, so \x1c-\x1f go too and \ufeff stays.
_WHITESPACE_RE = re.compile(r"\s+")

_TABLE_HEAD: tuple[str, ...] = (
    "      <thead>",
    "        <tr>",
    "          <th>Name</th>",
    "          <th>Description</th>",
    "          <th>Type</th>",
    "        </tr>",
    "      </thead>",
)


def node_file_name(name: str) -> str:
    return _WHITESPACE_RE.sub("", name) + ".html"


def render_sidebar(nodes: tuple[NodeDescription, ...] | list[NodeDescription]) -> str:
    # Identical on every page; there is no active-page marker.
    return "\n".join(
        f'<li><a href="{html.escape(node_file_name(n.name))}">{html.escape(n.name)}</a></li>'
        for n in nodes
    )


def render_port_rows(ports: tuple[PortSpec, ...]) -> str:
    return "\n".join(
        "        <tr>"
        f"<td>{html.escape(p.name)}</td>"
        f"<td>{html.escape(p.description)}</td>"
        f"<td>{html.escape(p.type)}</td>"
        "</tr>"
        for p in ports
    )


def _port_table(*, heading: str, rows_html: str) -> list[str]:
    lines = [
        f"    <h2>{heading}</h2>",
        "    <table>",
        *_TABLE_HEAD,
        "      <tbody>",
    ]
    if rows_html:
        lines.append(rows_html)
    lines += [
        "      </tbody>",
        "    </table>",
    ]
    return lines


def render_node_page(node: NodeDescription, *, sidebar_html: str) -> str:
    name = html.escape(node.name)
    image_src = html.escape(f"{IMAGE_DIR}/{node.image}")

    return "\n".join(
        [
            "<!DOCTYPE html>",
            '<html lang="en">',
            "<head>",
            '  <meta charset="UTF-8">',
            f"  <title>{name}</title>",
            f'  <link rel="stylesheet" href="{STYLESHEET_HREF}">',
            "</head>",
            "<body>",
            '  <nav class="sidebar">',
            "    <ul>",
            sidebar_html,
            "    </ul>",
            "  </nav>",
            "  <main>",
            f"    <h1>{name}</h1>",
            f'    <img src="{image_src}" alt="{name}">',
            f"    <p>{html.escape(node.description)}</p>",
            *_port_table(heading="Inputs", rows_html=render_port_rows(node.inputs)),
            "",
            *_port_table(heading="Outputs", rows_html=render_port_rows(node.outputs)),
            "  </main>",
            "</body>",
            "</html>",
        ]
    )
