from __future__ import annotations

import copy
import json
from pathlib import Path

# The worked example: one node, one input port, one output port.
ADD_NODE: dict = {
    "name": "Add Node",
    "description": "Adds two numbers",
    "image": "add.svg",
    "inputs": [{"name": "a", "description": "first operand", "type": "number"}],
    "outputs": [{"name": "sum", "description": "result", "type": "number"}],
}

# Deliberately not alphabetical; output must follow input order.
THREE_NODES: list = [
    {
        "name": "Stereo Width",
        "description": "Adjusts the stereo width of a signal.",
        "image": "stereo_width.svg",
        "inputs": [
            {"name": "In L", "description": "Left channel.", "type": "Audio"},
            {"name": "In R", "description": "Right channel.", "type": "Audio"},
            {"name": "Width", "description": "Stereo width factor.", "type": "Float"},
        ],
        "outputs": [
            {"name": "Out L", "description": "Left output.", "type": "Audio"},
            {"name": "Out R", "description": "Right output.", "type": "Audio"},
        ],
    },
    {
        "name": "Dust",
        "description": "Randomly timed impulses.",
        "image": "dust.svg",
        "inputs": [{"name": "Density", "description": "Density control.", "type": "Audio"}],
        "outputs": [{"name": "Output", "description": "Impulse output.", "type": "Audio"}],
    },
    {
        "name": "Trigger On\tNext Frame",
        "description": "Delays a trigger by one frame.",
        "image": "trigger_on_next_frame.svg",
        "inputs": [],
        "outputs": [{"name": "Out", "description": "Delayed trigger.", "type": "Trigger"}],
    },
]


def add_node() -> dict:
    """Return a deep copy of the single-node example record.

    Tests should treat fixtures as immutable; a deep copy prevents accidental mutation.
    """

    return copy.deepcopy(ADD_NODE)


def three_nodes() -> list:
    return copy.deepcopy(THREE_NODES)


def write_nodes_json(path: Path, nodes: object) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(nodes, indent=2) + "\n", encoding="utf-8", newline="\n")
    return path
