from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from node_docs.errors import NodesInputError
from node_docs.stable_io import read_json

logger = logging.getLogger(__name__)

_NODE_STR_FIELDS: tuple[str, ...] = ("name", "description", "image")
_PORT_STR_FIELDS: tuple[str, ...] = ("name", "description", "type")


@dataclass(frozen=True)
class PortSpec:
    name: str
    description: str
    type: str


@dataclass(frozen=True)
class NodeDescription:
    name: str
    description: str
    image: str  # file name under ./svg/
    inputs: tuple[PortSpec, ...]
    outputs: tuple[PortSpec, ...]


def _require_str(obj: dict, field: str, *, where: str) -> str:
    value = obj.get(field)
    if not isinstance(value, str):
        raise NodesInputError(f"{where}: missing string field '{field}'")
    return value


def _parse_ports(value: object, *, where: str) -> tuple[PortSpec, ...]:
    if not isinstance(value, list):
        raise NodesInputError(f"{where}: must be a list of port objects")

    ports: list[PortSpec] = []
    for i, item in enumerate(value):
        item_where = f"{where}[{i}]"
        if not isinstance(item, dict):
            raise NodesInputError(f"{item_where}: each port must be an object")
        name, description, type_ = (
            _require_str(item, field, where=item_where) for field in _PORT_STR_FIELDS
        )
        ports.append(PortSpec(name=name, description=description, type=type_))
    return tuple(ports)


def parse_nodes(obj: object) -> tuple[NodeDescription, ...]:
    """Shape-check a decoded nodes document and build the records.

    Input order is preserved; it drives both the sidebar and the write order.
    """

    if not isinstance(obj, list):
        raise NodesInputError("nodes document must be a JSON array")

    nodes: list[NodeDescription] = []
    for i, item in enumerate(obj):
        where = f"nodes[{i}]"
        if not isinstance(item, dict):
            raise NodesInputError(f"{where}: each node must be an object")

        name, description, image = (
            _require_str(item, field, where=where) for field in _NODE_STR_FIELDS
        )
        nodes.append(
            NodeDescription(
                name=name,
                description=description,
                image=image,
                inputs=_parse_ports(item.get("inputs"), where=f"{where}.inputs"),
                outputs=_parse_ports(item.get("outputs"), where=f"{where}.outputs"),
            )
        )

    return tuple(nodes)


def load_nodes(path: Path) -> tuple[NodeDescription, ...]:
    try:
        obj = read_json(path)
    except FileNotFoundError as exc:
        raise NodesInputError(f"nodes document not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise NodesInputError(f"{path}: not UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise NodesInputError(f"{path}: invalid JSON: {exc}") from exc

    nodes = parse_nodes(obj)
    logger.debug("Loaded %d node(s) from %s", len(nodes), path)
    return nodes
