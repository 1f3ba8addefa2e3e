from __future__ import annotations


class NodeDocsError(Exception):
    """Base class for expected, operator-facing build failures."""


class NodesInputError(NodeDocsError, ValueError):
    """The nodes document is missing, is not valid JSON, or has the wrong shape."""


class FilenameCollisionError(NodeDocsError):
    def __init__(self, file_name: str, names: tuple[str, ...]) -> None:
        self.file_name = file_name
        self.names = names
        quoted = ", ".join(repr(n) for n in names)
        super().__init__(f"{file_name} would be written by more than one node: {quoted}")
