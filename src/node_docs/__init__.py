"""Static HTML reference pages for MetasoundBranches nodes.

The build is a single deterministic pass: nodes.json in, one page per node out.
"""

__all__: list[str] = [
    "errors",
    "log",
    "models",
    "render",
    "site",
    "stable_io",
]
