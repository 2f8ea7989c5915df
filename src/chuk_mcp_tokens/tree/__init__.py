"""
Tree walking primitives shared by every pass.
"""

from chuk_mcp_tokens.tree.mapper import (
    SKIP,
    MapResult,
    Recurse,
    TokenMapper,
    clone_tree,
    iter_tokens,
    map_tokens,
)

__all__ = [
    "SKIP",
    "MapResult",
    "Recurse",
    "TokenMapper",
    "clone_tree",
    "iter_tokens",
    "map_tokens",
]
