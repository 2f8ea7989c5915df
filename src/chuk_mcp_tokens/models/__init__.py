"""
Data models for the token pipeline.

Tokens and groups form the tree every pass walks; the config models
describe which outputs a build produces.
"""

from chuk_mcp_tokens.models.config import (
    CLASS_MERGE_CONFIG_PATH,
    COMPONENTS_STYLESHEET_PATH,
    COMPONENTS_TOKENS_PATH,
    DEFAULT_THEMES,
    BuildConfig,
    FileConfig,
    PlatformConfig,
    PlatformOptions,
    theme_stylesheet_path,
    theme_tokens_path,
)
from chuk_mcp_tokens.models.token import (
    Group,
    Node,
    Token,
    dump_tree,
    parse_node,
    parse_tree,
    require_group,
    require_token,
)

__all__ = [
    # Config
    "BuildConfig",
    "CLASS_MERGE_CONFIG_PATH",
    "COMPONENTS_STYLESHEET_PATH",
    "COMPONENTS_TOKENS_PATH",
    "DEFAULT_THEMES",
    "FileConfig",
    "PlatformConfig",
    "PlatformOptions",
    "theme_stylesheet_path",
    "theme_tokens_path",
    # Tree
    "Group",
    "Node",
    "Token",
    "dump_tree",
    "parse_node",
    "parse_tree",
    "require_group",
    "require_token",
]
