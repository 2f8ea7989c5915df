"""
MCP tools for the token pipeline.
"""

from chuk_mcp_tokens.tools.build import register_build_tools

__all__ = [
    "register_build_tools",
]
