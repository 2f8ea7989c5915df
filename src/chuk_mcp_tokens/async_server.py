#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server exposes the design-token pipeline as MCP tools. The pipeline
turns a design-tool export into Tailwind theme stylesheets, a component
utility-class stylesheet and a tailwind-merge configuration.

The server provides tools for:
- Building every generated file from an export
- Listing the configured platforms and outputs
- Previewing reference rewriting and mode embedding for single values
"""

import logging
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_tokens.tools import register_build_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-tokens")

# Paths - builds run relative to the working directory
BASE_PATH = Path.cwd()

# Register all tools
build_tools = register_build_tools(mcp, BASE_PATH)

# Export tool functions for direct access
tokens_build = build_tools["tokens_build"]
tokens_list_platforms = build_tools["tokens_list_platforms"]
tokens_rewrite_reference = build_tools["tokens_rewrite_reference"]
tokens_preview_token = build_tools["tokens_preview_token"]

logger.info("CHUK Design Tokens MCP Server initialized")
logger.info(f"  Build root: {BASE_PATH}")
