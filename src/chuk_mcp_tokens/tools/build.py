"""
Build tools - MCP tools for running and inspecting the token pipeline.

Tools for building every output from an export, listing the configured
platforms, and previewing what the value passes do to a single value.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_tokens.models.token import Token
from chuk_mcp_tokens.pipeline import build_all, load_config
from chuk_mcp_tokens.transforms import (
    convert_token_units,
    embed_modes,
    find_unrecognized_references,
    rewrite_references,
    rewrite_token,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_build_tools(mcp: ChukMCPServer, base_path: Path) -> dict[str, Any]:
    """
    Register token pipeline tools with the MCP server.

    Args:
        mcp: The MCP server instance
        base_path: Default build root for relative paths

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _resolve(path: str | None) -> Path | None:
        if path is None:
            return None
        candidate = Path(path)
        return candidate if candidate.is_absolute() else base_path / candidate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build(
        source: str,
        root: str | None = None,
        config: str | None = None,
    ) -> str:
        """
        Build every generated file from a design-tool export.

        Writes the intermediate token files, the theme stylesheets, the
        component stylesheet and the class-merge configuration.

        Args:
            source: Path to the export JSON
            root: Build root (defaults to the server's working directory)
            config: Optional YAML build configuration

        Returns:
            JSON string with the written files

        Example:
            tokens_build(source="figma.tokens.json")
        """
        try:
            build_root = _resolve(root) or base_path
            build_config = load_config(_resolve(config))
            result = build_all(_resolve(source), build_root, build_config)

            return json.dumps(
                {
                    "status": "success",
                    "files": [str(p.relative_to(build_root)) for p in result.files_written],
                    "token_files": [
                        str(p.relative_to(build_root)) for p in result.token_files_written
                    ],
                    "platforms": result.platforms_built,
                    "count": result.count,
                }
            )
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_platforms(config: str | None = None) -> str:
        """
        List the platforms and output files a build would produce.

        Args:
            config: Optional YAML build configuration

        Returns:
            JSON string with platform summaries

        Example:
            tokens_list_platforms()
        """
        try:
            build_config = load_config(_resolve(config))

            return json.dumps(
                {
                    "status": "success",
                    "platforms": [
                        {
                            "name": name,
                            "transforms": platform.transforms,
                            "files": [
                                {
                                    "destination": f.destination,
                                    "format": f.format,
                                    "filter": f.filter,
                                }
                                for f in platform.files
                            ],
                        }
                        for name, platform in build_config.platforms.items()
                    ],
                    "count": len(build_config.platforms),
                }
            )
        except Exception as e:
            logger.exception("Failed to list platforms")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_platforms"] = tokens_list_platforms

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_rewrite_reference(value: str) -> str:
        """
        Show how a value's references are rewritten.

        Args:
            value: Any string containing `{...}` references

        Returns:
            JSON string with the rewritten value and any references no
            rule recognized

        Example:
            tokens_rewrite_reference(value="{Color Primitives.Gray.900}")
        """
        try:
            return json.dumps(
                {
                    "status": "success",
                    "original": value,
                    "rewritten": rewrite_references(value),
                    "unrecognized": find_unrecognized_references(value),
                }
            )
        except Exception as e:
            logger.exception("Failed to rewrite reference")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_rewrite_reference"] = tokens_rewrite_reference

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_preview_token(
        value: Any,
        token_type: str | None = None,
        modes: dict[str, Any] | None = None,
        convert_units: bool = False,
    ) -> str:
        """
        Run the value passes over a single token.

        References are rewritten, modes embedded and, when asked, px
        values converted to rem.

        Args:
            value: Token value
            token_type: Token type (e.g. "color", "dimension")
            modes: Optional per-mode values (e.g. {"Light": ..., "Dark": ...})
            convert_units: Convert px to rem first

        Returns:
            JSON string with the resulting token

        Example:
            tokens_preview_token(value="#fff", token_type="color",
                                 modes={"Light": "#fff", "Dark": "#000"})
        """
        try:
            token = Token(
                value=value,
                type=token_type,
                extensions={"mode": modes} if modes else None,
            )
            if convert_units:
                token = convert_token_units(token)
            token = embed_modes(rewrite_token(token))

            return json.dumps({"status": "success", "token": token.to_dict()})
        except Exception as e:
            logger.exception("Failed to preview token")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_preview_token"] = tokens_preview_token

    return tools
