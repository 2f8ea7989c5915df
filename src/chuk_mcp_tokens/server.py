#!/usr/bin/env python3
"""
Entry point for CHUK Design Tokens.

Two commands:
    build  - run the token pipeline once and exit
    serve  - start the MCP server (stdio or http transport)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def _parse_theme(text: str) -> tuple[str, str]:
    """`brand-2=Brand #2` -> ("brand-2", "Brand #2")."""
    key, sep, group = text.partition("=")
    if not sep or not key or not group:
        raise argparse.ArgumentTypeError(f"Expected KEY=GROUP, got '{text}'")
    return key, group


def build_parser() -> argparse.ArgumentParser:
    """Command-line parser for both commands."""
    parser = argparse.ArgumentParser(description="CHUK Design Tokens")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser("build", help="Generate stylesheets from a design-tool export")
    build.add_argument("source", type=Path, help="Path to the export JSON")
    build.add_argument(
        "--root",
        type=Path,
        default=Path.cwd(),
        help="Build root (default: current directory)",
    )
    build.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML build configuration (default: built-in build)",
    )
    build.add_argument(
        "--theme",
        type=_parse_theme,
        action="append",
        default=None,
        metavar="KEY=GROUP",
        help="Theme to assemble (repeatable, default: default=Theme)",
    )

    serve = commands.add_parser("serve", help="Run the MCP server")
    serve.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    serve.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )

    return parser


def run_build(args: argparse.Namespace) -> int:
    """Run one build; returns the process exit code."""
    from chuk_mcp_tokens.errors import TokenPipelineError
    from chuk_mcp_tokens.pipeline import build_all, load_config

    themes = dict(args.theme) if args.theme else None
    try:
        config = load_config(args.config) if args.config else None
        result = build_all(args.source, args.root, config, themes)
    except (TokenPipelineError, OSError) as e:
        logger.error(f"Build failed: {e}")
        return 1

    for path in result.files_written:
        logger.debug(f"  {path}")
    return 0


def run_server(args: argparse.Namespace) -> None:
    """Start the MCP server on the chosen transport."""
    # Import after argument parsing to avoid issues
    from chuk_mcp_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Design Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


def main(argv: list[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.command == "build":
        sys.exit(run_build(args))

    run_server(args)


if __name__ == "__main__":
    main()
