"""
Assemblers - select, omit, rename and re-key export subtrees into the
destination shapes the emitters read.
"""

from chuk_mcp_tokens.assembly.builder import (
    Destination,
    SourceSet,
    assemble_destinations,
    build_token_files,
    prepare_tokens,
    render_token_file,
    write_token_files,
)
from chuk_mcp_tokens.assembly.components import assemble_components
from chuk_mcp_tokens.assembly.theme import assemble_theme, extract_prefixed_tokens

__all__ = [
    "Destination",
    "SourceSet",
    "assemble_components",
    "assemble_destinations",
    "assemble_theme",
    "build_token_files",
    "extract_prefixed_tokens",
    "prepare_tokens",
    "render_token_file",
    "write_token_files",
]
