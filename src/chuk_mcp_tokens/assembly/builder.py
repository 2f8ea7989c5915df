"""
Token-file stage - from one export to one token file per destination.

The pipeline:
    export JSON → TokenTree (parsed, cloned)
    → Destination subtrees (theme per brand, components)
    → references rewritten, modes embedded
    → *.tokens.json files (the source set the emitters read)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from chuk_mcp_tokens.assembly.components import assemble_components
from chuk_mcp_tokens.assembly.theme import assemble_theme
from chuk_mcp_tokens.constants import SuccessMessages
from chuk_mcp_tokens.errors import DestinationWriteError
from chuk_mcp_tokens.models.config import (
    COMPONENTS_TOKENS_PATH,
    DEFAULT_THEMES,
    theme_tokens_path,
)
from chuk_mcp_tokens.models.token import Group, Token, dump_tree
from chuk_mcp_tokens.transforms.modes import embed_modes
from chuk_mcp_tokens.transforms.references import rewrite_token
from chuk_mcp_tokens.tree.mapper import MapResult, clone_tree, map_tokens

logger = logging.getLogger(__name__)

# Ordered source set: token file path -> tree
SourceSet = dict[str, Group]


@dataclass(frozen=True)
class Destination:
    """A token file path and the subtree assembled for it."""

    path: str
    tokens: Group


def assemble_destinations(
    source: Group,
    themes: dict[str, str] | None = None,
) -> list[Destination]:
    """
    Assemble every destination subtree from the export.

    Args:
        source: Parsed export (not modified)
        themes: Theme key -> theme group name

    Returns:
        Theme destinations in table order, then the component destination
    """
    themes = themes or DEFAULT_THEMES
    tree = clone_tree(source)

    destinations = [
        Destination(theme_tokens_path(key), assemble_theme(tree, group_name))
        for key, group_name in themes.items()
    ]
    destinations.append(Destination(COMPONENTS_TOKENS_PATH, assemble_components(tree)))

    return destinations


def _prepare_token(key: str, token: Token) -> MapResult:
    return key, embed_modes(rewrite_token(token))


def prepare_tokens(tree: Group) -> Group:
    """Rewrite references, then embed modes, for every token."""
    return map_tokens(tree, _prepare_token)


def build_token_files(
    source: Group,
    themes: dict[str, str] | None = None,
) -> SourceSet:
    """
    Run the token-file stage in memory.

    Returns:
        Token file path -> prepared tree, in destination order
    """
    return {
        destination.path: prepare_tokens(destination.tokens)
        for destination in assemble_destinations(source, themes)
    }


def render_token_file(tree: Group) -> str:
    """Pretty JSON, two-space indent, trailing newline."""
    return json.dumps(dump_tree(tree), indent=2, ensure_ascii=False) + "\n"


def write_token_files(token_files: SourceSet, root: Path) -> list[Path]:
    """
    Write token files under `root`, creating directories as needed.

    Raises:
        DestinationWriteError: If a file cannot be written
    """
    written = []

    for relative, tree in token_files.items():
        path = root / relative
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(render_token_file(tree), encoding="utf-8")
        except OSError as e:
            raise DestinationWriteError(str(path), e) from e

        logger.info(SuccessMessages.FILE_WRITTEN.format(path=relative))
        written.append(path)

    return written
