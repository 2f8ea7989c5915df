"""
Loading the export, token files and build configuration from disk.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from chuk_mcp_tokens.errors import MalformedSourceError
from chuk_mcp_tokens.models.config import BuildConfig
from chuk_mcp_tokens.models.token import Group, parse_tree

logger = logging.getLogger(__name__)


def load_source_document(path: Path) -> Group:
    """
    Load and parse the design-tool export.

    Raises:
        MalformedSourceError: If the file is not a JSON object
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise MalformedSourceError(str(path), f"'{path}' must contain a JSON object.")

    return parse_tree(data)


def load_source_set(root: Path, patterns: list[str]) -> dict[str, Group]:
    """
    Load every token file matching the glob patterns under `root`.

    Keys are POSIX paths relative to `root`, which is what file filters
    match against. Files are ordered by pattern, then by path.
    """
    sources: dict[str, Group] = {}

    for pattern in patterns:
        for path in sorted(root.glob(pattern)):
            relative = path.relative_to(root).as_posix()
            if relative in sources:
                continue
            sources[relative] = load_source_document(path)
            logger.debug("Loaded token file %s", relative)

    return sources


def load_config(path: Path | None = None) -> BuildConfig:
    """
    Load a build configuration from YAML, or the default build.

    Without a path the stock build, `BuildConfig.default()`, is used.
    """
    if path is None:
        return BuildConfig.default()

    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return BuildConfig.model_validate(data)
