"""
Flat token view handed to transforms and formats.

Emitters do not walk trees; they see an ordered list of tokens, each with
its full path, the file it came from, its transformed value and the
original token it was derived from.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

from chuk_mcp_tokens.models.token import Group, Token
from chuk_mcp_tokens.tree.mapper import iter_tokens


@dataclass(frozen=True)
class FlatToken:
    """A token as seen by the emission stage."""

    path: tuple[str, ...]
    value: Any
    original: Token
    file_path: str
    name: str = ""

    @property
    def type(self) -> str | None:
        return self.original.type

    @property
    def description(self) -> str | None:
        return self.original.description

    @property
    def namespace(self) -> str:
        """Top-level namespace of the token's path."""
        return self.path[0] if self.path else ""

    def with_value(self, value: Any) -> FlatToken:
        return replace(self, value=value)

    def with_name(self, name: str) -> FlatToken:
        return replace(self, name=name)


def flatten(
    sources: dict[str, Group],
    file_filter: str | None = None,
) -> list[FlatToken]:
    """
    Flatten a source set into emission tokens.

    Args:
        sources: Token file path -> tree
        file_filter: Only include tokens from this file (all when None)

    Returns:
        Tokens in source-set order, then depth-first tree order
    """
    tokens: list[FlatToken] = []

    for file_path, tree in sources.items():
        if file_filter is not None and file_path != file_filter:
            continue
        for path, token in iter_tokens(tree):
            tokens.append(
                FlatToken(
                    path=path,
                    value=token.value,
                    original=token,
                    file_path=file_path,
                    name=".".join(path),
                )
            )

    return tokens
