"""
Token tree model - the tagged union every pass operates on.

A design-tool export is a nested JSON document. Every node is classified
once, up front, into either a Token (a leaf carrying `$value`) or a Group
(an ordered mapping of name -> node). Passes never re-inspect raw dicts.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

from pydantic import BaseModel, Field

from chuk_mcp_tokens.constants import ErrorMessages
from chuk_mcp_tokens.errors import MalformedSourceError

logger = logging.getLogger(__name__)

VALUE_KEY = "$value"
MODE_KEY = "mode"


class Token(BaseModel):
    """
    A leaf design value.

    Tokens are immutable. Passes that change a token return a new one
    via `evolve`, so a source tree is never modified in place.
    """

    value: Any = Field(..., alias="$value", description="Scalar, reference string or composite")
    type: str | None = Field(None, alias="$type", description="Token type tag")
    description: str | None = Field(None, alias="$description")
    extensions: dict[str, Any] | None = Field(None, alias="$extensions")

    model_config = {"frozen": True, "populate_by_name": True, "extra": "allow"}

    @property
    def modes(self) -> dict[str, Any] | None:
        """Per-mode variant values, if the token carries any."""
        if not self.extensions:
            return None
        modes = self.extensions.get(MODE_KEY)
        return modes if isinstance(modes, dict) and modes else None

    def evolve(self, **changes: Any) -> Token:
        """Return a copy with the given fields replaced."""
        return self.model_copy(update=changes)

    def with_modes(self, modes: dict[str, Any]) -> Token:
        """Return a copy whose mode set is replaced."""
        extensions = dict(self.extensions or {})
        extensions[MODE_KEY] = modes
        return self.evolve(extensions=extensions)

    def clone(self) -> Token:
        """Deep copy, so nested composites are not shared."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the export's JSON shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


@dataclass
class Group:
    """
    An ordered collection of named tokens and groups.

    `meta` keeps `$`-prefixed group properties (such as `$type` or
    `$description`) so they survive a round trip.
    """

    children: dict[str, Node] = field(default_factory=dict)
    meta: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, key: str) -> Node:
        return self.children[key]

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __iter__(self) -> Iterator[str]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def get(self, key: str, default: Node | None = None) -> Node | None:
        return self.children.get(key, default)

    def keys(self) -> Iterable[str]:
        return self.children.keys()

    def items(self) -> Iterable[tuple[str, Node]]:
        return self.children.items()

    def pick(self, names: Iterable[str]) -> Group:
        """Keep only the named children, in the order they are named."""
        return Group({k: self.children[k] for k in names if k in self.children})

    def omit(self, names: Iterable[str]) -> Group:
        """Drop the named children; names that are absent are ignored."""
        unwanted = set(names)
        return Group({k: v for k, v in self.children.items() if k not in unwanted})

    def merged(self, *others: Group | Mapping[str, Node]) -> Group:
        """
        Shallow merge, later entries win.

        A key that already exists keeps its original position.
        """
        children = dict(self.children)
        for other in others:
            source = other.children if isinstance(other, Group) else other
            children.update(source)
        return Group(children, meta=dict(self.meta))


Node = Union[Token, Group]


def is_token_data(data: Any) -> bool:
    """A raw node is a token iff it is a mapping with a `$value` field."""
    return isinstance(data, Mapping) and VALUE_KEY in data


def parse_node(data: Any, path: tuple[str, ...] = ()) -> Node:
    """
    Classify a raw JSON node into the tagged union.

    Args:
        data: Raw node (mapping)
        path: Path of the node, used in error messages

    Returns:
        Token or Group

    Raises:
        MalformedSourceError: If the node is neither a token nor a group
    """
    if isinstance(data, (Token, Group)):
        return data

    if is_token_data(data):
        return Token.model_validate(dict(data))

    if not isinstance(data, Mapping):
        raise MalformedSourceError(
            ".".join(path),
            f"Expected a token or group at '{'.'.join(path)}', found {type(data).__name__}.",
        )

    children: dict[str, Node] = {}
    meta: dict[str, Any] = {}
    for key, value in data.items():
        if key.startswith("$"):
            meta[key] = value
            continue
        if not isinstance(value, Mapping):
            logger.debug("Ignoring non-node entry '%s'", ".".join((*path, key)))
            continue
        children[key] = parse_node(value, (*path, key))

    return Group(children, meta=meta)


def parse_tree(data: Mapping[str, Any]) -> Group:
    """Parse a whole export document into a TokenTree (root Group)."""
    node = parse_node(data)
    if isinstance(node, Token):
        raise MalformedSourceError("", "The document root must be a group, not a token.")
    return node


def dump_node(node: Node) -> dict[str, Any]:
    """Convert a node back to the raw JSON shape."""
    if isinstance(node, Token):
        return node.to_dict()

    result: dict[str, Any] = dict(node.meta)
    for key, child in node.items():
        result[key] = dump_node(child)
    return result


def dump_tree(tree: Group) -> dict[str, Any]:
    """Convert a TokenTree back to the raw JSON shape."""
    return dump_node(tree)


def require_group(tree: Group, *path: str) -> Group:
    """
    Walk `path` from `tree` and return the group found there.

    Raises:
        MalformedSourceError: If any step is missing or is a token
    """
    node: Node = tree
    for depth, key in enumerate(path):
        here = ".".join(path[: depth + 1])
        if not isinstance(node, Group):
            raise MalformedSourceError(here, ErrorMessages.NOT_A_GROUP.format(path=here))
        if key not in node:
            raise MalformedSourceError(here)
        node = node[key]

    if not isinstance(node, Group):
        joined = ".".join(path)
        raise MalformedSourceError(joined, ErrorMessages.NOT_A_GROUP.format(path=joined))
    return node


def require_token(tree: Group, *path: str) -> Token:
    """
    Walk `path` from `tree` and return the token found there.

    Raises:
        MalformedSourceError: If any step is missing or the leaf is a group
    """
    parent = require_group(tree, *path[:-1])
    joined = ".".join(path)
    node = parent.get(path[-1])
    if node is None:
        raise MalformedSourceError(joined)
    if not isinstance(node, Token):
        raise MalformedSourceError(joined, ErrorMessages.NOT_A_TOKEN.format(path=joined))
    return node
