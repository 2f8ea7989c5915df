"""
Deep mapper - the generic recursive visitor under every token pass.

`map_tokens` walks a group, hands every token to a callback and rebuilds
the tree from what the callback returns. Groups are always descended
into; a value the callback synthesizes is only walked again when it is
wrapped in `Recurse`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Union

from chuk_mcp_tokens.errors import MalformedSourceError
from chuk_mcp_tokens.models.token import Group, Node, Token, parse_node

logger = logging.getLogger(__name__)


class _Skip:
    """Sentinel type: drop the entry from the mapped tree."""

    _instance: _Skip | None = None

    def __new__(cls) -> _Skip:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"


SKIP = _Skip()


@dataclass(frozen=True)
class Recurse:
    """Replace the entry and walk the replacement with the same callback."""

    key: str
    value: Group | Mapping[str, Any]


MapResult = Union[tuple[str, Any], Recurse, _Skip]
TokenMapper = Callable[[str, Token], MapResult]


def _replacement(outcome: tuple[str, Any] | Recurse, parent: tuple[str, ...]) -> tuple[str, Node, bool]:
    """
    Unpack a callback result into `(key, node, walk_again)`.

    Replacement values may be raw JSON; they are classified like the source.
    """
    if isinstance(outcome, Recurse):
        return outcome.key, parse_node(outcome.value, (*parent, outcome.key)), True

    new_key, new_value = outcome
    return new_key, parse_node(new_value, (*parent, new_key)), False


def map_tokens(group: Group, mapper: TokenMapper, _path: tuple[str, ...] = ()) -> Group:
    """
    Map every token of a group through `mapper`.

    The callback receives a private deep copy of each token, so neither
    the input tree nor anything it shares is modified.

    Args:
        group: Group to walk
        mapper: `(key, token) -> (new_key, new_value) | SKIP | Recurse(...)`

    Returns:
        A newly built group

    Raises:
        MalformedSourceError: Propagated from the callback
    """
    children: dict[str, Node] = {}

    for key, node in group.items():
        path = (*_path, key)

        if isinstance(node, Group):
            children[key] = map_tokens(node, mapper, path)
            continue

        try:
            outcome = mapper(key, node.clone())
        except MalformedSourceError:
            raise
        except Exception:
            # Unhandled tokens are emitted unchanged rather than dropped
            logger.warning("Could not map token '%s'; keeping it unchanged", ".".join(path), exc_info=True)
            children[key] = node.clone()
            continue

        if outcome is SKIP:
            continue

        try:
            new_key, replacement, walk = _replacement(outcome, _path)
        except (TypeError, ValueError):
            # Not a token or group: the token is kept as it was
            logger.warning("Invalid replacement for token '%s'; keeping it unchanged", ".".join(path), exc_info=True)
            children[key] = node.clone()
            continue

        if walk and isinstance(replacement, Group):
            replacement = map_tokens(replacement, mapper, (*_path, new_key))
        children[new_key] = replacement

    return Group(children, meta=dict(group.meta))


def clone_tree(group: Group) -> Group:
    """Structural deep copy of a tree."""
    return map_tokens(group, lambda key, token: (key, token))


def iter_tokens(node: Node, prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Token]]:
    """
    Yield `(path, token)` for every token, depth first, in insertion order.

    A token at the root yields the given prefix as its path.
    """
    if isinstance(node, Token):
        yield prefix, node
        return

    for key, child in node.items():
        yield from iter_tokens(child, (*prefix, key))
