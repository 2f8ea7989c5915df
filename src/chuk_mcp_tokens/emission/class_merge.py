"""
Class-merge-config backend - tells tailwind-merge about generated names.

Theme namespaces that replace a built-in Tailwind scale go under
`override`; namespaces that add to one go under `extend`. Everything
else is not a class group tailwind-merge needs to know about.
"""

from __future__ import annotations

import json
from typing import Any

from chuk_mcp_tokens.constants import EXTEND_NAMESPACES, OVERRIDE_NAMESPACES, Namespace
from chuk_mcp_tokens.emission.dictionary import FlatToken
from chuk_mcp_tokens.emission.naming import kebab_case
from chuk_mcp_tokens.models.config import PlatformOptions

# Built-in values kept alongside the generated ones
OVERRIDE_SEED: dict[str, list[str]] = {
    Namespace.LEADING.value: ["none"],
}


def classify(tokens: list[FlatToken]) -> dict[str, dict[str, dict[str, list[str]]]]:
    """
    Sort token names into override/extend buckets by namespace.

    The name is the kebab-cased path below the namespace, which is the
    suffix Tailwind uses for the utility (`radius` / `Size 200` ->
    `size-200`, as in `rounded-size-200`).
    """
    override: dict[str, list[str]] = {key: list(names) for key, names in OVERRIDE_SEED.items()}
    extend: dict[str, list[str]] = {}

    for token in tokens:
        namespace = token.namespace
        if namespace in OVERRIDE_NAMESPACES:
            bucket = override
        elif namespace in EXTEND_NAMESPACES:
            bucket = extend
        else:
            continue

        name = kebab_case(token.path[1:])
        names = bucket.setdefault(namespace, [])
        if name not in names:
            names.append(name)

    return {
        "override": {"theme": override},
        "extend": {"theme": extend},
    }


def format_class_merge(tokens: list[FlatToken], options: PlatformOptions) -> str:
    """`custom/tailwind-merge` - the override/extend config as JSON."""
    config: dict[str, Any] = classify(tokens)
    return json.dumps(config, indent=2, ensure_ascii=False) + "\n"
