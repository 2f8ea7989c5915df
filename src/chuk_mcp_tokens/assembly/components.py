"""
Component assembler - the typography styles behind the utility classes.
"""

from __future__ import annotations

from chuk_mcp_tokens.constants import COMPONENT_UTILITIES_GROUP, SourceGroup
from chuk_mcp_tokens.models.token import Group, require_group

TYPOGRAPHY_NAMESPACE = "typography"


def assemble_components(source: Group) -> Group:
    """
    Build the component tree: every typography style except utilities.

    Raises:
        MalformedSourceError: If the export has no typography styles
    """
    styles = require_group(source, SourceGroup.TYPOGRAPHY_STYLES.value)
    return Group({TYPOGRAPHY_NAMESPACE: styles.omit([COMPONENT_UTILITIES_GROUP])})
