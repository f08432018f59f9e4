"""Reference resolution - follows "{group.path.to.token}" references.

Token documents are hand-authored, so a reference can point at nothing.
That is not an error here: an unresolvable reference resolves to None and
the caller decides whether to skip, warn or report it. The only failure
that is raised is a reference chain that loops back on itself.
"""

import logging
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import CircularReferenceError
from ..core.types import ResolvedValue
from .document import TokenDocument, TokenGroup, TokenLeaf

logger = logging.getLogger(__name__)


def is_reference(value: Any) -> bool:
    """Check if a value uses the "{dotted.path}" reference syntax."""
    return (
        isinstance(value, str)
        and len(value) >= 2
        and value.startswith("{")
        and value.endswith("}")
    )


def reference_path(value: str) -> str:
    """Strip the braces from a reference string."""
    return value[1:-1]


def _resolve_node(node: Any, document: TokenDocument, chain: list[str]) -> ResolvedValue:
    """Follow a node until it is a concrete value, a group, or a dead end.

    ``chain`` holds the paths already visited; it is extended in place.
    """
    seen = set(chain)

    while True:
        if isinstance(node, TokenLeaf):
            node = node.value
            continue

        if isinstance(node, TokenGroup):
            # Intermediate grouping node, passed through untouched
            return node.raw

        if isinstance(node, Mapping):
            # Raw mapping from inside a token value, e.g. {"value": 4, "unit": "px"}
            return node

        if not is_reference(node):
            return node

        ref_path = reference_path(node)
        if ref_path in seen:
            raise CircularReferenceError(chain + [ref_path])
        chain.append(ref_path)
        seen.add(ref_path)

        try:
            node = document.walk(ref_path.split("."))
        except KeyError:
            logger.debug(f"Unresolved token reference: {{{ref_path}}} (via {' -> '.join(chain)})")
            return None


def resolve(value: Any, document: TokenDocument | Mapping) -> ResolvedValue:
    """
    Resolve a raw token value to a concrete value.

    Numbers and non-reference strings are returned unchanged. A reference
    is walked from the document root; landing on a token (or on another
    reference) keeps resolving, landing on a group returns the group's raw
    mapping as-is.

    Args:
        value: Raw token value, e.g. 16, "#336699" or "{ld.primitive.font.size.500}"
        document: Token document the references are absolute within

    Returns:
        The resolved value, or None if a reference does not resolve

    Raises:
        CircularReferenceError: If the reference chain repeats a path
    """
    if isinstance(value, (int, float)):
        return value
    return _resolve_node(value, TokenDocument.coerce(document), [])


def lookup(path: str, document: TokenDocument | Mapping) -> ResolvedValue:
    """
    Resolve a single dotted token path against the document.

    Args:
        path: Dotted path from the document root, e.g. "ld.color.brand.500"
        document: Token document to look in

    Returns:
        The fully resolved token value, or None if the path does not exist

    Raises:
        CircularReferenceError: If the token's reference chain repeats a path
    """
    if not path or not isinstance(path, str):
        return None

    doc = TokenDocument.coerce(document)
    try:
        node = doc.walk(path.split("."))
    except KeyError:
        logger.debug(f"Token path not found: {path}")
        return None

    return _resolve_node(node, doc, [path])
