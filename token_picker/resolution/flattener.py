"""Flattener - turns the token tree into a flat, searchable catalog."""

import logging
from collections.abc import Mapping
from typing import Any

from ..core.exceptions import CircularReferenceError
from ..core.models import CatalogEntry
from ..core.types import TYPE_KEYS, VALUE_KEYS
from .document import TokenDocument, TokenGroup, TokenLeaf, parse_node
from .reference_resolver import resolve

logger = logging.getLogger(__name__)

RESERVED_KEYS = frozenset(VALUE_KEYS + TYPE_KEYS)


def is_reserved_key(key: str, node: Any = None) -> bool:
    """
    Check if a group key is a tag rather than a token name.

    "$"-prefixed keys are always metadata. A plain "type" or "value" key is
    only a tag when it does not hold a token or group of its own.
    """
    if key.startswith("$"):
        return True
    return key in RESERVED_KEYS and not isinstance(node, (TokenLeaf, TokenGroup))


def _join(prefix: str, key: str) -> str:
    return f"{prefix}.{key}" if prefix else key


def _entry_for_leaf(path: str, leaf: TokenLeaf, document: TokenDocument) -> CatalogEntry:
    try:
        value = resolve(leaf.value, document)
    except CircularReferenceError as e:
        logger.warning(f"Skipping value of {path}: {e.message}")
        value = None

    return CatalogEntry(
        path=path,
        name=path.split(".")[-1],
        value=value,
        type=leaf.type_or_unknown,
    )


def _flatten_group(
    group: TokenGroup,
    document: TokenDocument,
    prefix: str,
    result: list[CatalogEntry],
) -> None:
    for key, child in group.children.items():
        if is_reserved_key(key, child):
            continue

        current_path = _join(prefix, key)
        if isinstance(child, TokenLeaf):
            result.append(_entry_for_leaf(current_path, child, document))
        elif isinstance(child, TokenGroup):
            _flatten_group(child, document, current_path, result)


def flatten(
    subtree: TokenGroup | Mapping,
    document: TokenDocument | Mapping,
    prefix: str = "",
) -> list[CatalogEntry]:
    """
    Flatten a token subtree into catalog entries, depth-first in key order.

    References are resolved against the full document, never the subtree,
    because reference paths are always absolute.

    Args:
        subtree: Group to walk (a parsed group or a raw mapping)
        document: Full token document used as the reference root
        prefix: Dotted path of the subtree within the document

    Returns:
        One CatalogEntry per token leaf in the subtree
    """
    doc = TokenDocument.coerce(document)
    if not isinstance(subtree, TokenGroup):
        if not isinstance(subtree, Mapping):
            return []
        subtree = parse_node(subtree)
        if not isinstance(subtree, TokenGroup):
            return []

    result: list[CatalogEntry] = []
    _flatten_group(subtree, doc, prefix, result)
    logger.debug(f"Flattened {len(result)} tokens under '{prefix or '<root>'}'")
    return result
