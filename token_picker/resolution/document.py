"""Token document model - a tagged tree over the raw token JSON.

A raw document is parsed once into TokenGroup / TokenLeaf nodes so that the
resolver and the flattener can dispatch on node kind instead of probing
mappings for reserved keys. Scalars sitting directly inside a group (for
example a group-level "$description") are kept as they are.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import DocumentError
from ..core.types import TYPE_KEYS, UNKNOWN_TYPE, VALUE_KEYS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenLeaf:
    """A token: a mapping carrying a value key."""

    value: Any
    type: str | None = None
    value_key: str = "$value"
    type_key: str | None = None
    extras: Mapping[str, Any] = field(default_factory=dict)

    @property
    def type_or_unknown(self) -> str:
        return self.type if isinstance(self.type, str) and self.type else UNKNOWN_TYPE

    def child(self, key: str) -> Any:
        """Step into one of the leaf's own keys (e.g. "$value")."""
        if key == self.value_key:
            return self.value
        if self.type_key is not None and key == self.type_key:
            return self.type
        if key in self.extras:
            return self.extras[key]
        raise KeyError(key)


@dataclass(frozen=True)
class TokenGroup:
    """An intermediate grouping node: a mapping without a value key."""

    children: Mapping[str, "TokenNode"]
    raw: Mapping[str, Any] = field(default_factory=dict, repr=False)

    def child(self, key: str) -> "TokenNode":
        return self.children[key]


TokenNode = Union[TokenLeaf, TokenGroup, Any]


def is_leaf_mapping(raw: Any) -> bool:
    """Check if a raw mapping is a token leaf (has a value key)."""
    return isinstance(raw, Mapping) and any(key in raw for key in VALUE_KEYS)


def parse_node(raw: Any) -> TokenNode:
    """Parse a raw JSON value into a token tree node."""
    if not isinstance(raw, Mapping):
        return raw

    if is_leaf_mapping(raw):
        value_key = next(key for key in VALUE_KEYS if key in raw)
        type_key = next((key for key in TYPE_KEYS if key in raw), None)
        extras = {
            key: value
            for key, value in raw.items()
            if key != value_key and key != type_key
        }
        return TokenLeaf(
            value=raw[value_key],
            type=raw[type_key] if type_key else None,
            value_key=value_key,
            type_key=type_key,
            extras=extras,
        )

    return TokenGroup(
        children={str(key): parse_node(value) for key, value in raw.items()},
        raw=raw,
    )


def step(node: TokenNode, key: str) -> TokenNode:
    """
    Descend one path segment.

    Raises:
        KeyError: If the node cannot be descended into with this key
    """
    if isinstance(node, (TokenGroup, TokenLeaf)):
        return node.child(key)
    if isinstance(node, Mapping):
        # Raw mapping nested inside a composite token value
        return node[key]
    raise KeyError(key)


class TokenDocument:
    """A parsed, read-only token document.

    A document built from something other than a mapping is kept as
    malformed: walks over it fail and every derived view is empty.
    """

    def __init__(self, raw: Any):
        self.raw = raw
        self.is_malformed = not isinstance(raw, Mapping)
        if self.is_malformed:
            logger.warning(
                f"Token document is not an object ({type(raw).__name__}), treating as empty"
            )
            self.root = TokenGroup(children={})
        else:
            self.root = parse_node(raw)
            if isinstance(self.root, TokenLeaf):
                # A document that is itself a single leaf has no addressable tokens
                self.root = TokenGroup(children={}, raw=raw)

    @classmethod
    def coerce(cls, document: Any) -> "TokenDocument":
        """Accept either a parsed document or a raw mapping."""
        if isinstance(document, TokenDocument):
            return document
        return cls(document)

    def walk(self, segments: list[str]) -> TokenNode:
        """
        Walk from the root, one key per segment.

        Raises:
            KeyError: At the first segment that cannot be followed
        """
        node: TokenNode = self.root
        for segment in segments:
            node = step(node, segment)
        return node

    def group(self, path: str) -> TokenGroup | None:
        """Get the group at a dotted path, or None if there is none."""
        if not path:
            return self.root
        try:
            node = self.walk(path.split("."))
        except KeyError:
            return None
        return node if isinstance(node, TokenGroup) else None

    def __repr__(self) -> str:
        return f"TokenDocument(groups={len(self.root.children)}, malformed={self.is_malformed})"


def load_document_file(path: Path | str) -> TokenDocument:
    """
    Read a token document from a JSON file.

    Args:
        path: Path to a JSON token file

    Returns:
        Parsed TokenDocument

    Raises:
        DocumentError: If the file is missing, is not JSON, or is not an object
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except FileNotFoundError:
        raise DocumentError(str(path), "file not found")
    except json.JSONDecodeError as e:
        raise DocumentError(str(path), f"invalid JSON: {e}")

    if not isinstance(raw, Mapping):
        raise DocumentError(str(path), "top-level JSON value must be an object")

    logger.info(f"Loaded token document from {path}")
    return TokenDocument(raw)
