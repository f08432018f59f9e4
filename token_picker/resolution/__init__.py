"""Token resolution module - resolves references and flattens token trees."""

from .document import TokenDocument, TokenGroup, TokenLeaf, load_document_file
from .flattener import flatten
from .reference_resolver import is_reference, lookup, resolve

__all__ = [
    "TokenDocument",
    "TokenGroup",
    "TokenLeaf",
    "load_document_file",
    "flatten",
    "is_reference",
    "lookup",
    "resolve",
]
