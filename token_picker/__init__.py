"""Token Picker - design-token resolution engine.

Resolves hierarchical design-token documents ("{group.path}" references
included) into concrete values, flattens them into a searchable catalog
and sorts the catalog into categories for a design-tool plugin.
"""

__version__ = "0.1.0"

from .catalog import TokenCatalog
from .categorizer import categorize, classify_entry
from .resolution import TokenDocument, flatten, lookup, resolve

__all__ = [
    "TokenCatalog",
    "TokenDocument",
    "categorize",
    "classify_entry",
    "flatten",
    "lookup",
    "resolve",
]
