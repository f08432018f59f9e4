"""Token catalog - the query interface handed to the host layer.

A TokenCatalog owns exactly one loaded token document. Callers construct
it, load a document into it and keep it for as long as they need it;
there is no process-wide "current document".
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .categorizer.categorizer import TokenCategorizer
from .core.config import PickerConfig, get_config
from .core.models import CatalogEntry, CategoryBuckets
from .core.types import ResolvedValue, TokenCategory
from .resolution.document import TokenDocument
from .resolution.flattener import flatten
from .resolution.reference_resolver import lookup

logger = logging.getLogger(__name__)


class TokenCatalog:
    """Resolves, flattens and categorizes one token document."""

    def __init__(
        self,
        document: TokenDocument | Mapping | None = None,
        root_group: str | None = None,
        category_rules_path: Path | str | None = None,
        config: PickerConfig | None = None,
    ):
        """
        Initialize the catalog.

        Args:
            document: Token document to load right away (optional)
            root_group: Top-level namespace holding the tokens ("" for the
                whole document). Defaults to the configured root group.
            category_rules_path: YAML category rules. Defaults to the
                configured rules file, or the built-in rules.
            config: Configuration to use instead of the global one
        """
        config = config or get_config()
        self.root_group = root_group if root_group is not None else config.root_group
        self.categorizer = TokenCategorizer(
            config_path=category_rules_path or config.category_rules_path
        )
        self._document: TokenDocument | None = None

        if document is not None:
            self.load_document(document)

    @property
    def document(self) -> TokenDocument | None:
        return self._document

    @property
    def is_loaded(self) -> bool:
        """Check if a document has been loaded."""
        return self._document is not None

    def load_document(self, document: TokenDocument | Mapping | Any) -> None:
        """
        Replace the document used by subsequent queries.

        Anything that is not a mapping is kept as a malformed document:
        it counts as loaded, but every query on it comes back empty.
        """
        if document is None:
            self._document = None
            logger.info("Token document unloaded")
            return

        self._document = TokenDocument.coerce(document)
        logger.info(f"Loaded token document: {self._document!r}")

    def entries(self) -> list[CatalogEntry]:
        """
        Flatten the root namespace into catalog entries.

        Entry paths include the namespace, so every path can be handed
        straight back to resolve_path(). Nothing is cached; each call
        walks the document again.
        """
        if self._document is None:
            return []

        group = self._document.group(self.root_group)
        if group is None:
            logger.debug(f"Root group '{self.root_group}' not found in token document")
            return []

        return flatten(group, self._document, prefix=self.root_group)

    def get_categorized_tokens(self) -> CategoryBuckets:
        """Get the current document's tokens grouped by category."""
        return self.categorizer.categorize(self.entries())

    def resolve_path(self, path: str) -> ResolvedValue:
        """
        Resolve one dotted token path against the loaded document.

        Args:
            path: Dotted path from the document root, e.g. "ld.color.brand.500"

        Returns:
            The resolved value, or None if nothing is loaded or the path
            does not resolve

        Raises:
            CircularReferenceError: If the token's reference chain loops
        """
        if self._document is None:
            return None
        return lookup(path, self._document)

    def find(self, path: str) -> CatalogEntry | None:
        """Get the catalog entry for an exact path."""
        for entry in self.entries():
            if entry.path == path:
                return entry
        return None

    def search(
        self,
        query: str,
        category: TokenCategory | None = None,
    ) -> list[CatalogEntry]:
        """
        Search the catalog by path, case-insensitively.

        Args:
            query: Text to look for in token paths
            category: Restrict the search to one category bucket

        Returns:
            Matching entries in catalog order
        """
        if category is not None:
            candidates = self.get_categorized_tokens().get(category)
        else:
            candidates = self.entries()

        needle = query.strip().lower()
        return [entry for entry in candidates if needle in entry.path.lower()]
