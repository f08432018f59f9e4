"""Token categorizer - sorts catalog entries into category buckets.

Classification goes by lexical path convention rather than a closed type
enum: token authors follow naming conventions loosely, so a path such as
"ld.layout.spacing.radius.200" is enough to place a token. Only the color
bucket looks at the declared token type.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ..core.exceptions import ConfigurationError
from ..core.models import CatalogEntry, CategoryBuckets
from ..core.types import TokenCategory

logger = logging.getLogger(__name__)


# Default category rules (used if no config file provided)
DEFAULT_CATEGORY_RULES: dict[str, dict[str, Any]] = {
    "colors": {
        "types": ["color"],
    },
    "spacing": {
        "path_contains": ["spacing"],
        "path_excludes": ["radius"],
    },
    "border_radius": {
        "path_contains": ["radius", "borderRadius"],
    },
    "typography": {
        "path_contains": ["font"],
    },
    "effects": {
        "path_contains": ["shadow", "effect"],
    },
}


def _string_list(category: str, key: str, raw: Any) -> tuple[str, ...]:
    if raw is None:
        return ()
    if isinstance(raw, str):
        return (raw,)
    if not isinstance(raw, list) or not all(isinstance(item, str) for item in raw):
        raise ConfigurationError(f"{category}.{key}", "expected a list of strings")
    return tuple(raw)


@dataclass(frozen=True)
class CategoryRule:
    """Membership test for one bucket.

    An entry matches when its type is listed in ``types`` or its path
    contains one of ``path_contains``, and its path contains none of
    ``path_excludes``. Substring tests are case-sensitive.
    """

    category: TokenCategory
    types: tuple[str, ...] = ()
    path_contains: tuple[str, ...] = ()
    path_excludes: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, category: TokenCategory, raw: Any) -> "CategoryRule":
        if not isinstance(raw, dict):
            raise ConfigurationError(category.value, "rule must be a mapping")
        return cls(
            category=category,
            types=_string_list(category.value, "types", raw.get("types")),
            path_contains=_string_list(category.value, "path_contains", raw.get("path_contains")),
            path_excludes=_string_list(category.value, "path_excludes", raw.get("path_excludes")),
        )

    def matches(self, entry: CatalogEntry) -> bool:
        included = entry.type in self.types or any(
            needle in entry.path for needle in self.path_contains
        )
        if not included:
            return False
        return not any(needle in entry.path for needle in self.path_excludes)


def build_rules(raw_rules: dict[str, Any]) -> list[CategoryRule]:
    """Turn a rules mapping into CategoryRule objects, in category order."""
    rules = []
    for name, raw in raw_rules.items():
        try:
            category = TokenCategory(name)
        except ValueError:
            logger.warning(f"Unknown token category '{name}' in rules, ignoring")
            continue
        rules.append(CategoryRule.from_dict(category, raw))

    order = list(TokenCategory)
    rules.sort(key=lambda rule: order.index(rule.category))
    return rules


DEFAULT_RULES = build_rules(DEFAULT_CATEGORY_RULES)


def classify_entry(
    entry: CatalogEntry,
    rules: Iterable[CategoryRule] = DEFAULT_RULES,
) -> list[TokenCategory]:
    """
    Classify a single entry.

    Each rule is evaluated independently, so an entry can land in zero,
    one or several buckets (e.g. a color token under "shadow").

    Args:
        entry: Catalog entry to classify
        rules: Category rules to apply

    Returns:
        Matching categories, in bucket order
    """
    return [rule.category for rule in rules if rule.matches(entry)]


def categorize(
    catalog: Iterable[CatalogEntry] | None,
    rules: Iterable[CategoryRule] = DEFAULT_RULES,
) -> CategoryBuckets:
    """
    Partition a catalog into category buckets, preserving catalog order.

    Args:
        catalog: Flattened catalog entries (None is treated as empty)
        rules: Category rules to apply

    Returns:
        CategoryBuckets with every bucket present (possibly empty)
    """
    rules = list(rules)
    buckets: dict[TokenCategory, list[CatalogEntry]] = {
        category: [] for category in TokenCategory
    }

    for entry in catalog or []:
        for category in classify_entry(entry, rules):
            buckets[category].append(entry)

    return CategoryBuckets(
        **{category.value: entries for category, entries in buckets.items()}
    )


class TokenCategorizer:
    """Categorizes catalogs with default or file-configured rules."""

    def __init__(self, config_path: Path | str | None = None):
        """
        Initialize the categorizer.

        Args:
            config_path: Path to YAML file with category rules.
                If None, uses default rules.
        """
        self.raw_rules: dict[str, Any] = DEFAULT_CATEGORY_RULES
        if config_path:
            self._load_config(Path(config_path))
        self.rules = build_rules(self.raw_rules)

    def _load_config(self, config_path: Path) -> None:
        """Load category rules from YAML config."""
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}

            if isinstance(config, dict) and "categories" in config:
                self.raw_rules = config["categories"]
                logger.info(f"Loaded category rules from {config_path}")
            else:
                logger.warning(f"No 'categories' in {config_path}, using defaults")

        except FileNotFoundError:
            logger.warning(f"Config file not found: {config_path}, using defaults")
        except yaml.YAMLError as e:
            logger.error(f"Invalid YAML in {config_path}: {e}")

        if not isinstance(self.raw_rules, dict):
            raise ConfigurationError("categories", "must be a mapping of category to rule")

    def classify(self, entry: CatalogEntry) -> list[TokenCategory]:
        """Classify a single entry with this categorizer's rules."""
        return classify_entry(entry, self.rules)

    def categorize(self, catalog: Iterable[CatalogEntry] | None) -> CategoryBuckets:
        """Partition a catalog with this categorizer's rules."""
        return categorize(catalog, self.rules)
