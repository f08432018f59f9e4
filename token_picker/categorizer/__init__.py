"""Token categorization module.

Sorts flattened tokens into category buckets using configurable rules.
"""

from .categorizer import (
    DEFAULT_CATEGORY_RULES,
    CategoryRule,
    TokenCategorizer,
    build_rules,
    categorize,
    classify_entry,
)

__all__ = [
    "DEFAULT_CATEGORY_RULES",
    "CategoryRule",
    "TokenCategorizer",
    "build_rules",
    "categorize",
    "classify_entry",
]
