"""Core module - data models, types, and exceptions."""

from .models import (
    CatalogEntry,
    CategoryBuckets,
    RGBAColor,
    SolidPaint,
    LineHeight,
    PropertyPatch,
    ApplyFailure,
    ApplyResult,
)
from .types import (
    TokenCategory,
    ApplyErrorKind,
)
from .exceptions import (
    TokenPickerError,
    CircularReferenceError,
    DocumentError,
    ConfigurationError,
)

__all__ = [
    # Models
    "CatalogEntry",
    "CategoryBuckets",
    "RGBAColor",
    "SolidPaint",
    "LineHeight",
    "PropertyPatch",
    "ApplyFailure",
    "ApplyResult",
    # Types
    "TokenCategory",
    "ApplyErrorKind",
    # Exceptions
    "TokenPickerError",
    "CircularReferenceError",
    "DocumentError",
    "ConfigurationError",
]
