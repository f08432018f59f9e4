"""Type definitions and enums for the token picker."""

from enum import Enum
from typing import Any


class TokenCategory(str, Enum):
    """Buckets a flattened token can be sorted into."""

    COLORS = "colors"
    SPACING = "spacing"
    BORDER_RADIUS = "border_radius"
    TYPOGRAPHY = "typography"
    EFFECTS = "effects"

    @property
    def display_name(self) -> str:
        """Human-readable display name."""
        names = {
            self.COLORS: "Colors",
            self.SPACING: "Spacing",
            self.BORDER_RADIUS: "Border Radius",
            self.TYPOGRAPHY: "Typography",
            self.EFFECTS: "Effects",
        }
        return names.get(self, self.value)


class ApplyErrorKind(str, Enum):
    """Reasons an apply action can be rejected before touching any target."""

    NO_TARGET_SELECTED = "no_target_selected"
    NO_TOKEN_SPECIFIED = "no_token_specified"
    DOCUMENT_NOT_LOADED = "document_not_loaded"
    TOKEN_NOT_FOUND = "token_not_found"

    @property
    def message(self) -> str:
        """User-facing message for the host layer."""
        messages = {
            self.NO_TARGET_SELECTED: "Please select a component or frame first",
            self.NO_TOKEN_SPECIFIED: "No token selected",
            self.DOCUMENT_NOT_LOADED: "Tokens not loaded",
            self.TOKEN_NOT_FOUND: "Token value not found",
        }
        return messages[self]


# Reserved keys of a token leaf (DTCG first, legacy second)
VALUE_KEYS = ("$value", "value")
TYPE_KEYS = ("$type", "type")
UNKNOWN_TYPE = "unknown"

# Type aliases for common patterns
TokenPath = str      # Dotted path from the document root, e.g. "ld.color.brand.500"
ResolvedValue = Any  # Scalar, a raw group mapping, or None

