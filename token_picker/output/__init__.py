"""Output formatting module."""

from .formatters import OutputFormatter, JSONFormatter, TableFormatter, display_value

__all__ = [
    "OutputFormatter",
    "JSONFormatter",
    "TableFormatter",
    "display_value",
]
