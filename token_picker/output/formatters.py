"""Output formatters for token catalogs.

Provides two output formats:
- JSON: Machine-readable, bucket names as the host UI expects them
- Table: Human-readable CLI output
"""

import json
import logging
from abc import ABC, abstractmethod
from io import StringIO
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..core.models import CatalogEntry, CategoryBuckets
from ..core.types import TokenCategory

logger = logging.getLogger(__name__)


def display_value(value: Any) -> str:
    """Render a resolved value for a table cell."""
    if value is None:
        return "(unresolved)"
    if isinstance(value, (dict, list)):
        return json.dumps(value, default=str, separators=(",", ":"))
    return str(value)


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format_buckets(self, buckets: CategoryBuckets) -> str:
        """Format category buckets as a string."""
        pass

    @abstractmethod
    def format_entries(self, entries: list[CatalogEntry]) -> str:
        """Format a flat list of catalog entries as a string."""
        pass

    def format_to_file(self, buckets: CategoryBuckets, filepath: str) -> None:
        """Write formatted buckets to a file."""
        with open(filepath, "w", encoding="utf-8") as f:
            f.write(self.format_buckets(buckets))


class JSONFormatter(OutputFormatter):
    """Formats catalogs as JSON."""

    def __init__(self, indent: int = 2):
        """
        Initialize JSON formatter.

        Args:
            indent: JSON indentation level
        """
        self.indent = indent

    def format_buckets(self, buckets: CategoryBuckets) -> str:
        return json.dumps(buckets.to_host_dict(), default=str, indent=self.indent)

    def format_entries(self, entries: list[CatalogEntry]) -> str:
        data = [entry.model_dump(mode="json") for entry in entries]
        return json.dumps(data, default=str, indent=self.indent)


class TableFormatter(OutputFormatter):
    """Formats catalogs as rich tables."""

    def __init__(self, width: int = 100, force_terminal: bool = False):
        """
        Initialize table formatter.

        Args:
            width: Console width used when rendering to a string
            force_terminal: Keep ANSI styling in rendered strings
        """
        self.width = width
        self.force_terminal = force_terminal

    def _entry_table(self, title: str, entries: list[CatalogEntry]) -> Table:
        table = Table(title=title)
        table.add_column("Path", style="cyan", overflow="fold")
        table.add_column("Value", style="green", overflow="fold")
        table.add_column("Type", style="dim")

        for entry in entries:
            value = escape(display_value(entry.value))
            if not entry.is_resolved:
                value = f"[yellow]{value}[/]"
            table.add_row(escape(entry.path), value, escape(entry.type))
        return table

    def bucket_tables(self, buckets: CategoryBuckets) -> list[Table]:
        """Build one table per non-empty category."""
        tables = []
        for category in TokenCategory:
            entries = buckets.get(category)
            if entries:
                tables.append(
                    self._entry_table(f"{category.display_name} ({len(entries)})", entries)
                )
        return tables

    def entry_table(self, entries: list[CatalogEntry]) -> Table:
        return self._entry_table(f"Tokens ({len(entries)})", entries)

    def _render(self, *renderables: Any) -> str:
        output = StringIO()
        console = Console(file=output, force_terminal=self.force_terminal, width=self.width)
        for renderable in renderables:
            console.print(renderable)
        return output.getvalue()

    def format_buckets(self, buckets: CategoryBuckets) -> str:
        tables = self.bucket_tables(buckets)
        if not tables:
            return self._render("[dim]No categorized tokens[/]")
        return self._render(*tables)

    def format_entries(self, entries: list[CatalogEntry]) -> str:
        return self._render(self.entry_table(entries))
