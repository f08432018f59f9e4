"""CLI entry point for the Token Picker.

Usage:
    token-picker categories tokens/ld-tokens.json
    token-picker categories tokens/ld-tokens.json --output json --save out/buckets.json
    token-picker resolve tokens/ld-tokens.json ld.color.brand.500
    token-picker list tokens/ld-tokens.json --search spacing
"""

import json
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ..catalog import TokenCatalog
from ..core.exceptions import CircularReferenceError, ConfigurationError, DocumentError
from ..core.types import TokenCategory
from ..output.formatters import JSONFormatter, TableFormatter
from ..resolution.document import load_document_file

# Initialize app
app = typer.Typer(
    name="token-picker",
    help="Resolve, flatten and categorize design-token documents",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_time=False, show_path=False)],
    )


def _load_catalog(
    tokens_file: Path,
    root: Optional[str],
    rules: Optional[Path],
) -> TokenCatalog:
    """Read the token file and build a catalog, exiting on bad input."""
    try:
        document = load_document_file(tokens_file)
    except DocumentError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1)

    try:
        return TokenCatalog(document, root_group=root, category_rules_path=rules)
    except ConfigurationError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1)


@app.command()
def categories(
    tokens_file: Path = typer.Argument(..., help="Token document (JSON)"),
    output: str = typer.Option(
        "table",
        "--output", "-o",
        help="Output format: table, json",
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root", "-r",
        help="Top-level token namespace (default: configured root group)",
    ),
    rules: Optional[Path] = typer.Option(
        None,
        "--rules",
        help="Path to category rules YAML file",
    ),
    save: Optional[Path] = typer.Option(
        None,
        "--save", "-s",
        help="Save output to file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Show the document's tokens grouped by category.

    Examples:
        token-picker categories ld-tokens.json
        token-picker categories ld-tokens.json --output json
    """
    setup_logging(verbose)

    catalog = _load_catalog(tokens_file, root, rules)
    buckets = catalog.get_categorized_tokens()

    output_lower = output.lower()
    formatter = JSONFormatter() if output_lower == "json" else TableFormatter()

    if output_lower == "json":
        print(formatter.format_buckets(buckets))
    else:
        tables = formatter.bucket_tables(buckets)
        if not tables:
            console.print("[yellow]No categorized tokens found[/]")
        for table in tables:
            console.print(table)

    if save:
        save.parent.mkdir(parents=True, exist_ok=True)
        save_path = save.with_suffix(".json" if output_lower == "json" else ".txt")
        formatter.format_to_file(buckets, str(save_path))
        err_console.print(f"[green]Saved to {escape(str(save_path))}[/]")


@app.command()
def resolve(
    tokens_file: Path = typer.Argument(..., help="Token document (JSON)"),
    token_path: str = typer.Argument(..., help="Dotted token path, e.g. ld.color.brand.500"),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    Resolve a single token path to its concrete value.
    """
    setup_logging(verbose)

    catalog = _load_catalog(tokens_file, None, None)
    try:
        value = catalog.resolve_path(token_path)
    except CircularReferenceError as e:
        err_console.print(f"[red]Error: {escape(e.message)}[/]")
        raise typer.Exit(1)

    if value is None:
        err_console.print(f"[red]Token value not found: {escape(token_path)}[/]")
        raise typer.Exit(1)

    print(value if isinstance(value, str) else json.dumps(value, default=str))


@app.command("list")
def list_tokens(
    tokens_file: Path = typer.Argument(..., help="Token document (JSON)"),
    search: Optional[str] = typer.Option(
        None,
        "--search", "-q",
        help="Only show tokens whose path contains this text",
    ),
    category: Optional[TokenCategory] = typer.Option(
        None,
        "--category", "-c",
        help="Only show tokens in this category",
    ),
    output: str = typer.Option(
        "table",
        "--output", "-o",
        help="Output format: table, json",
    ),
    root: Optional[str] = typer.Option(
        None,
        "--root", "-r",
        help="Top-level token namespace (default: configured root group)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose logging",
    ),
) -> None:
    """
    List the flattened token catalog.
    """
    setup_logging(verbose)

    catalog = _load_catalog(tokens_file, root, None)
    if search or category:
        entries = catalog.search(search or "", category=category)
    else:
        entries = catalog.entries()

    if output.lower() == "json":
        print(JSONFormatter().format_entries(entries))
    else:
        console.print(TableFormatter().entry_table(entries))


@app.command()
def version() -> None:
    """Show version information."""
    from .. import __version__
    console.print(f"Token Picker v{__version__}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
