"""Command line interface for htmlfinder."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from htmlfinder.config import DEFAULT_CONFIG_PATH, AppConfig, load_config
from htmlfinder.errors import FileSystemError, InvalidRangeConfig, ParseError
from htmlfinder.index.search import FileSearcher
from htmlfinder.index.tree import build_tree
from htmlfinder.models import PathTreeNode


console = Console()
app = typer.Typer(help="htmlfinder - full-text search over a folder of HTML files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _load(config_path: Path) -> AppConfig:
    try:
        return load_config(config_path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {config_path}") from exc
    except (InvalidRangeConfig, ValueError) as exc:
        raise typer.BadParameter(str(exc)) from exc


def _add_branch(branch: Tree, node: PathTreeNode) -> None:
    for child in node.children:
        if child.is_leaf:
            branch.add(f"[cyan]{escape(child.label)}[/cyan]")
        else:
            _add_branch(branch.add(f"[bold]{escape(child.label)}[/bold]"), child)


@app.command()
def serve(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="JSON config file"),
    host: Optional[str] = typer.Option(None, help="Host interface (overrides config)"),
    port: Optional[int] = typer.Option(None, help="Server port (overrides config)"),
    directory: Optional[Path] = typer.Option(None, help="Corpus directory (overrides config)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Start the web interface."""
    _setup_logging(verbose)
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter("uvicorn is not installed") from exc

    from htmlfinder.web.app import create_app

    try:
        config = _load(config_path).with_overrides(host=host, port=port, directory=directory)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc
    if not config.directory.is_dir():
        console.print(f"[yellow]Warning: corpus directory {config.directory} not found, searches will fail.[/yellow]")

    console.print(f"Listening on http://{config.host}:{config.port} (corpus: {config.directory})")
    uvicorn.run(
        create_app(config),
        host=config.host,
        port=config.port,
        log_level="debug" if verbose else "info",
    )


@app.command()
def search(
    query: str = typer.Argument(..., help="Text to look for (case-insensitive)"),
    directory: Optional[Path] = typer.Option(None, help="Corpus directory"),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="JSON config file"),
    strict: bool = typer.Option(False, "--strict", help="Abort on documents that fail to parse"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the corpus and print matching documents as a tree."""
    _setup_logging(verbose)
    if not query.strip():
        raise typer.BadParameter("Empty query")

    root_dir = directory if directory is not None else _load(config_path).directory
    searcher = FileSearcher(root_dir, skip_unparsable=not strict)
    try:
        result = searcher.search(query.strip())
    except (FileSystemError, ParseError) as exc:
        console.print(f"[red]Error searching files: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1)

    if not result:
        console.print("[yellow]No results found.[/yellow]")
        return

    tree = Tree(f"[bold]{escape(str(root_dir))}[/bold]")
    _add_branch(tree, build_tree(result.matches))
    console.print(tree)
    console.print(f"{len(result.matches)} of {result.scanned} documents matched")
    if result.skipped:
        console.print(f"[yellow]Skipped {len(result.skipped)} unparsable documents[/yellow]")


@app.command("check-config")
def check_config(
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", "-c", help="JSON config file"),
) -> None:
    """Validate the configuration file and print a summary."""
    config = _load(config_path)

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Setting")
    table.add_column("Value")
    table.add_row("host", config.host)
    table.add_row("port", str(config.port))
    table.add_row("directory", str(config.directory))
    table.add_row("allowed ranges", ", ".join(config.allowed_ranges) or "(none)")
    console.print(table)
