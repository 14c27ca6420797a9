"""
apidocx CLI - API documentation to Word document generator

A command-line tool for turning a documentation tree into a styled .docx:
1. Load the tree from JSON (or introspect an importable Python package)
2. Lay out cover page, package chapters, class pages and member blocks
3. Write the document with python-docx
"""

import logging
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv, find_dotenv
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from apidocx import __version__
from apidocx.config import ENV_PREFIX, BuildOptions
from apidocx.layout import run_build
from apidocx.providers import TreeLoadError, dump_tree, introspect_package, load_tree

load_dotenv(find_dotenv(usecwd=True))

app = typer.Typer(
    name="apidocx",
    help="API documentation to Word document generator",
    add_completion=False,
)

console = Console()


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def build(
    tree_path: Optional[Path] = typer.Argument(None, help="Documentation tree JSON file"),
    module: Optional[str] = typer.Option(
        None,
        "--module",
        "-m",
        help="Introspect an importable Python package instead of reading a tree file",
    ),
    file: Optional[Path] = typer.Option(None, "--file", "-f", envvar="APIDOCX_FILE", help="Output file (default: document.docx)"),
    font1: Optional[str] = typer.Option(None, "--font1", envvar="APIDOCX_FONT1", help="Body font family"),
    font2: Optional[str] = typer.Option(None, "--font2", envvar="APIDOCX_FONT2", help="Font family for inline-tagged terms"),
    title: Optional[str] = typer.Option(None, "--title", envvar="APIDOCX_TITLE", help="Document title"),
    subtitle: Optional[str] = typer.Option(None, "--subtitle", envvar="APIDOCX_SUBTITLE", help="Document subtitle"),
    version: Optional[str] = typer.Option(None, "--version", envvar="APIDOCX_VERSION", help="Version string on the cover"),
    company: Optional[str] = typer.Option(None, "--company", envvar="APIDOCX_COMPANY", help="Organization on the cover"),
    copyright: Optional[str] = typer.Option(None, "--copyright", envvar="APIDOCX_COPYRIGHT", help="Footer text"),
    locale: Optional[str] = typer.Option(None, "--locale", envvar="APIDOCX_LOCALE", help="Label language: ja or en"),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
):
    """
    Build a Word document from a documentation tree.

    Example:
        apidocx build tree.json --file api.docx --title "Acme API" --version 1.2

    Example (Python package):
        apidocx build --module acme --locale en --file acme.docx
    """
    _setup_logging(log_level)

    if (tree_path is None) == (module is None):
        console.print("[red]❌ Provide either a tree file or --module[/red]")
        raise typer.Exit(2)

    try:
        options = BuildOptions(**{
            name: value for name, value in {
                "file": file,
                "font1": font1,
                "font2": font2,
                "title": title,
                "subtitle": subtitle,
                "version": version,
                "company": company,
                "copyright": copyright,
                "locale": locale,
            }.items() if value is not None
        })
    except ValueError as e:
        console.print(f"[red]❌ Invalid options: {escape(str(e))}[/red]")
        raise typer.Exit(2)

    try:
        tree = load_tree(tree_path) if tree_path is not None else introspect_package(module)
    except (TreeLoadError, ImportError) as e:
        console.print(f"[red]❌ Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print(Panel.fit(
        "[bold cyan]apidocx[/bold cyan]\n\n"
        f"Source: [yellow]{tree_path or module}[/yellow]\n"
        f"Packages: [yellow]{len(tree.packages)}[/yellow]  Classes: [yellow]{len(tree.classes)}[/yellow]\n"
        f"Output: [yellow]{options.file}[/yellow]",
        border_style="cyan"
    ))

    if not run_build(tree, options):
        console.print("\n[red]❌ Document build failed (see log above)[/red]")
        raise typer.Exit(1)

    console.print(f"\n[bold green]✓ Document written:[/bold green] [cyan]{options.file}[/cyan]")


@app.command()
def introspect(
    module: str = typer.Argument(..., help="Importable Python package or module"),
    output: Path = typer.Option(Path("tree.json"), "--output", "-o", help="Tree JSON output path"),
    max_depth: int = typer.Option(3, "--max-depth", help="Maximum submodule depth"),
):
    """Introspect a Python package and save its documentation tree as JSON."""
    try:
        tree = introspect_package(module, max_depth=max_depth)
    except ImportError as e:
        console.print(f"[red]❌ Cannot import {module}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    dump_tree(tree, output)
    console.print(f"[bold green]✓[/bold green] {len(tree.packages)} packages, {len(tree.classes)} classes → [cyan]{output}[/cyan]")


@app.command()
def options():
    """List the supported build options and their defaults."""
    table = Table(title="Build options")
    table.add_column("Option", style="cyan")
    table.add_column("Environment", style="magenta")
    table.add_column("Default")
    table.add_column("Description")
    for name, info in BuildOptions.model_fields.items():
        table.add_row(f"-{name}", f"{ENV_PREFIX}{name.upper()}", str(info.default), info.description or "")
    console.print(table)


@app.command("version")
def show_version():
    """Show the version of apidocx."""
    console.print(f"[bold cyan]apidocx[/bold cyan] v{__version__}")
    console.print("API documentation to Word document generator")


def main():
    app()


if __name__ == "__main__":
    main()
