"""Typer-based CLI for graphscan."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__, config_manager
from .graph_export import EXPORT_FORMATS, default_export_name, export_dot, export_json, to_dot
from .graph_io import GraphFormatError, dumps_graph, load_graph
from .models import EdgeType, Graph, NodeType
from .samples import sample_graph
from .scanner import ScanResult, scan_directory

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="🕸️  graphscan: derive a 3D-renderable dependency graph from source code.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

config_app = typer.Typer(
    help="⚙️  Configuration: scan defaults stored in config.toml.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
app.add_typer(config_app, name="config")


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        typer.echo(f"graphscan v{__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log unresolved imports and skipped files."),
):
    """graphscan: heuristic import and route scanner for codebases."""
    setup_logging(verbose)


def _counts_table(title: str, counts: dict, kinds) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Type")
    table.add_column("Count", justify="right")
    for kind in kinds:
        count = counts.get(kind.value, 0)
        if count:
            table.add_row(f"[{kind.color}]●[/] {kind.label}", str(count))
    return table


def _print_summary(graph: Graph) -> None:
    counts = graph.count_by_type()
    console.print(_counts_table("Nodes", counts["nodes"], NodeType))
    console.print(_counts_table("Edges", counts["edges"], EdgeType))


def _write_output(graph: Graph, fmt: str, output: Path) -> None:
    if output.is_dir():
        output = output / default_export_name(fmt)
    if fmt == "dot":
        export_dot(graph, output)
    else:
        export_json(graph, output)
    console.print(f"[green]✓[/green] Graph written to {escape(str(output))}")


@app.command("scan")
def scan(
    folder: Path = typer.Argument(..., exists=True, file_okay=False, help="Folder to scan."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the graph to this file (or a timestamped file in this directory) instead of stdout."),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or dot."),
    workers: Optional[int] = typer.Option(None, "--workers", "-w", min=1, max=64, help="Concurrent file reads."),
    ext: Optional[List[str]] = typer.Option(None, "--ext", "-e", help="Extension to accept (repeatable)."),
):
    """Scan a folder for imports, routes and DB calls."""
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise typer.BadParameter("Format must be one of: json, dot")

    settings = config_manager.load_scan_config()
    extensions = set(config_manager.normalize_extensions(ext)) if ext else set(settings["extensions"])

    result: ScanResult = scan_directory(
        folder,
        extensions=extensions,
        skip_dirs=frozenset(settings["skip_dirs"]),
        max_workers=workers or settings["max_workers"],
    )

    for warning in result.warnings:
        err_console.print(f"[yellow]⚠[/yellow] Skipped {escape(warning.path)}: {escape(warning.reason)}")

    if result.is_empty:
        console.print("No code files found in the selected folder.")
        raise typer.Exit(code=0)

    if output is not None:
        _write_output(result.graph, fmt, output)
        console.print(
            f"Scanned: {result.files_accepted} files | "
            f"Nodes: {len(result.graph.nodes)} | Edges: {len(result.graph.edges)}"
        )
        _print_summary(result.graph)
    else:
        typer.echo(to_dot(result.graph) if fmt == "dot" else dumps_graph(result.graph))


@app.command("inspect")
def inspect_graph(
    graph_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Graph JSON to validate."),
):
    """Validate an externally supplied graph JSON and summarize it."""
    try:
        graph = load_graph(graph_file)
    except GraphFormatError as exc:
        err_console.print(f"[red]✗[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"Loaded: {escape(graph_file.name)} | Nodes: {len(graph.nodes)} | Edges: {len(graph.edges)}")
    dangling = graph.dangling_edges()
    if dangling:
        console.print(f"[yellow]⚠[/yellow] {len(dangling)} edge(s) reference unknown nodes and will not be drawn")
    _print_summary(graph)


@app.command("sample")
def sample(
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the demo graph to this file."),
    fmt: str = typer.Option("json", "--format", "-f", help="Output format: json or dot."),
):
    """Emit the demo graph."""
    fmt = fmt.lower()
    if fmt not in EXPORT_FORMATS:
        raise typer.BadParameter("Format must be one of: json, dot")

    graph = sample_graph()
    if output is not None:
        _write_output(graph, fmt, output)
    else:
        typer.echo(to_dot(graph) if fmt == "dot" else dumps_graph(graph))


@config_app.command("show")
def config_show():
    """Show effective scan settings."""
    settings = config_manager.load_scan_config()
    table = Table(title="Scan settings", show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Value")
    table.add_row("max_workers", str(settings["max_workers"]))
    table.add_row("extensions", ", ".join(settings["extensions"]))
    table.add_row("skip_dirs", ", ".join(settings["skip_dirs"]))
    console.print(table)


@config_app.command("set-workers")
def config_set_workers(
    workers: int = typer.Argument(..., min=1, max=64, help="Concurrent file reads."),
):
    """Set the default number of concurrent file reads."""
    if not config_manager.save_scan_config(max_workers=workers):
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] max_workers = {workers}")


@config_app.command("set-extensions")
def config_set_extensions(
    extensions: List[str] = typer.Argument(..., help="Extensions to accept, e.g. js ts py."),
):
    """Replace the accepted extension list."""
    normalized = config_manager.normalize_extensions(extensions)
    if not normalized:
        raise typer.BadParameter("At least one extension is required")
    if not config_manager.save_scan_config(extensions=normalized):
        raise typer.Exit(code=1)
    console.print(f"[green]✓[/green] extensions = {', '.join(normalized)}")


@config_app.command("reset")
def config_reset():
    """Forget saved scan settings and go back to defaults."""
    if not config_manager.clear_scan_config():
        raise typer.Exit(code=1)
    console.print("[green]✓[/green] Scan settings reset to defaults")


if __name__ == "__main__":
    app()
