"""wsexport CLI application - main entry point."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from wsexport.exceptions import ExportError
from wsexport.models import ExportResult

app = typer.Typer(
    name="wsexport",
    help="Export a project workspace into a single ZIP archive",
    no_args_is_help=True,
)

console = Console()


def _configure_logging(verbose: bool, debug: bool) -> None:
    if debug:
        logging.getLogger("wsexport").setLevel(logging.DEBUG)
    elif verbose:
        logging.getLogger("wsexport").setLevel(logging.INFO)


def _format_size(size: int) -> str:
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"


def _print_failures(result: ExportResult) -> None:
    table = Table(title="Skipped Files")
    table.add_column("Path", style="cyan")
    table.add_column("Error", style="red")

    for failure in result.failures:
        table.add_row(failure.path, failure.message)

    console.print(table)


@app.command("export")
def export_command(
    root: Path = typer.Argument(Path("."), help="Workspace directory to export"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Archive file or directory to write to"),
    exclude: Optional[List[str]] = typer.Option(
        None, "--exclude", "-x", help="Directory name to skip (repeatable, replaces the configured list)"
    ),
    level: Optional[int] = typer.Option(None, "--level", "-l", min=0, max=9, help="Deflate compression level"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.json"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress"),
    debug: bool = typer.Option(False, "--debug", help="Log every directory and file"),
):
    """Export a workspace directory to a ZIP archive."""
    from wsexport.config import load_config
    from wsexport.export import archive_path, export_workspace_sync, save_archive
    from wsexport.fs import LocalWorkspace

    _configure_logging(verbose, debug)

    config = load_config(config_path)
    if exclude:
        config.exclude_dirs = list(exclude)
    if level is not None:
        config.compression_level = level

    destination = archive_path(output if output is not None else Path.cwd(), config.archive_name)

    # Keep the archive out of the tree it is exported from
    archive_in_tree = LocalWorkspace(root).relative_path(destination)
    workspace = LocalWorkspace(root, ignore_paths=[archive_in_tree] if archive_in_tree else None)

    try:
        result = export_workspace_sync(workspace, config)
    except ExportError as e:
        console.print(f"[red]Export failed:[/red] {e}")
        raise typer.Exit(1)

    try:
        written = save_archive(result, destination, config.archive_name)
    except OSError as e:
        console.print(f"[red]Failed to write archive:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] Exported {workspace.workdir}")
    console.print(f"  Archive: {written} ({_format_size(result.size)})")

    if not result.complete:
        console.print(f"\n[yellow]Warning: {len(result.failures)} file(s) could not be read and were skipped[/yellow]")
        _print_failures(result)


@app.command()
def version():
    """Show version information."""
    from wsexport import __version__

    console.print(f"wsexport version {__version__}")


from .config import config_app  # noqa: E402

app.add_typer(config_app, name="config")


def main():
    app()
