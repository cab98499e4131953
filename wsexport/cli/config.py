"""Configuration management CLI commands."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

console = Console()

config_app = typer.Typer(help="Manage wsexport configuration")

LIST_KEYS = {"exclude_dirs"}


@config_app.command("show")
def config_show(
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.json"),
):
    """Show current configuration."""
    from wsexport.config import get_config_path, load_config

    path = config_path or get_config_path()
    config = load_config(path)

    console.print(f"[cyan]Configuration file:[/cyan] [dim]{path}[/dim]\n")
    console.print(f"[bold]Archive Name:[/bold] {config.archive_name}")
    console.print(f"[bold]Compression Level:[/bold] {config.compression_level}")

    if config.exclude_dirs:
        console.print(f"[bold]Excluded Directories ({len(config.exclude_dirs)}):[/bold]")
        for name in config.exclude_dirs:
            console.print(f"  {name}")
    else:
        console.print("[dim]No excluded directories[/dim]")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Setting name (archive_name, compression_level, exclude_dirs)"),
    value: str = typer.Argument(..., help="New value (comma-separated for exclude_dirs)"),
    config_path: Optional[Path] = typer.Option(None, "--config", help="Path to config.json"),
):
    """Set a configuration value.

    Examples:
        wsexport config set compression_level 6
        wsexport config set exclude_dirs node_modules,.git,dist
    """
    from wsexport.config import ExportConfig, get_config_path, update_config

    if key not in ExportConfig.model_fields:
        console.print(f"[red]Unknown setting:[/red] {key}")
        console.print(f"Available settings: {', '.join(ExportConfig.model_fields)}")
        raise typer.Exit(1)

    parsed = [part.strip() for part in value.split(",") if part.strip()] if key in LIST_KEYS else value
    path = config_path or get_config_path()

    try:
        update_config(path, lambda cfg: setattr(cfg, key, parsed))
    except ValidationError as e:
        console.print(f"[red]Invalid value for {key}:[/red] {e.errors()[0]['msg']}")
        raise typer.Exit(1)

    console.print(f"[green]✓ {key} set to:[/green] {value}")
    console.print(f"[dim]Saved to: {path}[/dim]")
