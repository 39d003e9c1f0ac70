"""Configuration commands.

Provides commands to show the effective scratch configuration and to
write a config file.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.table import Table

from scratchkeep.cli.types import get_config
from scratchkeep.core.config import ScratchConfig, ScratchConfigError, save_config
from scratchkeep.core.paths import get_config_path
from scratchkeep.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or create the scratch root configuration.",
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration and scratch roots."""
    config = get_config(ctx)

    table = Table(title="Scratch Configuration", show_lines=False)
    table.add_column("Setting", style="bold")
    table.add_column("Value")

    tenant_temp = config.tenant_temp_path
    table.add_row("app_root", str(config.app_root))
    table.add_row("temp_directory", str(config.temp_directory))
    table.add_row("tenant_path", str(config.tenant_path) if config.tenant_path else "-")
    table.add_row("global scratch root", str(config.global_temp_path))
    table.add_row("tenant scratch root", str(tenant_temp) if tenant_temp else "-")

    console.print(table)


@app.command()
def init(
    ctx: typer.Context,
    app_root: Annotated[
        Path | None,
        typer.Option("--app-root", help="Application root (default: current directory)."),
    ] = None,
    temp_directory: Annotated[
        Path | None,
        typer.Option("--temp-directory", help="Global scratch root."),
    ] = None,
    tenant_path: Annotated[
        Path | None,
        typer.Option("--tenant-path", help="Tenant base path."),
    ] = None,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file."""
    obj = ctx.obj or {}
    config_path: Path = obj.get("config_path") or get_config_path()

    if config_path.exists() and not force:
        print_warning(f"Config already exists: {config_path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    values: dict[str, Path] = {}
    if app_root is not None:
        values["app_root"] = app_root.resolve()
    if temp_directory is not None:
        values["temp_directory"] = temp_directory
    if tenant_path is not None:
        values["tenant_path"] = tenant_path

    try:
        saved = save_config(ScratchConfig(**values), config_path)
    except ScratchConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
