# SPDX-License-Identifier: MIT

from typing import Annotated, Optional, cast

import typer
from rich.console import Console
from rich.table import Table

from studysync import configuration
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _enabled(value: bool) -> str:
    return "✓ Enabled" if value else "✗ Disabled"


def _configuration_table(title: Optional[str] = None) -> Table:
    config = CONFIGURATION_REPO.get_config()

    table = Table(title=title)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("show_header", _enabled(config["show_header"]))
    table.add_row("strict_transitions", _enabled(config["strict_transitions"]))
    table.add_row("reconcile_on_startup", _enabled(config["reconcile_on_startup"]))
    table.add_row("log_level", config["log_level"])
    table.add_row("log_file", str(configuration.LOG_FILE_PATH))
    return table


@app.command("show, v")
def show() -> None:
    """Display current configuration settings."""
    console = Console()
    console.print(_configuration_table())

    yaml_library_type = "untested"
    try:
        from yaml import CDumper as Dumper  # noqa: F401
        from yaml import CLoader as Loader  # noqa: F401

        yaml_library_type = "C"
    except ImportError:
        yaml_library_type = "Python"

    console.print()
    console.print(f"YAML Library Type: {yaml_library_type}")


@app.command("set, s")
def set(
    data_path: Annotated[
        Optional[str],
        typer.Option(
            "--data-path",
            help="Directory path for storing data files",
        ),
    ] = None,
    remove_data_path: Annotated[
        bool,
        typer.Option(
            "--remove-data-path",
            help="Reset data path to the platform default",
        ),
    ] = False,
    show_header: Annotated[
        Optional[bool],
        typer.Option(
            "--show-header/--no-show-header",
            help="Enable/disable the header above reports",
        ),
    ] = None,
    strict_transitions: Annotated[
        Optional[bool],
        typer.Option(
            "--strict-transitions/--no-strict-transitions",
            help="Fail on out-of-order session transitions instead of ignoring them",
        ),
    ] = None,
    reconcile_on_startup: Annotated[
        Optional[bool],
        typer.Option(
            "--reconcile-on-startup/--no-reconcile-on-startup",
            help="Recompute goal delays on every invocation",
        ),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help="DEBUG, INFO, WARNING, ERROR"),
    ] = None,
) -> None:
    """
    Update configuration settings.
    """
    if log_level is not None:
        log_level = log_level.upper()
        if log_level not in LOG_LEVELS:
            typer.echo(
                f"Invalid log level: {log_level}. Valid options: {', '.join(LOG_LEVELS)}"
            )
            raise typer.Exit(1)

    CONFIGURATION_REPO.update_config(
        data_path=data_path,
        remove_data_path=remove_data_path,
        show_header=show_header,
        strict_transitions=strict_transitions,
        reconcile_on_startup=reconcile_on_startup,
        log_level=cast(Optional[configuration.LogLevel], log_level),
    )

    console = Console()
    console.print("[green]Configuration updated successfully![/green]\n")
    console.print(_configuration_table("Updated Configuration"))
