# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from labtrack import configuration
from labtrack.i18n import LANGUAGES
from labtrack.repository.configuration import CONFIGURATION_REPO
from labtrack.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("language", config["language"])
    table.add_row("log_level", config["log_level"])
    table.add_row("data_path", str(configuration.DATA_PATH))
    table.add_row("config_path", str(configuration.APP_CONFIG_PATH))

    console.print(table)


@app.command("set, s", no_args_is_help=True)
def set_config(
    language: Annotated[
        Optional[str],
        typer.Option("--language", "-l", help=f"one of {', '.join(LANGUAGES)}"),
    ] = None,
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", help=", ".join(configuration.LOG_LEVELS)),
    ] = None,
    data_path: Annotated[
        Optional[str],
        typer.Option("--data-path", help="takes effect on the next run"),
    ] = None,
    remove_data_path: Annotated[
        bool, typer.Option("--remove-data-path", help="revert to the default data path")
    ] = False,
) -> None:
    """Update configuration settings."""
    try:
        CONFIGURATION_REPO.update_config(
            language=language,
            log_level=log_level,
            data_path=data_path,
            remove_data_path=remove_data_path,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    view()
