# SPDX-License-Identifier: MIT

import typer

from labtrack.terminal import add, configuration, sample
from labtrack.terminal.custom_typer import OrderedAliasedTyperGroup
from labtrack.terminal.dashboard import crush_dates, dashboard

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="labtrack - construction materials sample tracking in the CLI",
    no_args_is_help=True,
)
app.add_typer(add.app, name="add, a", help="Record a new sample")
app.add_typer(sample.app, name="sample, s", help="Browse and edit samples")
app.add_typer(configuration.app, name="config, c", help="View or change settings")
app.command(name="dashboard, d")(dashboard)
app.command(name="crush-dates, cd")(crush_dates)


def run() -> None:
    app()
