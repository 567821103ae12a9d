# SPDX-License-Identifier: MIT

from typing import Annotated

import typer

from studysync.terminal import configuration, goal, project, reflect, study
from studysync.terminal.custom_typer import OrderedTyperGroup
from studysync.terminal.score import score
from studysync.view import state as view_state

app = typer.Typer(
    cls=OrderedTyperGroup,
    help="studysync - Study and project session tracking with daily goals",
    no_args_is_help=True,
)
app.add_typer(study.app, name="study, s")
app.add_typer(project.app, name="project, p")
app.add_typer(goal.app, name="goal, g")
app.add_typer(reflect.app, name="reflect, r")
app.add_typer(configuration.app, name="config, c")
app.command(name="score, sc")(score)


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
) -> None:
    """
    studysync - Study and project session tracking with daily goals

    Global options that apply to all commands.
    """
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()
