from __future__ import annotations

import typer

from rollout import __version__
from rollout.cli.commands.deploy_cmd import deploy
from rollout.cli.commands.previous_tag import previous_tag


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# Commands
app.command()(deploy)
app.command("previous-tag")(previous_tag)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)


def main() -> None:
    app()
