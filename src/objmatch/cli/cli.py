"""CLI application for catalog object matching."""

import typer

from objmatch.cli.commands.match import app as match_app

app = typer.Typer(
    help="objmatch - select catalog objects with include/exclude criteria",
    no_args_is_help=True,
)

app.add_typer(match_app, name="match")


if __name__ == "__main__":
    app()
