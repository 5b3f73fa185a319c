"""Exit handling utilities for the CLI."""

from typing import NoReturn

import typer

from objmatch.cli.common.output import out

# Exit code for invalid user input (bad criteria, unreadable catalog files).
USAGE_ERROR = 2


def die(msg: str, code: int = 1) -> NoReturn:
    """Exit with an error message and optional exit code."""
    out.error(msg)
    raise typer.Exit(code)


def warn_exit(msg: str, code: int = 0) -> NoReturn:
    """Exit with a warning message and optional exit code."""
    out.warn(msg)
    raise typer.Exit(code)


def exit_from_exc(exc: Exception, *, message: str, code: int = 1) -> NoReturn:
    """
    Print an error message and exit with the given code, chaining `exc`.

    Exists to satisfy pylint W0707 and to standardize error exits.
    """
    out.error(message)
    raise typer.Exit(code) from exc
